"""Symbols, temporaries, graphs, syntax trees and instruction lists for an FDMJ compiler."""

__version__ = "0.1.0"