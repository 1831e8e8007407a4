"""
Delivery Router Module.

This module computes delivery tours over a weighted city graph using
all-pairs shortest paths and a nearest-neighbor tour heuristic.
"""

__version__ = '0.1.0'
