"""
NeighborFit: matching entre usuarios y barrios según 13 factores de estilo de vida.
"""

__version__ = "1.0.0"
