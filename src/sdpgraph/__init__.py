"""
Structural inspection of semantic dependency graphs: acyclicity,
tree-ness, projectivity, connectivity and degree bounds.
"""

from .graph import SDPGraph, SDPGraphException
from .inspected_graph import InspectedGraph

__version__ = "0.1.0"
