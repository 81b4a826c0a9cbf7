"""
condgraph
=========

An in-memory directed graph of condition-carrying nodes.

Core idea:
- Nodes hold a title, a description and a boolean condition over
  ``$``-prefixed variables; directed edges link them.

Public API:
- GraphStore
- PathFinder
- CycleDetector
- is_valid_condition
"""

from condgraph.graph.graph_store import GraphStore
from condgraph.graph.graph_query import PathFinder
from condgraph.graph.cycles import CycleDetector
from condgraph.graph.conditions import is_valid_condition

__all__ = [
    "GraphStore",
    "PathFinder",
    "CycleDetector",
    "is_valid_condition",
]

__version__ = "0.1.0"
