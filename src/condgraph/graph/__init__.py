"""
Graph subsystem for condgraph.

Defines the node store and the read-only analyses run over it:
- condition grammar validation
- hop-count shortest paths
- cycle detection
"""

from condgraph.graph.graph_schema import Node
from condgraph.graph.graph_store import GraphStore
from condgraph.graph.graph_query import PathFinder
from condgraph.graph.cycles import CycleDetector
from condgraph.graph.conditions import is_valid_condition
from condgraph.graph.errors import (
    GraphError,
    ValidationError,
    NodeNotFoundError,
    EdgeConflictError,
    UnreachableError,
)

__all__ = [
    "Node",
    "GraphStore",
    "PathFinder",
    "CycleDetector",
    "is_valid_condition",
    "GraphError",
    "ValidationError",
    "NodeNotFoundError",
    "EdgeConflictError",
    "UnreachableError",
]
