from __future__ import annotations


class GraphError(Exception):
    """
    Base class for every recoverable failure raised by the graph engine.
    """


class ValidationError(GraphError):
    """
    Malformed title, description or condition.
    """


class NodeNotFoundError(GraphError):
    def __init__(self, node_id: int) -> None:
        super().__init__(f"node {node_id} does not exist")
        self.node_id = node_id


class EdgeConflictError(GraphError):
    """
    Duplicate edge on connect, or missing edge on disconnect.
    """

    def __init__(self, source: int, target: int, message: str) -> None:
        super().__init__(message)
        self.source = source
        self.target = target


class UnreachableError(GraphError):
    def __init__(self, source: int, target: int) -> None:
        super().__init__(f"no path from {source} to {target}")
        self.source = source
        self.target = target
