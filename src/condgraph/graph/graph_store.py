from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List

import networkx as nx

from condgraph.config.settings import GraphConfig
from condgraph.graph.conditions import is_valid_condition
from condgraph.graph.errors import (
    EdgeConflictError,
    NodeNotFoundError,
    ValidationError,
)
from condgraph.graph.graph_schema import Node

logger = logging.getLogger("condgraph.store")


class GraphStore:
    """
    Authoritative in-memory graph representation.

    Nodes are keyed by id in a ``networkx.DiGraph`` whose iteration order is
    insertion order. Each stored ``Node`` keeps its own adjacency tuple, which
    is the source of truth for outgoing edges and may contain ids of deleted
    nodes. Edges whose endpoints both exist are mirrored into the DiGraph.

    Every public method holds ``lock`` for its full duration; readers that
    traverse several nodes should hold it as well.
    """

    def __init__(self, config: GraphConfig | None = None) -> None:
        self.config = config or GraphConfig()
        self.lock = threading.RLock()
        self.metadata: Dict[str, Any] = {}
        self._graph = nx.DiGraph()
        self._next_id = 0

    # -------------------- Validation --------------------

    def _check_title(self, title: str) -> None:
        if len(title) < self.config.min_title_length:
            raise ValidationError(
                f"title must be at least {self.config.min_title_length} characters long"
            )

    def _check_condition(self, condition: str) -> None:
        if not is_valid_condition(
            condition,
            variable_prefix=self.config.variable_prefix,
            operators=self.config.operators,
        ):
            raise ValidationError("invalid condition")

    # -------------------- Nodes --------------------

    def create(self, title: str, description: str, condition: str) -> Node:
        with self.lock:
            self._check_title(title)
            if not description:
                raise ValidationError("description must not be empty")
            self._check_condition(condition)

            node = Node.create(self._next_id, title, description, condition)
            self._next_id += 1
            self._graph.add_node(node.id, data=node)

        logger.debug("created node %s", node.id)
        return node

    def get(self, node_id: int) -> Node:
        with self.lock:
            if node_id not in self._graph:
                raise NodeNotFoundError(node_id)
            return self._graph.nodes[node_id]["data"]

    def update(
        self,
        node_id: int,
        *,
        title: str | None = None,
        description: str | None = None,
        condition: str | None = None,
    ) -> Node:
        with self.lock:
            current = self.get(node_id)

            # All present fields are checked before any is applied.
            if title is not None:
                self._check_title(title)
            if condition is not None:
                self._check_condition(condition)

            node = current.with_fields(
                title=title,
                description=description,
                condition=condition,
            )
            self._graph.nodes[node_id]["data"] = node

        logger.debug("updated node %s", node_id)
        return node

    def delete(self, node_id: int) -> None:
        with self.lock:
            if node_id not in self._graph:
                raise NodeNotFoundError(node_id)
            self._graph.remove_node(node_id)

        logger.debug("deleted node %s", node_id)

    def has_node(self, node_id: int) -> bool:
        with self.lock:
            return node_id in self._graph

    def get_nodes(self) -> List[Node]:
        with self.lock:
            return [data["data"] for _, data in self._graph.nodes(data=True)]

    # -------------------- Edges --------------------

    def connect(self, source: int, target: int) -> Node:
        with self.lock:
            node = self.get(source)
            self.get(target)

            if target in node.adjacency:
                raise EdgeConflictError(
                    source,
                    target,
                    f"a link from {source} to {target} already exists",
                )

            node = node.with_edge(target)
            self._graph.nodes[source]["data"] = node
            self._graph.add_edge(source, target)

        logger.debug("connected %s -> %s", source, target)
        return node

    def disconnect(self, source: int, target: int) -> None:
        with self.lock:
            node = self.get(source)
            self.get(target)

            if target not in node.adjacency:
                raise EdgeConflictError(
                    source,
                    target,
                    f"no link from {source} to {target}",
                )

            self._graph.nodes[source]["data"] = node.without_edge(target)
            if self._graph.has_edge(source, target):
                self._graph.remove_edge(source, target)

        logger.debug("disconnected %s -> %s", source, target)

    def neighbors(self, node_id: int) -> List[int]:
        """
        Outgoing targets of ``node_id`` in stored order, dangling ids dropped.
        """
        with self.lock:
            if node_id not in self._graph:
                return []
            node = self._graph.nodes[node_id]["data"]
            return [t for t in node.adjacency if t in self._graph]

    # -------------------- Analytics --------------------

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    # -------------------- Lifecycle --------------------

    def clear(self) -> None:
        with self.lock:
            self._graph.clear()
            self._next_id = 0
            self.metadata.clear()
