from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Set, Tuple

from condgraph.graph.errors import NodeNotFoundError, UnreachableError
from condgraph.graph.graph_store import GraphStore

logger = logging.getLogger("condgraph.query")


class PathFinder:
    """
    Unweighted shortest-path search over a ``GraphStore``.

    Distances are hop counts. The store lock is held for the whole search so
    the traversal sees a single consistent graph.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    def shortest_path(self, source: int, target: int) -> int:
        with self.store.lock:
            if not self.store.has_node(source):
                raise NodeNotFoundError(source)
            if not self.store.has_node(target):
                raise NodeNotFoundError(target)

            if source == target:
                return 0

            queue: Deque[Tuple[int, int]] = deque([(source, 0)])
            visited: Set[int] = set()

            while queue:
                node_id, distance = queue.popleft()

                for neighbor in self.store.neighbors(node_id):
                    if neighbor not in visited:
                        visited.add(neighbor)
                        queue.append((neighbor, distance + 1))

                    if neighbor == target:
                        logger.debug(
                            "path %s -> %s found at distance %s",
                            source,
                            target,
                            distance + 1,
                        )
                        return distance + 1

        raise UnreachableError(source, target)
