from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterator, List, Tuple

from condgraph.graph.graph_store import GraphStore

logger = logging.getLogger("condgraph.cycles")


class _State(Enum):
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


class CycleDetector:
    """
    Depth-first cycle detection with three-state coloring.

    A cycle is recorded for every back-edge, i.e. an edge reaching a node
    still on the active DFS path. Edges into finished nodes are not followed,
    so cycles only reachable through an already explored node are not
    reported; this matches the behavior the service has always exposed.

    The traversal keeps an explicit stack of adjacency iterators instead of
    recursing, and visits nodes in the same order a recursive DFS would.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    def find_cycles(self) -> List[List[int]]:
        with self.store.lock:
            state: Dict[int, _State] = {
                node.id: _State.UNVISITED for node in self.store.get_nodes()
            }
            cycles: List[List[int]] = []

            for root in list(state):
                if state[root] is _State.UNVISITED:
                    self._visit(root, state, cycles)

        logger.debug("found %s cycles", len(cycles))
        return cycles

    def _visit(
        self,
        root: int,
        state: Dict[int, _State],
        cycles: List[List[int]],
    ) -> None:
        path: List[int] = [root]
        frames: List[Tuple[int, Iterator[int]]] = [
            (root, iter(self.store.neighbors(root)))
        ]
        state[root] = _State.IN_PROGRESS

        while frames:
            node_id, targets = frames[-1]
            target = next(targets, None)

            if target is None:
                frames.pop()
                path.pop()
                state[node_id] = _State.DONE
                continue

            if state[target] is _State.IN_PROGRESS:
                cycles.append(self._close_cycle(path, target))
            elif state[target] is _State.UNVISITED:
                state[target] = _State.IN_PROGRESS
                path.append(target)
                frames.append((target, iter(self.store.neighbors(target))))

    @staticmethod
    def _close_cycle(path: List[int], target: int) -> List[int]:
        """
        Walks the active path back to ``target`` and returns the closed walk
        in traversal order, starting and ending with ``target``.
        """
        cycle = [target]
        cursor = len(path) - 1
        while path[cursor] != target:
            cycle.append(path[cursor])
            cursor -= 1
        cycle.append(target)
        cycle.reverse()
        return cycle
