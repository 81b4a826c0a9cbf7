from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Node:
    """
    Labeled vertex carrying a boolean condition and its outgoing edges.

    ``adjacency`` lists target ids in insertion order. Targets may refer to
    nodes that have since been deleted.
    """

    id: int
    title: str
    description: str
    condition: str
    adjacency: Tuple[int, ...] = field(default_factory=tuple)

    @staticmethod
    def create(
        node_id: int,
        title: str,
        description: str,
        condition: str,
    ) -> "Node":
        return Node(
            id=node_id,
            title=title,
            description=description,
            condition=condition,
            adjacency=(),
        )

    def with_fields(
        self,
        *,
        title: str | None = None,
        description: str | None = None,
        condition: str | None = None,
    ) -> "Node":
        return Node(
            id=self.id,
            title=self.title if title is None else title,
            description=self.description if description is None else description,
            condition=self.condition if condition is None else condition,
            adjacency=self.adjacency,
        )

    def with_edge(self, target: int) -> "Node":
        return Node(
            id=self.id,
            title=self.title,
            description=self.description,
            condition=self.condition,
            adjacency=self.adjacency + (target,),
        )

    def without_edge(self, target: int) -> "Node":
        adjacency = list(self.adjacency)
        adjacency.remove(target)
        return Node(
            id=self.id,
            title=self.title,
            description=self.description,
            condition=self.condition,
            adjacency=tuple(adjacency),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "titre": self.title,
            "description": self.description,
            "condition": self.condition,
            "list_adj": list(self.adjacency),
        }
