from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# ---------------------------------------------------------------------
# Node validation & condition grammar
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls how node payloads are validated before they reach the graph.
    """

    min_title_length: int = 3
    variable_prefix: str = "$"
    operators: Tuple[str, ...] = ("AND", "OR")


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class CondgraphConfig:
    """
    Root configuration object for condgraph.

    This object is intended to be:
    - constructed explicitly
    - passed to the store at construction time
    - treated as immutable policy
    """

    graph: GraphConfig = GraphConfig()
