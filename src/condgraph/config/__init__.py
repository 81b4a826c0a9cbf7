"""
Configuration layer for condgraph.

Configuration in condgraph is:
- Explicit (passed, not global)
- Typed (validated at construction time)
- Immutable once built
"""

from condgraph.config.settings import (
    GraphConfig,
    CondgraphConfig,
)

__all__ = [
    "GraphConfig",
    "CondgraphConfig",
]
