from functools import lru_cache
import logging

from fastapi import Depends

from condgraph.graph.graph_store import GraphStore
from condgraph.graph.graph_query import PathFinder
from condgraph.graph.cycles import CycleDetector

from backend.app.config import AppConfig


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


@lru_cache
def get_graph_store() -> GraphStore:
    config = get_config()
    graph = GraphStore(config.condgraph.graph)
    graph.metadata["source"] = "backend"
    logging.getLogger("condgraph.startup").info(
        "[startup] graph store ready (min_title_length=%s, operators=%s)",
        config.condgraph.graph.min_title_length,
        ",".join(config.condgraph.graph.operators),
    )
    return graph


def get_path_finder(graph: GraphStore = Depends(get_graph_store)) -> PathFinder:
    return PathFinder(graph)


def get_cycle_detector(
    graph: GraphStore = Depends(get_graph_store),
) -> CycleDetector:
    return CycleDetector(graph)
