from fastapi import APIRouter, Depends, Response

from condgraph.graph.graph_store import GraphStore
from condgraph.graph.graph_query import PathFinder
from condgraph.graph.cycles import CycleDetector
from condgraph.graph.errors import NodeNotFoundError

from backend.app.api.errors import ApiError
from backend.app.api.schemas import (
    NodeResponse,
    DistanceResponse,
    GraphStatsResponse,
)
from backend.app.dependencies import (
    get_graph_store,
    get_path_finder,
    get_cycle_detector,
)

router = APIRouter()

# Edge and path routes report unknown endpoints as a bad request rather than
# a missing resource.


@router.get("/connect/{source}/{target}", response_model=NodeResponse)
def connect(
    source: int,
    target: int,
    graph: GraphStore = Depends(get_graph_store),
):
    try:
        node = graph.connect(source, target)
    except NodeNotFoundError as exc:
        raise ApiError(400, str(exc)) from exc
    return node.to_dict()


@router.delete("/connect/{source}/{target}")
def disconnect(
    source: int,
    target: int,
    graph: GraphStore = Depends(get_graph_store),
):
    try:
        graph.disconnect(source, target)
    except NodeNotFoundError as exc:
        raise ApiError(400, str(exc)) from exc
    return Response(status_code=200)


@router.get("/shortest-path/{source}/{target}", response_model=DistanceResponse)
def shortest_path(
    source: int,
    target: int,
    finder: PathFinder = Depends(get_path_finder),
):
    try:
        distance = finder.shortest_path(source, target)
    except NodeNotFoundError as exc:
        raise ApiError(400, str(exc)) from exc
    return DistanceResponse(distance=distance)


@router.get("/cycles", response_model=list[list[int]])
def cycles(detector: CycleDetector = Depends(get_cycle_detector)):
    return detector.find_cycles()


@router.get("/graph/stats", response_model=GraphStatsResponse)
def graph_stats(graph: GraphStore = Depends(get_graph_store)):
    return GraphStatsResponse(
        nodes=graph.node_count(),
        edges=graph.edge_count(),
        metadata=graph.metadata,
    )
