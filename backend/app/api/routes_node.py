from fastapi import APIRouter, Depends, Response

from condgraph.graph.graph_store import GraphStore
from condgraph.graph.errors import ValidationError

from backend.app.api.errors import ApiError
from backend.app.api.schemas import (
    NodeCreateRequest,
    NodeUpdateRequest,
    NodeResponse,
)
from backend.app.dependencies import get_graph_store

router = APIRouter()


@router.get("/{node_id}", response_model=NodeResponse)
def get_node(node_id: int, graph: GraphStore = Depends(get_graph_store)):
    return graph.get(node_id).to_dict()


@router.post("", response_model=NodeResponse)
def create_node(
    request: NodeCreateRequest,
    graph: GraphStore = Depends(get_graph_store),
):
    node = graph.create(
        title=request.titre,
        description=request.description,
        condition=request.condition,
    )
    return node.to_dict()


@router.put("/{node_id}", response_model=NodeResponse)
def update_node(
    node_id: int,
    request: NodeUpdateRequest,
    graph: GraphStore = Depends(get_graph_store),
):
    try:
        node = graph.update(
            node_id,
            title=request.titre,
            description=request.description,
            condition=request.condition,
        )
    except ValidationError as exc:
        raise ApiError(400, f"invalid data: {exc}") from exc
    return node.to_dict()


@router.delete("/{node_id}")
def delete_node(node_id: int, graph: GraphStore = Depends(get_graph_store)):
    graph.delete(node_id)
    return Response(status_code=200)
