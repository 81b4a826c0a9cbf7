from typing import List, Dict, Any, Optional
from pydantic import BaseModel, Field


class NodeCreateRequest(BaseModel):
    titre: str = Field(min_length=3)
    description: str = Field(min_length=1)
    condition: str = Field(min_length=1)


class NodeUpdateRequest(BaseModel):
    titre: Optional[str] = None
    description: Optional[str] = None
    condition: Optional[str] = None


class NodeResponse(BaseModel):
    id: int
    titre: str
    description: str
    condition: str
    list_adj: List[int]


class DistanceResponse(BaseModel):
    distance: int


class GraphStatsResponse(BaseModel):
    nodes: int
    edges: int
    metadata: Dict[str, Any]


class ErrorResponse(BaseModel):
    error: str
