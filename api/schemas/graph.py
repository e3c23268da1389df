"""
Pydantic schemas for relationship graph endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from household.names import PersonName


class GraphPerson(PersonName):
    """Person record with the id used as graph node key"""

    id: int | str


class GraphRelationship(BaseModel):
    """Relationship between two people"""

    source: int | str
    target: int | str
    type: str = Field(min_length=1)  # 'parent', 'sibling', 'partner', ...


class RelationshipGraphRequest(BaseModel):
    """Request body for building a relationship graph"""

    people: list[GraphPerson]
    relationships: list[GraphRelationship] = []
    include_layout: bool = False


class RelationshipGraphNode(BaseModel):
    """Node in the relationship graph"""

    id: int | str
    label: str  # condensed graph label
    full_name: str


class RelationshipGraphEdge(BaseModel):
    """Edge in the relationship graph"""

    source: int | str
    target: int | str
    types: list[str]


class RelationshipGraphResponse(BaseModel):
    """Complete relationship graph data"""

    nodes: list[RelationshipGraphNode]
    edges: list[RelationshipGraphEdge]
    layout_positions: dict[int | str, tuple[float, float]] | None = None  # node_id -> (x, y)
