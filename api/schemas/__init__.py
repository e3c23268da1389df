"""
Pydantic schemas for the Hearth API.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from .graph import (
    GraphPerson,
    GraphRelationship,
    RelationshipGraphEdge,
    RelationshipGraphNode,
    RelationshipGraphRequest,
    RelationshipGraphResponse,
)
from .names import FormatNamesBatchRequest, FormatNamesBatchResponse, FormattedName

__all__ = [
    # Names
    "FormatNamesBatchRequest",
    "FormatNamesBatchResponse",
    "FormattedName",
    # Relationship Graph
    "GraphPerson",
    "GraphRelationship",
    "RelationshipGraphEdge",
    "RelationshipGraphNode",
    "RelationshipGraphRequest",
    "RelationshipGraphResponse",
]
