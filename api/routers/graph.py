"""
Relationship Graph Router - Builds labelled relationship graphs for visualization.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from household.errors import GraphError
from household.graph import RelationshipGraphBuilder, to_payload

from ..schemas import RelationshipGraphRequest, RelationshipGraphResponse
from ..settings import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/relationships", tags=["relationship-graph"])


@router.post("/graph")
async def build_relationship_graph(request: RelationshipGraphRequest) -> RelationshipGraphResponse:
    """Build the relationship graph for the supplied people.

    Node labels use the condensed graph label (nickname or given name plus
    surname); the full name travels alongside for tooltips.

    Raises:
        HTTPException 413: more people than MAX_BATCH_SIZE
        HTTPException 422: two people share an id, or a relationship references
            an unknown person or relates a person to themselves
    """
    settings = get_settings()
    if len(request.people) > settings.max_batch_size:
        logger.warning(
            f"Rejected relationship graph of {len(request.people)} people (limit {settings.max_batch_size})"
        )
        raise HTTPException(
            status_code=413,
            detail=f"Graph of {len(request.people)} people exceeds limit of {settings.max_batch_size}",
        )

    people = [(person.id, person) for person in request.people]
    relationships = [(rel.source, rel.target, rel.type) for rel in request.relationships]

    try:
        graph = RelationshipGraphBuilder(people, relationships).build()
    except GraphError as e:
        logger.warning(f"Invalid relationship graph request: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e

    logger.info(f"Built relationship graph with {graph.number_of_nodes()} people")
    payload = to_payload(graph, include_layout=request.include_layout, seed=settings.graph_random_seed)
    return RelationshipGraphResponse(**payload)
