"""
Names Router - Endpoints that format person display names.

UI components post the raw name components and render the returned strings.
No escaping is applied here; the rendering layer is responsible for it.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from household.names import PersonName, format_full_name, format_graph_label

from ..schemas import FormatNamesBatchRequest, FormatNamesBatchResponse, FormattedName
from ..settings import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/names", tags=["names"])


def _format(person: PersonName) -> FormattedName:
    return FormattedName(full_name=format_full_name(person), graph_label=format_graph_label(person))


@router.post("/format")
async def format_name(person: PersonName) -> FormattedName:
    """Return the full name and graph label for one person."""
    return _format(person)


@router.post("/format/batch")
async def format_names_batch(request: FormatNamesBatchRequest) -> FormatNamesBatchResponse:
    """Format many people at once, preserving request order.

    Raises:
        HTTPException 413: more people than MAX_BATCH_SIZE
    """
    max_batch_size = get_settings().max_batch_size
    if len(request.people) > max_batch_size:
        logger.warning(f"Rejected name batch of {len(request.people)} people (limit {max_batch_size})")
        raise HTTPException(
            status_code=413,
            detail=f"Batch of {len(request.people)} people exceeds limit of {max_batch_size}",
        )

    logger.debug(f"Formatting names for {len(request.people)} people")
    return FormatNamesBatchResponse(items=[_format(person) for person in request.people])
