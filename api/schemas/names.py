"""
Pydantic schemas for name formatting endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel

from household.names import PersonName


class FormattedName(BaseModel):
    """Both display forms for one person"""

    full_name: str  # "Matias 'Matto' Alejandro Godoy Biedma"
    graph_label: str  # "Matto Godoy"


class FormatNamesBatchRequest(BaseModel):
    """Request body for formatting many people at once"""

    people: list[PersonName]


class FormatNamesBatchResponse(BaseModel):
    """Formatted names, in request order"""

    items: list[FormattedName]
