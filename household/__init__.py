"""
Household - Core domain logic for Hearth.

This package contains:
- names: Person display-name resolution (full name, graph label)
- graph: Relationship graph construction with condensed labels
- errors: Domain exception hierarchy
"""

from household.names import (
    PersonName,
    format_full_name,
    format_graph_label,
    format_person_name,
    is_present,
)

__all__ = [
    "PersonName",
    "format_full_name",
    "format_graph_label",
    "format_person_name",
    "is_present",
]
