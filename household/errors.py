"""Exception hierarchy for the household domain package.

Name formatting itself never raises; these cover callers that assemble
people into larger structures.
"""

from __future__ import annotations


class HearthError(Exception):
    """Base exception for household domain errors."""

    pass


class GraphError(HearthError):
    """Raised when a relationship graph cannot be built from its input."""

    pass


class UnknownPersonError(GraphError):
    """Raised when a relationship references a person id that was not supplied."""

    def __init__(self, person_id: object):
        self.person_id = person_id
        super().__init__(f"Relationship references unknown person: {person_id}")


class InvalidRelationshipError(GraphError):
    """Raised when a relationship is structurally invalid (e.g. self-referencing)."""

    pass


class DuplicatePersonError(GraphError):
    """Raised when two people in the same graph request share an id."""

    def __init__(self, person_id: object):
        self.person_id = person_id
        super().__init__(f"Duplicate person id: {person_id}")
