"""
Relationship graph construction with condensed person labels.

Nodes are people keyed by their id and carry both display forms:
- label: graph label ("Matto Godoy")
- full_name: full name ("Matias 'Matto' Alejandro Godoy Biedma")

Edges carry every relationship type recorded between the two people.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping
from typing import Any

import networkx as nx

from household.errors import DuplicatePersonError, InvalidRelationshipError, UnknownPersonError
from household.logging_config import TRACE
from household.names import PersonName, format_full_name, format_graph_label

logger = logging.getLogger(__name__)

Relationship = tuple[Hashable, Hashable, str] | Mapping[str, Any]


def _unpack_relationship(relationship: Relationship) -> tuple[Hashable, Hashable, str]:
    if isinstance(relationship, Mapping):
        return relationship["source"], relationship["target"], relationship["type"]
    source, target, relationship_type = relationship
    return source, target, relationship_type


class RelationshipGraphBuilder:
    """Builds an undirected NetworkX graph of people and their relationships."""

    def __init__(
        self,
        people: Mapping[Hashable, Any] | Iterable[tuple[Hashable, Any]],
        relationships: Iterable[Relationship] = (),
    ):
        """
        Args:
            people: Mapping of person id to name record, or (id, record) pairs.
                Pairs are checked for repeated ids.
            relationships: (source, target, type) tuples or mappings with
                source/target/type keys

        Raises:
            DuplicatePersonError: an id appears more than once in the pairs
        """
        pairs = people.items() if isinstance(people, Mapping) else people
        self.people: dict[Hashable, PersonName] = {}
        for person_id, record in pairs:
            if person_id in self.people:
                raise DuplicatePersonError(person_id)
            self.people[person_id] = PersonName.from_record(record)
        self.relationships = list(relationships)

    def build(self) -> nx.Graph:
        graph = nx.Graph()

        for person_id, name in self.people.items():
            graph.add_node(
                person_id,
                label=format_graph_label(name),
                full_name=format_full_name(name),
            )
            if logger.isEnabledFor(TRACE):
                logger.log(TRACE, f"Person {person_id}: {name.model_dump(exclude_none=True)}")

        for relationship in self.relationships:
            source, target, relationship_type = _unpack_relationship(relationship)
            if source not in self.people:
                raise UnknownPersonError(source)
            if target not in self.people:
                raise UnknownPersonError(target)
            if source == target:
                raise InvalidRelationshipError(f"Person {source} cannot have a relationship with themselves")

            if graph.has_edge(source, target):
                types = graph.edges[source, target]["types"]
                if relationship_type not in types:
                    types.append(relationship_type)
            else:
                graph.add_edge(source, target, types=[relationship_type])

        logger.debug(f"Built relationship graph: {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges")
        return graph


def layout(graph: nx.Graph, seed: int = 42) -> dict[Hashable, tuple[float, float]]:
    """Deterministic spring layout positions for each node."""
    if graph.number_of_nodes() == 0:
        return {}
    positions = nx.spring_layout(graph, seed=seed)
    return {node: (float(pos[0]), float(pos[1])) for node, pos in positions.items()}


def to_payload(graph: nx.Graph, include_layout: bool = False, seed: int = 42) -> dict[str, Any]:
    """Serialize a relationship graph into JSON-ready nodes and edges."""
    nodes = [
        {"id": node, "label": attrs["label"], "full_name": attrs["full_name"]}
        for node, attrs in graph.nodes(data=True)
    ]
    edges = [
        {"source": source, "target": target, "types": list(attrs["types"])}
        for source, target, attrs in graph.edges(data=True)
    ]
    return {
        "nodes": nodes,
        "edges": edges,
        "layout_positions": layout(graph, seed=seed) if include_layout else None,
    }
