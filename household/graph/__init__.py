"""
Relationship graph components for visualization
"""

from .relationship_graph import RelationshipGraphBuilder, layout, to_payload

__all__ = ["RelationshipGraphBuilder", "layout", "to_payload"]
