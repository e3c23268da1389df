"""
API Routers - Organized endpoint handlers for the Hearth API.

Each router handles a specific domain:
- names: Full-name and graph-label formatting for people
- graph: Relationship graph with condensed node labels
"""
