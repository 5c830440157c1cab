"""Data models for the History Visualizer."""

from .entities import (
    EntityType,
    CharacterRole,
    RELATIONSHIP_LABELS,
    TimelineEvent,
    Location,
    GeoEvent,
    GeographyData,
    AnalyzedCharacter,
    AnalyzedRelationship,
    CharacterAnalysis
)

from .graph_schema import (
    Position,
    NodeData,
    GraphNode,
    GraphEdge,
    Graph,
    MindMapNode,
    MindMapEdge,
    MindMap,
    CharacterNode,
    CharacterEdge,
    CharacterNetwork
)

__all__ = [
    "EntityType",
    "CharacterRole",
    "RELATIONSHIP_LABELS",
    "TimelineEvent",
    "Location",
    "GeoEvent",
    "GeographyData",
    "AnalyzedCharacter",
    "AnalyzedRelationship",
    "CharacterAnalysis",
    "Position",
    "NodeData",
    "GraphNode",
    "GraphEdge",
    "Graph",
    "MindMapNode",
    "MindMapEdge",
    "MindMap",
    "CharacterNode",
    "CharacterEdge",
    "CharacterNetwork"
]
