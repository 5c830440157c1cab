"""
Graph schema definitions for the History Visualizer.
Defines node, edge and graph containers for the mind map and the
character network, in the shape node/edge canvas renderers consume.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .entities import CharacterRole, EntityType


class Position(BaseModel):
    """Canvas coordinates of a node."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class NodeData(BaseModel):
    """Payload rendered inside a node."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    label: str
    role: Optional[CharacterRole] = None
    entity_type: Optional[EntityType] = Field(default=None, alias="entityType")

    @field_validator('label')
    @classmethod
    def label_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Node label cannot be empty")
        return v


class GraphNode(BaseModel):
    """Base node: identifier, payload, placement and inline style."""
    model_config = ConfigDict(frozen=True)

    id: str
    type: str = "default"
    data: NodeData
    position: Position
    style: Dict[str, Any] = Field(default_factory=dict)

    @property
    def label(self) -> str:
        return self.data.label

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class GraphEdge(BaseModel):
    """Base edge between two node ids."""
    model_config = ConfigDict(frozen=True)

    id: str
    source: str
    target: str
    label: str
    animated: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self.model_dump(mode="json", exclude_none=True)


class MindMapNode(GraphNode):
    """Concept node; the root carries type "input"."""

    @property
    def is_central(self) -> bool:
        return self.type == "input"


class MindMapEdge(GraphEdge):
    """Animated "Related to" edge from the central concept."""
    label: str = "Related to"


class CharacterNode(GraphNode):
    """Figure node carrying a role and an entity type."""
    type: str = "entity"

    @property
    def role(self) -> Optional[CharacterRole]:
        return self.data.role


class CharacterEdge(GraphEdge):
    """Relationship edge; the stroke colour follows the target's role."""
    style: Dict[str, Any] = Field(default_factory=dict)


class Graph(BaseModel):
    """Nodes plus edges, serialized as {"nodes": [...], "edges": [...]}."""
    model_config = ConfigDict(frozen=True)

    nodes: List[GraphNode] = Field(default_factory=list)
    edges: List[GraphEdge] = Field(default_factory=list)

    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        return next((n for n in self.nodes if n.id == node_id), None)

    def relationships_for(self, node_id: str) -> List[Dict[str, Any]]:
        """
        List the edges touching a node together with the node on the other end.

        Args:
            node_id: Node to inspect

        Returns:
            One dict per edge with "edge", "label" and "other" keys
        """
        related = []
        for edge in self.edges:
            if node_id not in (edge.source, edge.target):
                continue
            other_id = edge.target if edge.source == node_id else edge.source
            other = self.get_node(other_id)
            related.append({
                "edge": edge.id,
                "label": edge.label,
                "other": other.label if other else other_id
            })
        return related

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges]
        }


class MindMap(Graph):
    """Star graph: one central concept, every other concept linked to it."""
    nodes: List[MindMapNode] = Field(default_factory=list)
    edges: List[MindMapEdge] = Field(default_factory=list)

    @property
    def central(self) -> MindMapNode:
        return next(node for node in self.nodes if node.is_central)


class CharacterNetwork(Graph):
    """Hub-and-spoke relationship graph rooted at the leader node."""
    nodes: List[CharacterNode] = Field(default_factory=list)
    edges: List[CharacterEdge] = Field(default_factory=list)

    @property
    def hub(self) -> CharacterNode:
        return self.nodes[0]
