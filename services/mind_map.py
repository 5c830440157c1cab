"""
Mind Map Builder for the History Visualizer.
Lays concepts out as a star: one central topic, the rest on a circle.
"""

import math
from typing import Dict, Any

from config import DEFAULT_TOPIC, Settings, get_settings, get_logger
from models.graph_schema import MindMap, MindMapNode, MindMapEdge, NodeData, Position
from services.text_extraction import require_text, extract_concepts

logger = get_logger(__name__)


CENTRAL_ID = "central"

CENTRAL_STYLE = {
    "background": "hsl(var(--primary))",
    "color": "white",
    "border": "none",
    "borderRadius": "8px",
    "padding": "10px",
    "width": 180,
}

CONCEPT_STYLE = {
    "borderRadius": "8px",
    "padding": "10px",
    "background": "white",
    "color": "black",
    "border": "1px solid #e2e8f0",
    "width": 150,
}


class MindMapBuilder:
    """Builds a depth-1 concept graph around the first concept in the text."""

    def __init__(self, settings: Settings = None):
        self.settings = settings or get_settings()

    def build(self, text: str) -> MindMap:
        """
        Build the mind map for a block of text.

        Args:
            text: Source text

        Returns:
            MindMap with one central node and one edge per other concept
        """
        require_text(text)
        concepts = extract_concepts(text, limit=self.settings.max_concepts)
        central_topic = concepts[0] if concepts else DEFAULT_TOPIC
        center_x, center_y = self.settings.canvas_center
        radius = self.settings.mind_map_radius

        nodes = [
            MindMapNode(
                id=CENTRAL_ID,
                type="input",
                data=NodeData(label=central_topic),
                position=Position(x=center_x, y=center_y),
                style=dict(CENTRAL_STYLE)
            )
        ]
        edges = []

        others = concepts[1:]
        for index, concept in enumerate(others):
            angle = index * 2 * math.pi / len(others)
            node_id = f"concept-{index}"
            nodes.append(MindMapNode(
                id=node_id,
                type="default",
                data=NodeData(label=concept),
                position=Position(
                    x=center_x + math.cos(angle) * radius,
                    y=center_y + math.sin(angle) * radius
                ),
                style=dict(CONCEPT_STYLE)
            ))
            edges.append(MindMapEdge(
                id=f"e-{CENTRAL_ID}-{node_id}",
                source=CENTRAL_ID,
                target=node_id,
                animated=True,
                label="Related to"
            ))

        logger.info(f"Built mind map around '{central_topic}' with {len(edges)} branches")
        return MindMap(nodes=nodes, edges=edges)


def process_mind_map_data(text: str) -> Dict[str, Any]:
    """Build the mind map as a JSON-ready dict (convenience function)."""
    return MindMapBuilder().build(text).to_dict()
