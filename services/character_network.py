"""
Character Network Builder for the History Visualizer.
Arranges the figures found in the text as a hub-and-spoke relationship graph.
"""

from typing import List, Dict, Any, Tuple

from config import PLACEHOLDER_FIGURES, Settings, get_settings, get_logger
from models.entities import CharacterRole, EntityType, RELATIONSHIP_LABELS
from models.graph_schema import (
    CharacterNetwork,
    CharacterNode,
    CharacterEdge,
    NodeData,
    Position
)
from services.text_extraction import require_text, extract_key_figures

logger = get_logger(__name__)


HUB_ID = "char1"

# Spokes cycle through these; index i and i + 4 share an anchor.
QUADRANT_ANCHORS: List[Tuple[float, float]] = [
    (100.0, 100.0),
    (400.0, 100.0),
    (100.0, 400.0),
    (400.0, 400.0),
]

ENTITY_TYPE_CYCLE: List[EntityType] = list(EntityType)

PRIMARY = "hsl(var(--primary))"
DESTRUCTIVE = "hsl(var(--destructive))"

_ROUND = {
    "borderRadius": "50%",
    "padding": "10px",
    "display": "flex",
    "justifyContent": "center",
    "alignItems": "center",
    "textAlign": "center",
}


def hub_style() -> Dict[str, Any]:
    return {
        "background": PRIMARY,
        "color": "white",
        "border": "none",
        "width": 150,
        "height": 150,
        **_ROUND,
    }


def spoke_style(role: CharacterRole) -> Dict[str, Any]:
    is_ally = role != CharacterRole.OPPONENT
    return {
        "background": "white" if is_ally else DESTRUCTIVE,
        "color": "black" if is_ally else "white",
        "border": "1px solid #ccc" if is_ally else "none",
        "width": 100,
        "height": 100,
        **_ROUND,
    }


def edge_style(role: CharacterRole) -> Dict[str, Any]:
    return {"stroke": DESTRUCTIVE if role == CharacterRole.OPPONENT else PRIMARY}


def make_hub(label: str, center: Tuple[float, float]) -> CharacterNode:
    """Leader node placed at the canvas anchor."""
    return CharacterNode(
        id=HUB_ID,
        data=NodeData(label=label, role=CharacterRole.LEADER, entity_type=EntityType.PERSON),
        position=Position(x=center[0], y=center[1]),
        style=hub_style()
    )


class CharacterNetworkBuilder:
    """
    Builds the character network for a block of text.

    The first figure is the leader at the centre. The others alternate
    between ally and opponent, cycle through entity types and quadrant
    anchors, and each link back to the leader only.
    """

    def __init__(self, settings: Settings = None):
        self.settings = settings or get_settings()

    def build(self, text: str) -> CharacterNetwork:
        require_text(text)
        figures = extract_key_figures(text, limit=self.settings.max_key_figures)
        if not figures:
            logger.debug("No key figures found, using placeholder names")
            figures = list(PLACEHOLDER_FIGURES)
        return self.build_from_figures(figures)

    def build_from_figures(self, figures: List[str]) -> CharacterNetwork:
        """
        Lay out an already-extracted list of figures.

        Args:
            figures: Names, leader first

        Returns:
            CharacterNetwork rooted at "char1"
        """
        figures = figures or list(PLACEHOLDER_FIGURES)
        nodes = [make_hub(figures[0], self.settings.canvas_center)]
        edges = []

        for index, figure in enumerate(figures[1:]):
            role = CharacterRole.ALLY if index % 2 == 0 else CharacterRole.OPPONENT
            entity_type = ENTITY_TYPE_CYCLE[index % len(ENTITY_TYPE_CYCLE)]
            x, y = QUADRANT_ANCHORS[index % len(QUADRANT_ANCHORS)]
            node_id = f"char{index + 2}"

            nodes.append(CharacterNode(
                id=node_id,
                data=NodeData(label=figure, role=role, entity_type=entity_type),
                position=Position(x=x, y=y),
                style=spoke_style(role)
            ))
            edges.append(CharacterEdge(
                id=f"e1-{index + 2}",
                source=HUB_ID,
                target=node_id,
                animated=True,
                label=RELATIONSHIP_LABELS[index % len(RELATIONSHIP_LABELS)],
                style=edge_style(role)
            ))

        logger.info(f"Built character network with {len(nodes)} nodes")
        return CharacterNetwork(nodes=nodes, edges=edges)


def process_character_network_data(text: str) -> Dict[str, Any]:
    """Build the character network as a JSON-ready dict (convenience function)."""
    return CharacterNetworkBuilder().build(text).to_dict()
