"""
Character Analysis Service for the History Visualizer.
Asks an LLM for characters and relationships and lays the answer out in
the same node/edge shape as the heuristic character network.
"""

import json
import math
import re
from typing import Optional

from openai import AsyncOpenAI
from pydantic import ValidationError

from config import Settings, get_settings, get_logger
from models.entities import (
    AnalyzedCharacter,
    AnalyzedRelationship,
    CharacterAnalysis,
    CharacterRole
)
from models.graph_schema import (
    CharacterNetwork,
    CharacterNode,
    CharacterEdge,
    NodeData,
    Position
)
from services.character_network import HUB_ID, make_hub, spoke_style, edge_style
from services.text_extraction import require_text

logger = get_logger(__name__)


CHARACTER_ANALYSIS_PROMPT = """Analyze the following text and extract character relationships:

{text}

Return a JSON in the following format:
{{
  "characters": [
    {{
      "name": "Character Name",
      "role": "Main Character/Supporting Character/Antagonist/etc.",
      "importance": 1-10,
      "description": "Brief description",
      "traits": ["trait1", "trait2"],
      "entityType": "person/organization/location/concept"
    }}
  ],
  "relationships": [
    {{
      "source": "Character1 Name",
      "target": "Character2 Name",
      "type": "ally/enemy/family/colleague/etc.",
      "description": "Brief description of the relationship",
      "strength": 1-10
    }}
  ]
}}

Only include the JSON, no other text."""

OPPONENT_MARKERS = ("antagonist", "enemy", "rival", "opponent", "villain")

SPOKE_RADIUS = 200.0


class CharacterAnalysisError(Exception):
    """Raised when the LLM reply cannot be turned into a character analysis."""
    pass


class CharacterAnalyzer:
    """
    LLM-backed replacement for the heuristic character network.

    Features:
    - OpenAI or local OpenAI-compatible endpoint
    - Tolerant JSON parsing (prose around the object is ignored)
    - Layout compatible with the heuristic network
    """

    def __init__(self, settings: Settings = None, client: Optional[AsyncOpenAI] = None):
        self.settings = settings or get_settings()
        if client is not None:
            self.client = client
        elif self.settings.use_local_llm:
            self.client = AsyncOpenAI(
                api_key="ollama",
                base_url=self.settings.local_llm_api_base
            )
        else:
            self.client = AsyncOpenAI(api_key=self.settings.openai_api_key)

    @property
    def model(self) -> str:
        if self.settings.use_local_llm:
            return self.settings.local_llm_model
        return self.settings.gpt_model

    async def analyze(self, text: str) -> CharacterAnalysis:
        """
        Extract characters and relationships from text.

        Args:
            text: Source text

        Returns:
            Parsed CharacterAnalysis

        Raises:
            CharacterAnalysisError: If the reply is empty or not valid JSON
        """
        require_text(text)
        logger.info(f"Analyzing characters with {self.model}: {text[:100]}...")

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": "You are a precise historical analysis assistant. Always return valid JSON."},
                {"role": "user", "content": CHARACTER_ANALYSIS_PROMPT.format(text=text)}
            ],
            temperature=self.settings.llm_temperature,
            max_tokens=self.settings.llm_max_tokens
        )

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise CharacterAnalysisError("Empty response from model")

        analysis = self.parse_response(content)
        logger.info(
            f"Character analysis returned {len(analysis.characters)} characters, "
            f"{len(analysis.relationships)} relationships"
        )
        return analysis

    def parse_response(self, content: str) -> CharacterAnalysis:
        """Parse the model reply, falling back to the first {...} block."""
        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            match = re.search(r'\{.*\}', content, re.DOTALL)
            if not match:
                raise CharacterAnalysisError("No JSON object in model response")
            try:
                data = json.loads(match.group())
            except json.JSONDecodeError as e:
                raise CharacterAnalysisError(f"Failed to parse model response: {e}") from e

        if not isinstance(data, dict):
            raise CharacterAnalysisError("Model response is not a JSON object")

        raw_characters = data.get("characters", [])
        raw_relationships = data.get("relationships", [])
        if not isinstance(raw_characters, list) or not isinstance(raw_relationships, list):
            raise CharacterAnalysisError("Model response characters/relationships must be lists")

        characters = []
        for item in raw_characters:
            try:
                characters.append(AnalyzedCharacter.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping character: {e.errors()[0]['msg']} - {item}")

        relationships = []
        for item in raw_relationships:
            try:
                relationships.append(AnalyzedRelationship.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping relationship: {e.errors()[0]['msg']} - {item}")

        return CharacterAnalysis(characters=characters, relationships=relationships)

    def to_network(self, analysis: CharacterAnalysis) -> CharacterNetwork:
        """
        Lay out an analysis as a character network.

        The most important character is the leader hub; the rest sit on a
        circle around it. Repeated names keep their first, highest-ranked node
        and relationships naming unknown characters are dropped.

        Args:
            analysis: Parsed analysis with at least one character

        Returns:
            CharacterNetwork rooted at "char1"
        """
        if not analysis.characters:
            raise CharacterAnalysisError("Analysis contains no characters")

        ranked = sorted(analysis.characters, key=lambda c: c.importance, reverse=True)
        center = self.settings.canvas_center
        nodes = [make_hub(ranked[0].name, center)]
        ids = {ranked[0].name: HUB_ID}
        roles = {ranked[0].name: CharacterRole.LEADER}

        # One node per name, the highest-ranked occurrence
        others = []
        for character in ranked[1:]:
            if character.name in ids or any(c.name == character.name for c in others):
                logger.debug(f"Skipping repeated character {character.name}")
                continue
            others.append(character)

        for index, character in enumerate(others):
            angle = index * 2 * math.pi / len(others)
            role = self._role_for(character)
            node_id = f"char{index + 2}"
            ids[character.name] = node_id
            roles[character.name] = role
            nodes.append(CharacterNode(
                id=node_id,
                data=NodeData(label=character.name, role=role, entity_type=character.entity_type),
                position=Position(
                    x=center[0] + math.cos(angle) * SPOKE_RADIUS,
                    y=center[1] + math.sin(angle) * SPOKE_RADIUS
                ),
                style=spoke_style(role)
            ))

        edges = []
        for relationship in analysis.relationships:
            source = ids.get(relationship.source)
            target = ids.get(relationship.target)
            if source is None or target is None or source == target:
                logger.debug(f"Dropping relationship {relationship.source} -> {relationship.target}")
                continue
            target_role = roles[relationship.target]
            edges.append(CharacterEdge(
                id=f"e{source[4:]}-{target[4:]}-{len(edges)}",
                source=source,
                target=target,
                animated=True,
                label=relationship.type.capitalize(),
                style=edge_style(target_role)
            ))

        return CharacterNetwork(nodes=nodes, edges=edges)

    @staticmethod
    def _role_for(character: AnalyzedCharacter) -> CharacterRole:
        role = character.role.lower()
        if any(marker in role for marker in OPPONENT_MARKERS):
            return CharacterRole.OPPONENT
        return CharacterRole.ALLY

