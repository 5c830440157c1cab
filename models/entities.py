"""
Entity data models for the History Visualizer.
Defines Pydantic models for timeline events, places, geo events and
character analysis results.
"""

from typing import List, Optional, Dict, Any, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum


class EntityType(str, Enum):
    """Kinds of entity a character-network node can stand for.

    Declaration order is the cycle used when assigning types to spokes.
    """
    PERSON = "person"
    ORGANIZATION = "organization"
    CONCEPT = "concept"
    LOCATION = "location"


class CharacterRole(str, Enum):
    """Role of a node in the character network."""
    LEADER = "leader"
    ALLY = "ally"
    OPPONENT = "opponent"


RELATIONSHIP_LABELS: List[str] = ["Ally", "Mentor", "Enemy", "Rival", "Friend", "Collaborator"]


class TimelineEvent(BaseModel):
    """
    A single entry of the generated timeline.

    Attributes:
        date: Long-form date, e.g. "January 1, 1776"
        title: Short event title
        description: Sentence taken from the source text
        key_figures: Names extracted from the whole text
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str
    title: str
    description: str
    key_figures: List[str] = Field(default_factory=list, alias="keyFigures")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self.model_dump(by_alias=True)


class Location(BaseModel):
    """A gazetteer entry matched in the text."""
    model_config = ConfigDict(frozen=True)

    name: str
    coordinates: Tuple[float, float]

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]


class GeoEvent(BaseModel):
    """
    An event pinned to a gazetteer location.

    Attributes:
        name: "Event in {location}"
        date: Year as a string
        description: Sentence taken from the source text
        longitude: Gazetteer longitude
        latitude: Gazetteer latitude
    """
    model_config = ConfigDict(frozen=True)

    name: str
    date: str
    description: str
    longitude: float = Field(ge=-180.0, le=180.0)
    latitude: float = Field(ge=-90.0, le=90.0)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self.model_dump()


class GeographyData(BaseModel):
    """Geo events plus an overlay feature list kept for map renderers."""
    model_config = ConfigDict(frozen=True)

    events: List[GeoEvent] = Field(default_factory=list)
    features: List[Dict[str, Any]] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "features": list(self.features),
            "events": [event.to_dict() for event in self.events]
        }


class AnalyzedCharacter(BaseModel):
    """
    A character returned by the LLM character analyzer.

    Attributes:
        name: Character name as written in the text
        role: Free-text role ("Main Character", "Antagonist", ...)
        importance: 1-10 ranking
        description: Short description
        traits: Notable traits
        entity_type: person/organization/location/concept
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str
    role: str = "Supporting Character"
    importance: int = Field(default=5, ge=1, le=10)
    description: str = ""
    traits: List[str] = Field(default_factory=list)
    entity_type: EntityType = Field(default=EntityType.PERSON, alias="entityType")

    @field_validator('name')
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Character name cannot be empty")
        return v.strip()

    @field_validator('entity_type', mode='before')
    @classmethod
    def normalize_entity_type(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().lower()
            if v not in {t.value for t in EntityType}:
                return EntityType.PERSON
        return v

    @field_validator('importance', mode='before')
    @classmethod
    def clamp_importance(cls, v: Any) -> int:
        try:
            value = int(v)
        except (TypeError, ValueError):
            return 5
        return max(1, min(10, value))


class AnalyzedRelationship(BaseModel):
    """A directed relationship between two analyzed characters."""
    source: str
    target: str
    type: str = "related"
    description: str = ""
    strength: int = Field(default=5, ge=1, le=10)

    @field_validator('strength', mode='before')
    @classmethod
    def clamp_strength(cls, v: Any) -> int:
        try:
            value = int(v)
        except (TypeError, ValueError):
            return 5
        return max(1, min(10, value))


class CharacterAnalysis(BaseModel):
    """Structured reply of the character analyzer."""
    characters: List[AnalyzedCharacter] = Field(default_factory=list)
    relationships: List[AnalyzedRelationship] = Field(default_factory=list)

    def get_character(self, name: str) -> Optional[AnalyzedCharacter]:
        """Find a character by exact name."""
        return next((c for c in self.characters if c.name == name), None)
