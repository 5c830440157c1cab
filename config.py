"""
Configuration module for the History Visualizer.
Uses Pydantic for validation and environment variable loading.
"""

from typing import List, Tuple
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
import logging


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    log_level: str = Field(default="INFO")

    # Canvas layout
    canvas_center_x: float = Field(default=250.0)
    canvas_center_y: float = Field(default=250.0)
    mind_map_radius: float = Field(default=200.0, gt=0)

    # Extraction limits
    max_key_figures: int = Field(default=5, ge=1)
    max_concepts: int = Field(default=6, ge=1)
    placeholder_year_step: int = Field(default=25, ge=1)

    # Character analysis enricher (optional, OpenAI-compatible API)
    enable_character_analysis: bool = Field(default=False)
    openai_api_key: str = Field(default="sk-placeholder")
    use_local_llm: bool = Field(default=False)
    local_llm_model: str = Field(default="mistral")
    local_llm_api_base: str = Field(default="http://localhost:11434/v1")
    gpt_model: str = Field(default="gpt-4o-mini")
    llm_temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    llm_max_tokens: int = Field(default=2000)

    @property
    def canvas_center(self) -> Tuple[float, float]:
        """Anchor point shared by the mind map and character network."""
        return (self.canvas_center_x, self.canvas_center_y)


class LogConfig:
    """Logging configuration."""

    @staticmethod
    def setup_logging(level: str = "INFO") -> logging.Logger:
        """Set up logging configuration."""
        log_level = getattr(logging, level.upper(), logging.INFO)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)

        # Root logger
        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        root_logger.addHandler(console_handler)

        # Suppress noisy loggers
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("openai").setLevel(logging.WARNING)

        return root_logger


# Words that open sentences and are capitalized without naming anything
STOPWORDS: List[str] = ["The", "A", "An", "And", "But", "Or", "For", "Nor", "Yet", "So"]

PLACEHOLDER_FIGURES: List[str] = [
    "Historical Figure A",
    "Historical Figure B",
    "Historical Figure C",
    "Historical Figure D",
    "Historical Figure E"
]

DEFAULT_TOPIC = "Historical Event"
DEFAULT_SENTENCE = "Historical event occurred."
DEFAULT_TITLE_WORD = "Event"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)
