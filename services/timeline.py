"""
Timeline Builder for the History Visualizer.
Turns extracted years, figures and sentences into ordered timeline events.
"""

from datetime import date
from typing import List, Dict, Any, Optional

from config import DEFAULT_SENTENCE, DEFAULT_TITLE_WORD, Settings, get_settings, get_logger
from models.entities import TimelineEvent
from services.runtime import Clock, RandomSource, SystemClock, default_random
from services.text_extraction import (
    require_text,
    extract_dates,
    extract_key_figures,
    extract_title_words,
    split_sentences
)

logger = get_logger(__name__)


MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
)


def format_date(day: date) -> str:
    """Long-form date, e.g. "January 1, 1776", independent of locale."""
    return f"{MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"


class TimelineBuilder:
    """
    Builds one timeline event per year found in the text.

    Titles and descriptions are sampled from the text, so two calls on the
    same input differ unless a seeded random source is injected.
    """

    def __init__(
        self,
        settings: Settings = None,
        clock: Optional[Clock] = None,
        rng: Optional[RandomSource] = None
    ):
        self.settings = settings or get_settings()
        self.clock = clock or SystemClock()
        self.rng = rng or default_random()

    def build(self, text: str) -> List[TimelineEvent]:
        """
        Build the timeline for a block of text.

        Args:
            text: Source text

        Returns:
            Events in chronological order
        """
        require_text(text)
        dates = extract_dates(text, clock=self.clock, step=self.settings.placeholder_year_step)
        key_figures = extract_key_figures(text, limit=self.settings.max_key_figures)
        sentences = split_sentences(text)
        words = extract_title_words(text)

        events = []
        for day in dates:
            description = self.rng.choice(sentences) if sentences else DEFAULT_SENTENCE
            word = self.rng.choice(words) if words else DEFAULT_TITLE_WORD
            events.append(TimelineEvent(
                date=format_date(day),
                title=f"Historical Event: {word}",
                description=description,
                key_figures=list(key_figures)
            ))

        logger.info(f"Built timeline with {len(events)} events")
        return events


def process_timeline_data(
    text: str,
    clock: Optional[Clock] = None,
    rng: Optional[RandomSource] = None
) -> List[Dict[str, Any]]:
    """Build the timeline as JSON-ready dicts (convenience function)."""
    builder = TimelineBuilder(clock=clock, rng=rng)
    return [event.to_dict() for event in builder.build(text)]
