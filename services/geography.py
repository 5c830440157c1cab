"""
Geography Builder for the History Visualizer.
Pins events to the gazetteer locations mentioned in the text.
"""

from typing import Dict, Any, Optional

from config import DEFAULT_SENTENCE, Settings, get_settings, get_logger
from models.entities import GeoEvent, GeographyData
from services.gazetteer import resolve_locations
from services.runtime import Clock, RandomSource, SystemClock, default_random
from services.text_extraction import require_text, extract_dates, split_sentences

logger = get_logger(__name__)


FALLBACK_BASE_YEAR = 1900
FALLBACK_YEAR_STEP = 20


class GeographyBuilder:
    """
    Builds one geo event per resolved location.

    Years are paired with locations cyclically; descriptions are sampled
    at random from the text's sentences.
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

    def build(self, text: str) -> GeographyData:
        require_text(text)
        locations = resolve_locations(text)
        sentences = split_sentences(text)
        dates = extract_dates(text, clock=self.clock, step=self.settings.placeholder_year_step)

        events = []
        for index, location in enumerate(locations):
            if dates:
                year = dates[index % len(dates)].year
            else:
                year = FALLBACK_BASE_YEAR + index * FALLBACK_YEAR_STEP
            description = self.rng.choice(sentences) if sentences else DEFAULT_SENTENCE
            events.append(GeoEvent(
                name=f"Event in {location.name}",
                date=str(year),
                description=description,
                longitude=location.longitude,
                latitude=location.latitude
            ))

        logger.info(f"Built {len(events)} geo events")
        return GeographyData(events=events)


def process_geography_data(
    text: str,
    clock: Optional[Clock] = None,
    rng: Optional[RandomSource] = None
) -> Dict[str, Any]:
    """Build geography data as a JSON-ready dict (convenience function)."""
    return GeographyBuilder(clock=clock, rng=rng).build(text).to_dict()
