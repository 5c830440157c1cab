"""
Fixed gazetteer standing in for a geocoding service.
"""

from typing import Dict, List, Tuple

from config import get_logger
from models.entities import Location
from services.text_extraction import require_text

logger = get_logger(__name__)


# Place name -> (longitude, latitude), in match order
GAZETTEER: Dict[str, Tuple[float, float]] = {
    "London": (-0.1276, 51.5074),
    "Paris": (2.3522, 48.8566),
    "Berlin": (13.4050, 52.5200),
    "Rome": (12.4964, 41.9028),
    "Moscow": (37.6173, 55.7558),
    "New York": (-74.0059, 40.7128),
    "Tokyo": (139.6917, 35.6895),
    "Beijing": (116.4074, 39.9042),
    "Delhi": (77.1025, 28.7041),
    "Cairo": (31.2357, 30.0444),
    "Sydney": (151.2093, -33.8688),
    "Rio de Janeiro": (-43.1729, -22.9068),
    "Mexico City": (-99.1332, 19.4326),
    "Lagos": (3.3792, 6.5244),
    "Washington": (-77.0369, 38.9072),
    "USA": (-95.7129, 37.0902),
    "UK": (-3.4359, 55.3781),
    "France": (2.2137, 46.2276),
    "Germany": (10.4515, 51.1657),
    "Italy": (12.5674, 42.5033),
    "Russia": (105.3188, 61.5240),
    "China": (104.1954, 35.8617),
    "India": (78.9629, 20.5937),
    "Japan": (138.2529, 36.2048),
    "Brazil": (-51.9253, -14.2350),
    "Africa": (19.4902, 8.7832),
    "Europe": (15.2551, 54.5260),
    "Asia": (100.6197, 34.0479),
    "North America": (-105.2551, 54.5260),
    "South America": (-58.9302, -23.4425),
    "Australia": (133.7751, -25.2744),
    "Antarctica": (135.0000, -82.8628),
}

FALLBACK_LOCATION = Location(name="Sample Location", coordinates=(0.0, 0.0))


def resolve_locations(text: str) -> List[Location]:
    """
    Match gazetteer names against the text.

    Matching is an exact, case-sensitive substring test, so "Paris" inside
    "Parisian" counts and "paris" does not.

    Args:
        text: Source text

    Returns:
        Matched locations in gazetteer order, or the single sample location
        at (0, 0) when nothing matches
    """
    require_text(text)
    matches = [
        Location(name=name, coordinates=coordinates)
        for name, coordinates in GAZETTEER.items()
        if name in text
    ]

    if not matches:
        logger.debug("No gazetteer matches, using sample location")
        return [FALLBACK_LOCATION]

    return matches
