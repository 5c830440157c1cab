"""Services package for the History Visualizer."""

from .timeline import TimelineBuilder, process_timeline_data
from .mind_map import MindMapBuilder, process_mind_map_data
from .geography import GeographyBuilder, process_geography_data
from .character_network import CharacterNetworkBuilder, process_character_network_data
from .character_analysis import CharacterAnalyzer, CharacterAnalysisError

__all__ = [
    "TimelineBuilder",
    "MindMapBuilder",
    "GeographyBuilder",
    "CharacterNetworkBuilder",
    "CharacterAnalyzer",
    "CharacterAnalysisError",
    "process_timeline_data",
    "process_mind_map_data",
    "process_geography_data",
    "process_character_network_data"
]
