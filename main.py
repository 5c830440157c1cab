"""
History Visualizer - Main Orchestrator

Entry point for turning a block of historical narrative into a timeline,
a mind map, geo events and a character network.
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Dict, Any, Optional
import argparse

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from config import get_settings, LogConfig, get_logger
from services.runtime import Clock, RandomSource, SystemClock, default_random
from services.text_extraction import require_text
from services.timeline import TimelineBuilder
from services.mind_map import MindMapBuilder
from services.geography import GeographyBuilder
from services.character_network import CharacterNetworkBuilder
from services.character_analysis import CharacterAnalyzer, CharacterAnalysisError

logger = get_logger(__name__)


class HistoryVisualizationSystem:
    """
    Main orchestrator for the History Visualizer.

    Runs the four builders on the same text:
    1. Timeline
    2. Mind map
    3. Geography
    4. Character network (optionally from the LLM character analyzer)
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        rng: Optional[RandomSource] = None,
        analyzer: Optional[CharacterAnalyzer] = None
    ):
        """
        Initialize the system.

        Args:
            clock: Source of the current date for placeholder years
            rng: Random source for sampled titles and descriptions
            analyzer: Character analyzer; created from settings when enabled
        """
        self.settings = get_settings()
        clock = clock or SystemClock()
        rng = rng or default_random()

        self.timeline_builder = TimelineBuilder(self.settings, clock=clock, rng=rng)
        self.mind_map_builder = MindMapBuilder(self.settings)
        self.geography_builder = GeographyBuilder(self.settings, clock=clock, rng=rng)
        self.character_builder = CharacterNetworkBuilder(self.settings)

        if analyzer is None and self.settings.enable_character_analysis:
            analyzer = CharacterAnalyzer(self.settings)
        self.analyzer = analyzer

    def timeline(self, text: str) -> list:
        return [event.to_dict() for event in self.timeline_builder.build(text)]

    def mind_map(self, text: str) -> Dict[str, Any]:
        return self.mind_map_builder.build(text).to_dict()

    def geography(self, text: str) -> Dict[str, Any]:
        return self.geography_builder.build(text).to_dict()

    def character_network(self, text: str) -> Dict[str, Any]:
        return self.character_builder.build(text).to_dict()

    async def enriched_character_network(self, text: str) -> Dict[str, Any]:
        """
        Character network from the LLM analyzer, or the heuristic one.

        Falls back to the heuristic network when no analyzer is configured
        or the analyzer fails.
        """
        require_text(text)
        if self.analyzer is None:
            return self.character_network(text)

        try:
            analysis = await self.analyzer.analyze(text)
            return self.analyzer.to_network(analysis).to_dict()
        except CharacterAnalysisError as e:
            logger.warning(f"Character analysis unusable, using heuristic network: {e}")
        except Exception as e:
            logger.error(f"Character analysis failed, using heuristic network: {e}")
        return self.character_network(text)

    def process_all(self, text: str) -> Dict[str, Any]:
        """Run every builder on the same text."""
        require_text(text)
        logger.info(f"Processing {len(text)} characters of text")
        return {
            "timeline": self.timeline(text),
            "mindmap": self.mind_map(text),
            "geography": self.geography(text),
            "characters": self.character_network(text)
        }


def read_text(path: Optional[str]) -> str:
    """Read input text from a file, or stdin when no path is given."""
    if path:
        return Path(path).read_text(encoding="utf-8")
    return sys.stdin.read()


# CLI Interface
def main(argv=None):
    parser = argparse.ArgumentParser(
        description="History Visualizer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Timeline from a file
  python main.py timeline --file revolution.txt

  # Everything, reproducible sampling
  python main.py all --file revolution.txt --seed 42

  # Character network via the LLM analyzer
  echo "..." | python main.py characters --enrich
        """
    )

    parser.add_argument(
        "artifact",
        choices=["timeline", "mindmap", "geography", "characters", "all"],
        help="What to build"
    )
    parser.add_argument("--file", help="Read text from this file instead of stdin")
    parser.add_argument("--seed", type=int, help="Seed for sampled titles and descriptions")
    parser.add_argument("--enrich", action="store_true", help="Use the LLM character analyzer")

    args = parser.parse_args(argv)

    settings = get_settings()
    LogConfig.setup_logging(settings.log_level)

    analyzer = CharacterAnalyzer(settings) if args.enrich else None
    system = HistoryVisualizationSystem(rng=default_random(args.seed), analyzer=analyzer)
    text = read_text(args.file)

    if args.artifact == "timeline":
        result = system.timeline(text)
    elif args.artifact == "mindmap":
        result = system.mind_map(text)
    elif args.artifact == "geography":
        result = system.geography(text)
    elif args.artifact == "characters":
        result = asyncio.run(system.enriched_character_network(text))
    else:
        result = system.process_all(text)
        if args.enrich:
            result["characters"] = asyncio.run(system.enriched_character_network(text))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
