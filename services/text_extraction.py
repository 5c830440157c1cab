"""
Text extraction helpers for the History Visualizer.
Heuristic, regex-based extractors that pull years, sentences, names and
concepts out of free-form narrative text.
"""

import re
from datetime import date
from typing import List, Iterable, Optional

from config import STOPWORDS, get_logger
from services.runtime import Clock, SystemClock

logger = get_logger(__name__)


YEAR_PATTERN = re.compile(r'\b(1[0-9]{3}|20[0-2][0-9])\b', re.ASCII)
SENTENCE_PATTERN = re.compile(r'[^.!?]+[.!?]+')
NAME_PATTERN = re.compile(r'\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b', re.ASCII)
CONCEPT_START_PATTERN = re.compile(r'^[A-Za-z]')

PLACEHOLDER_COUNT = 5


def require_text(text: object) -> str:
    """Reject anything that is not a string before it reaches the extractors."""
    if not isinstance(text, str):
        raise TypeError(f"Expected text as str, got {type(text).__name__}")
    return text


def _unique(items: Iterable[str]) -> List[str]:
    """Drop duplicates, keeping first-seen order."""
    return list(dict.fromkeys(items))


def extract_dates(
    text: str,
    clock: Optional[Clock] = None,
    step: int = 25
) -> List[date]:
    """
    Find the years mentioned in the text.

    Args:
        text: Source text
        clock: Supplies the current year for the placeholder fallback
        step: Years between placeholder dates

    Returns:
        January 1 of each year found, sorted ascending. When no year is
        found, five placeholder dates `step` years apart ending this year.
    """
    require_text(text)
    years = [int(match) for match in YEAR_PATTERN.findall(text)]

    if not years:
        current_year = (clock or SystemClock()).today().year
        logger.debug("No years found, using placeholder dates")
        offsets = [step * k for k in range(PLACEHOLDER_COUNT - 1, -1, -1)]
        return [date(current_year - offset, 1, 1) for offset in offsets]

    return sorted(date(year, 1, 1) for year in years)


def split_sentences(text: str) -> List[str]:
    """Split text on terminal punctuation, keeping the punctuation."""
    require_text(text)
    sentences = (s.strip() for s in SENTENCE_PATTERN.findall(text))
    return [s for s in sentences if s]


def extract_sentences_with_keywords(text: str, keywords: List[str]) -> List[str]:
    """
    Keep the sentences mentioning at least one keyword.

    Args:
        text: Source text
        keywords: Terms to look for, compared case-insensitively

    Returns:
        Matching sentences in text order
    """
    lowered = [k.lower() for k in keywords if k]
    return [
        sentence for sentence in split_sentences(text)
        if any(keyword in sentence.lower() for keyword in lowered)
    ]


def extract_key_figures(text: str, limit: int = 5) -> List[str]:
    """
    Pick out capitalized word runs that probably name someone or something.

    This is a plain pattern match: "John Adams" and "Boston" qualify, so
    does any capitalized word that opens a sentence unless it is one of
    the listed stopwords.

    Args:
        text: Source text
        limit: Maximum number of names returned

    Returns:
        Up to `limit` distinct names in first-seen order
    """
    require_text(text)
    names = _unique(NAME_PATTERN.findall(text))
    figures = [name for name in names if name not in STOPWORDS]
    return figures[:limit]


def extract_concepts(text: str, limit: int = 6) -> List[str]:
    """Long words (over 5 characters, starting with a letter) as mind-map topics."""
    require_text(text)
    words = [
        word for word in text.split()
        if len(word) > 5 and CONCEPT_START_PATTERN.match(word)
    ]
    return _unique(words)[:limit]


def extract_title_words(text: str) -> List[str]:
    """Whitespace tokens longer than 4 characters, candidates for event titles."""
    require_text(text)
    return [word for word in text.split() if len(word) > 4]
