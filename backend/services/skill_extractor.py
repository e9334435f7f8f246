"""Catalog-driven skill extraction from free-text resumes.

A skill is found when its catalog name occurs in the resume text,
compared case-insensitively. Two matching modes are supported:

1. ``substring`` (default): plain containment, no tokenization. Short
   names can fire inside longer words ("Go" in "Gonzalez").
2. ``word_boundary``: the name must not be flanked by letters or digits,
   so "Java" no longer matches inside "JavaScript".
"""

import logging
import re
from collections.abc import Iterable

from models.schemas.catalog import Skill

logger = logging.getLogger(__name__)

MATCH_MODES: tuple[str, ...] = ("substring", "word_boundary")


def normalize_skill(skill: str) -> str:
    """Normalize a skill string for comparison."""
    return re.sub(r"\s+", " ", skill.strip()).casefold()


def _found_substring(name: str, text: str) -> bool:
    return name.lower() in text


def _found_word_boundary(name: str, text: str) -> bool:
    escaped = re.escape(name.lower())
    return re.search(rf"(?<![a-z0-9]){escaped}(?![a-z0-9])", text) is not None


_MATCHERS = {
    "substring": _found_substring,
    "word_boundary": _found_word_boundary,
}


def extract(
    resume_text: str,
    catalog: Iterable[Skill],
    mode: str = "substring",
) -> set[str]:
    """Return the catalog skill names present in ``resume_text``.

    Names are returned with their catalog spelling. Empty text or an empty
    catalog yields an empty set.
    """
    try:
        found_in = _MATCHERS[mode]
    except KeyError:
        raise ValueError(f"Unknown skill match mode: {mode}") from None

    text_lower = (resume_text or "").lower()
    found: set[str] = set()
    if not text_lower:
        return found

    for skill in catalog:
        if not skill.name:
            continue
        if found_in(skill.name, text_lower):
            found.add(skill.name)

    logger.debug("Extracted %d skills (mode=%s)", len(found), mode)
    return found
