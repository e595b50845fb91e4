"""Vocabulary-based skill extraction.

Maps free text (a job description or resume body) to the sorted set of
canonical taxonomy skills it mentions.

Matching rules:
1. Text is lower-cased, sentence-ending periods are dropped and whitespace is
   collapsed. Dots inside tokens are kept ("node.js", "next.js"); dotless
   variants are folded by the taxonomy's synonym map instead.
2. Surface forms are tried longest first. A form matches where it appears
   literally, is not preceded by a letter or digit and is not followed by a
   letter. A trailing version number is allowed ("python3", "c++17"), a
   number run into more letters is not ("python3d").
3. A matched form claims its text: every occurrence is blanked out before the
   shorter forms run, so "javascript" cannot also yield "java".
"""

import logging
import re

from services.taxonomy import DEFAULT_TAXONOMY, SkillTaxonomy

logger = logging.getLogger(__name__)

_SENTENCE_END_RE = re.compile(r"\.(?=\s|$)")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text) -> str:
    """Lower-case text, drop sentence-ending periods and collapse whitespace."""
    if not isinstance(text, str):
        return ""
    lowered = _SENTENCE_END_RE.sub(" ", text.lower())
    return _WHITESPACE_RE.sub(" ", lowered).strip()


def _compile_form(form: str) -> re.Pattern:
    return re.compile(rf"(?<![a-z0-9]){re.escape(form)}(?![a-z])(?!\d+[a-z])")


class SkillExtractor:
    """Extracts canonical skills from text using one taxonomy.

    Patterns are compiled once at construction; ``extract`` itself keeps no
    state, so one extractor can serve concurrent callers.
    """

    def __init__(self, taxonomy: SkillTaxonomy = DEFAULT_TAXONOMY) -> None:
        self.taxonomy = taxonomy
        # Longest first; equal lengths in lexicographic order for determinism
        ordered = sorted(taxonomy.all_surface_forms(), key=lambda f: (-len(f), f))
        self._patterns: tuple[tuple[str, re.Pattern], ...] = tuple(
            (form, _compile_form(form)) for form in ordered
        )

    def extract(self, text) -> list[str]:
        """Return the canonical skills mentioned in ``text``, sorted ascending.

        Empty or non-string input yields an empty list.
        """
        remaining = normalize_text(text)
        if not remaining:
            return []

        found: set[str] = set()
        for form, pattern in self._patterns:
            if pattern.search(remaining):
                found.add(self.taxonomy.canonicalize(form))
                remaining = pattern.sub(" ", remaining)

        skills = sorted(found)
        logger.debug("Extracted %d skills from %d chars", len(skills), len(text))
        return skills


_default_extractor = SkillExtractor()


def extract_skills(text) -> list[str]:
    """Extract skills with the built-in taxonomy."""
    return _default_extractor.extract(text)
