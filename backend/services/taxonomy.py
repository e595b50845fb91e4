"""Skill vocabulary and synonym folding shared by extraction and scoring.

A taxonomy is a flat list of recognized surface forms plus an explicit synonym
map (alias -> canonical form). There is no stemming or fuzzy matching: two
spellings are the same skill only if the table says so.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Built-in vocabulary (lowercase surface forms, including variants)
# ---------------------------------------------------------------------------
DEFAULT_SKILLS: tuple[str, ...] = (
    # Frontend
    "react", "reactjs", "react.js",
    "next.js", "nextjs",
    "html", "html5", "css", "css3",
    "tailwind", "tailwindcss",
    "javascript", "typescript",
    # Backend
    "node.js", "nodejs",
    "express", "express.js", "expressjs",
    "python", "java", "c++", "c#",
    "django", "flask", "fastapi",
    "rest api", "rest apis", "graphql",
    # Databases
    "mongodb", "mysql", "postgresql", "postgres", "sql", "redis",
    # Cloud & DevOps
    "aws", "amazon web services", "azure",
    "docker", "kubernetes", "k8s",
    "git", "github", "ci/cd", "linux",
    # Data & ML
    "machine learning", "pandas", "numpy",
)

# Alias -> canonical. Every value must itself be a surface form.
DEFAULT_SYNONYMS: dict[str, str] = {
    "reactjs": "react", "react.js": "react",
    "nextjs": "next.js",
    "nodejs": "node.js",
    "express.js": "express", "expressjs": "express",
    "html5": "html", "css3": "css",
    "tailwindcss": "tailwind",
    "rest apis": "rest api",
    "postgres": "postgresql",
    "amazon web services": "aws",
    "k8s": "kubernetes",
}

# Canonical -> display spelling, for skills the generic title-casing gets wrong
DEFAULT_DISPLAY_NAMES: dict[str, str] = {
    "node.js": "Node.js", "next.js": "Next.js",
    "javascript": "JavaScript", "typescript": "TypeScript",
    "c++": "C++", "c#": "C#",
    "html": "HTML", "css": "CSS",
    "rest api": "REST API", "graphql": "GraphQL", "fastapi": "FastAPI",
    "mongodb": "MongoDB", "mysql": "MySQL", "postgresql": "PostgreSQL",
    "sql": "SQL", "aws": "AWS", "ci/cd": "CI/CD",
    "github": "GitHub", "numpy": "NumPy",
}


def _clean(term: str) -> str:
    return " ".join(term.lower().split())


class SkillTaxonomy:
    """Immutable skill vocabulary with synonym and display-name tables.

    Instances are read-only after construction, so a single taxonomy can be
    shared by any number of concurrent extractors and scorers. Replacing the
    vocabulary means building a new instance, never editing an existing one.
    """

    __slots__ = ("_skills", "_synonyms", "_display_names")

    def __init__(
        self,
        skills,
        synonyms: Mapping[str, str] | None = None,
        display_names: Mapping[str, str] | None = None,
    ) -> None:
        ordered: list[str] = []
        for skill in skills:
            cleaned = _clean(skill)
            if cleaned and cleaned not in ordered:
                ordered.append(cleaned)
        synonym_map = {_clean(k): _clean(v) for k, v in (synonyms or {}).items()}
        display_map = {_clean(k): v for k, v in (display_names or {}).items()}

        known = set(ordered)
        for alias, target in synonym_map.items():
            if target not in known:
                raise ValueError(f"Synonym target {target!r} (from {alias!r}) is not a known skill")
            if synonym_map.get(target, target) != target:
                raise ValueError(f"Synonym target {target!r} is itself an alias")

        object.__setattr__(self, "_skills", tuple(ordered))
        object.__setattr__(self, "_synonyms", MappingProxyType(synonym_map))
        object.__setattr__(self, "_display_names", MappingProxyType(display_map))

    def __setattr__(self, name, value):
        raise AttributeError("SkillTaxonomy is immutable")

    def __len__(self) -> int:
        return len(self._skills)

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and _clean(term) in self._skills

    def __repr__(self) -> str:
        return f"SkillTaxonomy(skills={len(self._skills)}, synonyms={len(self._synonyms)})"

    @property
    def synonyms(self) -> Mapping[str, str]:
        return self._synonyms

    def all_surface_forms(self) -> tuple[str, ...]:
        """Every recognized spelling, variants included, in table order."""
        return self._skills

    def canonical_skills(self) -> list[str]:
        """Distinct canonical skills, sorted."""
        return sorted({self.canonicalize(s) for s in self._skills})

    def canonicalize(self, surface_form: str) -> str:
        """Return the canonical spelling of a surface form.

        Case and surrounding whitespace are ignored. Unknown terms are their
        own canonical form.
        """
        cleaned = _clean(surface_form)
        return self._synonyms.get(cleaned, cleaned)

    def display_name(self, skill: str) -> str:
        """Human-friendly spelling, e.g. "mongodb" -> "MongoDB"."""
        canonical = self.canonicalize(skill)
        override = self._display_names.get(canonical)
        if override:
            return override
        return " ".join(word[:1].upper() + word[1:] for word in canonical.split(" "))

    @classmethod
    def from_file(cls, path: str | Path) -> "SkillTaxonomy":
        """Load a taxonomy from a JSON file.

        Expected shape: {"skills": [...], "synonyms": {...}, "display_names": {...}}.
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        taxonomy = cls(
            data.get("skills", []),
            synonyms=data.get("synonyms", {}),
            display_names=data.get("display_names", {}),
        )
        logger.info("Loaded skill taxonomy from %s: %r", path, taxonomy)
        return taxonomy


DEFAULT_TAXONOMY = SkillTaxonomy(DEFAULT_SKILLS, DEFAULT_SYNONYMS, DEFAULT_DISPLAY_NAMES)
