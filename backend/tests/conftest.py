"""Shared test configuration and fixtures."""

import os

# Must be set before config/settings is first imported
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest

from services import ats_matcher
from services.taxonomy import SkillTaxonomy


@pytest.fixture
def small_taxonomy():
    """A minimal vocabulary: react, node.js (+ nodejs), mongodb, aws."""
    return SkillTaxonomy(
        ["react", "node.js", "nodejs", "mongodb", "aws"],
        synonyms={"nodejs": "node.js"},
        display_names={"node.js": "Node.js", "mongodb": "MongoDB", "aws": "AWS"},
    )


@pytest.fixture(autouse=True)
def _reset_matcher():
    ats_matcher.reset()
    yield
    ats_matcher.reset()
