"""Shared dependencies for API routes."""

from services.ats_matcher import ATSMatcher, get_matcher


def get_ats_matcher() -> ATSMatcher:
    return get_matcher()
