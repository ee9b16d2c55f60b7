from __future__ import annotations

import re
from typing import List, Optional, Tuple

from models.profile_reference import ProfileReference, Provider
from services.errors import InvalidReference


INVALID_REFERENCE_MESSAGE = (
    "Invalid profile URL or username provided. "
    "Please provide a valid LinkedIn, Twitter/X, or Facebook URL or username."
)

# Each pattern captures the handle in the named group "handle".
# URL forms are searched anywhere in the input; bare forms are anchored.
_LINKEDIN_PATTERNS: List[re.Pattern[str]] = [
    re.compile(r"https?://(?:www\.)?linkedin\.com/in/(?P<handle>[A-Za-z0-9_-]+)"),
    re.compile(r"linkedin\.com/in/(?P<handle>[A-Za-z0-9_-]+)"),
    # A bare username is assumed to be LinkedIn
    re.compile(r"^(?P<handle>[A-Za-z0-9_-]+)$"),
]

_TWITTER_PATTERNS: List[re.Pattern[str]] = [
    re.compile(r"https?://(?:www\.)?(?:twitter|x)\.com/(?P<handle>[A-Za-z0-9_]+)"),
    re.compile(r"(?:twitter|x)\.com/(?P<handle>[A-Za-z0-9_]+)"),
    re.compile(r"^@(?P<handle>[A-Za-z0-9_]+)$"),
]

_FACEBOOK_PATTERNS: List[re.Pattern[str]] = [
    re.compile(r"https?://(?:www\.)?facebook\.com/(?P<handle>[A-Za-z0-9.]+)"),
    re.compile(r"facebook\.com/(?P<handle>[A-Za-z0-9.]+)"),
]

# Precedence matters: LinkedIn, then Twitter/X, then Facebook.
_PROVIDERS: List[Tuple[Provider, List[re.Pattern[str]], str]] = [
    ("linkedin", _LINKEDIN_PATTERNS, "https://linkedin.com/in/{handle}"),
    ("twitter", _TWITTER_PATTERNS, "https://x.com/{handle}"),
    ("facebook", _FACEBOOK_PATTERNS, "https://facebook.com/{handle}"),
]


def _match_handle(text: str, patterns: List[re.Pattern[str]]) -> Optional[str]:
    for pattern in patterns:
        m = pattern.search(text)
        if m:
            return m.group("handle")
    return None


def match_profile_reference(text: Optional[str]) -> Optional[ProfileReference]:
    """Classify a free-form profile reference, or return None if nothing matches."""
    if not text:
        return None
    candidate = text.strip()
    for provider, patterns, url_template in _PROVIDERS:
        handle = _match_handle(candidate, patterns)
        if handle:
            return ProfileReference(provider=provider, canonical_url=url_template.format(handle=handle))
    return None


def extract_profile_reference(text: Optional[str]) -> ProfileReference:
    """Resolve a URL, ``linkedin.com/in/...`` path, ``@handle`` or bare username.

    Twitter references always canonicalize to the x.com domain. Raises
    InvalidReference when no provider pattern matches.
    """
    reference = match_profile_reference(text)
    if reference is None:
        raise InvalidReference(INVALID_REFERENCE_MESSAGE)
    return reference
