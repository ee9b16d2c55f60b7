from __future__ import annotations

import pytest
from pydantic import ValidationError

from models.enrichment_request import EnrichmentFlags, EnrichmentRequest
from models.profile_reference import ProfileReference
from services.errors import MissingReference, SchemaValidationError
from services.request_builder import build_enrichment_request, parse_enrichment_flags


@pytest.mark.parametrize("provider, field, url", [
    ("linkedin", "linkedin_profile_url", "https://linkedin.com/in/alice"),
    ("twitter", "twitter_profile_url", "https://x.com/alice"),
    ("facebook", "facebook_profile_url", "https://facebook.com/alice"),
])
def test_build_sets_exactly_one_provider_field(provider, field, url):
    req = build_enrichment_request(ProfileReference(provider=provider, canonical_url=url))
    assert req.provider_url_field == field
    assert req.to_query_params() == {field: url}


def test_flags_are_carried_through_verbatim():
    ref = ProfileReference(provider="linkedin", canonical_url="https://linkedin.com/in/alice")
    req = build_enrichment_request(ref, {
        "use_cache": "if-recent",
        "skills": "include",
        "personal_email": None,
        "fallback_to_cache": "never",
    })
    assert req.to_query_params() == {
        "linkedin_profile_url": "https://linkedin.com/in/alice",
        "skills": "include",
        "use_cache": "if-recent",
        "fallback_to_cache": "never",
    }


def test_missing_reference_raises():
    with pytest.raises(MissingReference):
        build_enrichment_request(None, {"extra": "include"})


@pytest.mark.parametrize("flags, fragment", [
    ({"extra": "yes"}, "'extra'"),
    ({"use_cache": "include"}, "'use_cache'"),
    ({"fallback_to_cache": "always"}, "'fallback_to_cache'"),
    ({"not_a_flag": "include"}, "Unknown option 'not_a_flag'"),
])
def test_invalid_flags_raise_schema_validation_error(flags, fragment):
    with pytest.raises(SchemaValidationError) as exc:
        parse_enrichment_flags(flags)
    assert fragment in str(exc.value)


def test_parse_accepts_existing_flags_instance():
    flags = EnrichmentFlags(extra="include")
    assert parse_enrichment_flags(flags) is flags


def test_request_rejects_two_provider_urls():
    with pytest.raises(ValidationError):
        EnrichmentRequest(
            linkedin_profile_url="https://linkedin.com/in/alice",
            twitter_profile_url="https://x.com/alice",
        )


def test_empty_request_has_no_provider_field():
    assert EnrichmentRequest().provider_url_field is None
