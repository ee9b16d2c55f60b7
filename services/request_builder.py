from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from models.enrichment_request import EnrichmentFlags, EnrichmentRequest
from models.profile_reference import ProfileReference
from services.errors import MissingReference, SchemaValidationError


_URL_FIELD_BY_PROVIDER: Dict[str, str] = {
    "linkedin": "linkedin_profile_url",
    "twitter": "twitter_profile_url",
    "facebook": "facebook_profile_url",
}


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic error into one line naming each offending argument."""
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
        if err.get("type") == "literal_error":
            expected = (err.get("ctx") or {}).get("expected", "")
            parts.append(f"Invalid value for '{field}': {err.get('input')!r} (expected {expected})")
        elif err.get("type") == "extra_forbidden":
            parts.append(f"Unknown option '{field}'")
        elif err.get("type") in ("missing", "missing_argument"):
            parts.append(f"Missing required argument '{field}'")
        else:
            parts.append(f"Invalid value for '{field}': {err.get('msg')}")
    return "; ".join(parts)


def parse_enrichment_flags(
    flags: Union[EnrichmentFlags, Mapping[str, Any], None],
) -> EnrichmentFlags:
    """Validate a flag mapping against the closed enums; None values mean "not set"."""
    if isinstance(flags, EnrichmentFlags):
        return flags
    cleaned = {k: v for k, v in (flags or {}).items() if v is not None}
    try:
        return EnrichmentFlags.model_validate(cleaned)
    except ValidationError as exc:
        raise SchemaValidationError(describe_validation_error(exc)) from exc


def build_enrichment_request(
    reference: Optional[ProfileReference],
    flags: Union[EnrichmentFlags, Mapping[str, Any], None] = None,
) -> EnrichmentRequest:
    """Populate the provider URL field picked by the reference and carry flags through."""
    if reference is None:
        raise MissingReference("At least one profile URL must be provided")
    url_field = _URL_FIELD_BY_PROVIDER[reference.provider]
    return EnrichmentRequest(
        **{url_field: reference.canonical_url},
        flags=parse_enrichment_flags(flags),
    )
