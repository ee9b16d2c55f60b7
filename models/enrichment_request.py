from __future__ import annotations

from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


IncludeFlag = Literal["include", "exclude"]
CacheMode = Literal["if-present", "if-recent"]
FallbackMode = Literal["on-error", "never"]

PROVIDER_URL_FIELDS = (
    "linkedin_profile_url",
    "twitter_profile_url",
    "facebook_profile_url",
)


class EnrichmentFlags(BaseModel):
    """Optional paid add-ons and cache controls, forwarded verbatim to Proxycurl."""

    extra: Optional[IncludeFlag] = None
    github_profile_id: Optional[IncludeFlag] = None
    facebook_profile_id: Optional[IncludeFlag] = None
    twitter_profile_id: Optional[IncludeFlag] = None
    personal_contact_number: Optional[IncludeFlag] = None
    personal_email: Optional[IncludeFlag] = None
    inferred_salary: Optional[IncludeFlag] = None
    skills: Optional[IncludeFlag] = None
    use_cache: Optional[CacheMode] = None
    fallback_to_cache: Optional[FallbackMode] = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    def as_params(self) -> Dict[str, str]:
        """Set flags only, in declaration order."""
        return {name: value for name, value in self.model_dump().items() if value is not None}


class EnrichmentRequest(BaseModel):
    """One Proxycurl person lookup: a single provider URL plus flags."""

    linkedin_profile_url: Optional[str] = None
    twitter_profile_url: Optional[str] = None
    facebook_profile_url: Optional[str] = None
    flags: EnrichmentFlags = Field(default_factory=EnrichmentFlags)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def _at_most_one_provider_url(self) -> "EnrichmentRequest":
        set_fields = [name for name in PROVIDER_URL_FIELDS if getattr(self, name)]
        if len(set_fields) > 1:
            raise ValueError(
                f"Only one profile URL may be provided, got: {', '.join(set_fields)}"
            )
        return self

    @property
    def provider_url_field(self) -> Optional[str]:
        for name in PROVIDER_URL_FIELDS:
            if getattr(self, name):
                return name
        return None

    def to_query_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        field_name = self.provider_url_field
        if field_name:
            params[field_name] = getattr(self, field_name)
        params.update(self.flags.as_params())
        return params
