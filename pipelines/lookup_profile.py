from __future__ import annotations

from typing import Any, Mapping, Optional

from pipelines.runner import Pipeline, RunContext
from pipelines.steps import (
    BuildEnrichmentRequest,
    FetchProfile,
    RenderProfile,
    ResolveReference,
    ValidateFlags,
)
from ports.profile_api import ProfileApiPort


def build_lookup_pipeline(client: ProfileApiPort) -> Pipeline:
    # Flags are validated before anything touches the network
    return Pipeline([
        ValidateFlags(),
        ResolveReference(),
        BuildEnrichmentRequest(),
        FetchProfile(client),
        RenderProfile(),
    ])


def lookup_person_profile(
    profile_url: str,
    flags: Optional[Mapping[str, Any]],
    client: ProfileApiPort,
) -> str:
    """Resolve, fetch and render one person profile; errors propagate as ProfileLookupError."""
    ctx = RunContext(profile_input=profile_url, raw_flags=dict(flags or {}))
    ctx = build_lookup_pipeline(client).run(ctx)
    return ctx.text or ""
