from __future__ import annotations

from pipelines.runner import RunContext
from services.profile_reference import extract_profile_reference


class ResolveReference:
    def run(self, ctx: RunContext) -> RunContext:
        ctx.reference = extract_profile_reference(ctx.profile_input)
        ctx.meta["provider"] = ctx.reference.provider
        return ctx
