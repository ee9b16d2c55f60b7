from __future__ import annotations

from pipelines.runner import RunContext
from services.rendering import format_profile


class RenderProfile:
    def run(self, ctx: RunContext) -> RunContext:
        if ctx.profile is None:
            raise RuntimeError("RenderProfile requires a fetched profile")
        ctx.text = format_profile(ctx.profile)
        return ctx
