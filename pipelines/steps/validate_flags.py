from __future__ import annotations

from pipelines.runner import RunContext
from services.request_builder import parse_enrichment_flags


class ValidateFlags:
    def run(self, ctx: RunContext) -> RunContext:
        ctx.flags = parse_enrichment_flags(ctx.raw_flags)
        ctx.meta["flags"] = ctx.flags.as_params()
        return ctx
