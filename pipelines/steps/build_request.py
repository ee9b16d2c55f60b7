from __future__ import annotations

from pipelines.runner import RunContext
from services.request_builder import build_enrichment_request


class BuildEnrichmentRequest:
    def run(self, ctx: RunContext) -> RunContext:
        ctx.request = build_enrichment_request(ctx.reference, ctx.flags)
        return ctx
