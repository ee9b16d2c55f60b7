from __future__ import annotations

from pipelines.runner import RunContext
from ports.profile_api import ProfileApiPort
from services.errors import MissingReference


class FetchProfile:
    def __init__(self, client: ProfileApiPort) -> None:
        self.client = client

    def run(self, ctx: RunContext) -> RunContext:
        if ctx.request is None:
            raise MissingReference("At least one profile URL must be provided")
        ctx.profile = self.client.get_person_profile(ctx.request)
        return ctx
