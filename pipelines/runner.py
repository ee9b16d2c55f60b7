from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from models.enrichment_request import EnrichmentFlags, EnrichmentRequest
from models.person_profile import PersonProfile
from models.profile_reference import ProfileReference
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    profile_input: Optional[str] = None
    raw_flags: Dict[str, Any] = field(default_factory=dict)
    flags: Optional[EnrichmentFlags] = None
    reference: Optional[ProfileReference] = None
    request: Optional[EnrichmentRequest] = None
    profile: Optional[PersonProfile] = None
    text: Optional[str] = None
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            name = type(step).__name__
            started = time.monotonic()
            try:
                ctx = step.run(ctx)
            except Exception as exc:
                logger.warning(
                    "step failed",
                    extra={
                        "step": name,
                        "status": "error",
                        "duration_ms": int((time.monotonic() - started) * 1000),
                        "error": type(exc).__name__,
                    },
                )
                raise
            logger.debug(
                "step done",
                extra={"step": name, "status": "ok", "duration_ms": int((time.monotonic() - started) * 1000)},
            )
        return ctx
