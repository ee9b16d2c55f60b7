from __future__ import annotations

from typing import Protocol

from models.enrichment_request import EnrichmentRequest
from models.person_profile import PersonProfile


class ProfileApiPort(Protocol):
    def get_person_profile(self, request: EnrichmentRequest) -> PersonProfile:
        ...
