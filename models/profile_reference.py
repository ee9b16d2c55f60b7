from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


Provider = Literal["linkedin", "twitter", "facebook"]


class ProfileReference(BaseModel):
    """A profile identity resolved to one provider and its canonical URL."""

    provider: Provider
    canonical_url: str

    model_config = ConfigDict(frozen=True)
