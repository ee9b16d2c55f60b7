"""
Proxycurl person profile API client.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from config.settings import Settings, get_settings
from models.enrichment_request import EnrichmentRequest
from models.person_profile import PersonProfile
from services.errors import MissingReference, RemoteApiError
from utils.api_logger import log_call


logger = logging.getLogger(__name__)

PERSON_PROFILE_PATH = "/linkedin"


def _error_message(response: requests.Response) -> str:
    """Prefer the API's ``message`` field, fall back to the HTTP reason phrase."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.reason or f"HTTP {response.status_code}"


class ProxycurlClient:
    """Single-attempt client for the Proxycurl person profile endpoint.

    All three provider URL kinds go through the same ``/linkedin`` path.
    There is no retry: a failed call surfaces as RemoteApiError.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ):
        self.settings = settings or get_settings()
        self.api_key = api_key or self.settings.require_api_key()
        self.base_url = self.settings.proxycurl_base_url.rstrip("/")
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _trace(self, request: EnrichmentRequest, started: float, **fields: Any) -> None:
        log_call(
            caller="proxycurl_client.get_person_profile",
            provider="proxycurl",
            operation=f"GET {PERSON_PROFILE_PATH}",
            duration_ms=int((time.monotonic() - started) * 1000),
            extras={
                "profile_field": request.provider_url_field,
                "flags": request.flags.as_params(),
            },
            **fields,
        )

    def get_person_profile(self, request: EnrichmentRequest) -> PersonProfile:
        """Fetch and parse one person profile."""
        if request.provider_url_field is None:
            raise MissingReference("At least one profile URL must be provided")

        url = f"{self.base_url}{PERSON_PROFILE_PATH}"
        params = request.to_query_params()
        logger.info(
            "Fetching person profile via %s",
            request.provider_url_field,
            extra={"step": "fetch_profile", "provider": "proxycurl"},
        )

        started = time.monotonic()
        try:
            response = self.session.get(
                url,
                params=params,
                headers=self._headers(),
                timeout=self.settings.http_timeout_seconds,
            )
        except requests.exceptions.RequestException as e:
            self._trace(request, started, status="error", error=str(e))
            logger.error("Proxycurl request failed: %s", e, extra={"status": "error", "provider": "proxycurl"})
            raise RemoteApiError(f"Proxycurl API request failed: {e}") from e

        if not response.ok:
            message = f"Proxycurl API error: {_error_message(response)}"
            self._trace(request, started, status="error", http_status=response.status_code, error=message)
            logger.error(
                "API request failed with status %s: %s",
                response.status_code,
                message,
                extra={"status": "error", "provider": "proxycurl"},
            )
            raise RemoteApiError(message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            self._trace(request, started, status="error", http_status=response.status_code, error="invalid json")
            raise RemoteApiError("Proxycurl API returned a response that is not valid JSON") from e
        if not isinstance(data, dict):
            self._trace(request, started, status="error", http_status=response.status_code, error="not an object")
            raise RemoteApiError("Proxycurl API returned an unexpected response shape")

        try:
            profile = PersonProfile.model_validate(data)
        except ValidationError as e:
            self._trace(request, started, status="error", http_status=response.status_code, error="schema mismatch")
            raise RemoteApiError(f"Proxycurl API returned an unexpected profile shape: {e}") from e

        self._trace(request, started, status="ok", http_status=response.status_code)
        return profile
