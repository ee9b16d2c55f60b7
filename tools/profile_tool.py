"""
Person profile lookup tool exposed over MCP.

Every failure is turned into an ``Error: <message>`` text result. Arguments
that FastMCP rejects before the tool body runs get the same treatment from
``ErrorTextMiddleware``.
"""

import logging
from dataclasses import dataclass
from typing import Annotated, Any, Dict, Mapping, Optional, Tuple

from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext
from pydantic import Field, ValidationError

from pipelines.lookup_profile import lookup_person_profile
from ports.profile_api import ProfileApiPort
from services.errors import ProfileLookupError, SchemaValidationError
from services.request_builder import describe_validation_error


logger = logging.getLogger(__name__)

TOOL_NAME = "get_person_profile"
TOOL_DESCRIPTION = (
    "Get enriched profile data for a person from LinkedIn, Twitter/X, or Facebook. "
    "Supports extracting contact info, social profiles, salary data, and more."
)

_INCLUDE: Tuple[str, ...] = ("include", "exclude")


def _option(description: str, choices: Tuple[str, ...] = _INCLUDE):
    return Annotated[
        Optional[str],
        Field(description=description, json_schema_extra={"enum": list(choices)}),
    ]


@dataclass(frozen=True)
class ToolOutcome:
    text: str
    is_error: bool = False


class ProfileLookupTool:
    """Adapter between MCP tool calls and the profile lookup pipeline."""

    name = TOOL_NAME
    description = TOOL_DESCRIPTION

    def __init__(self, client: ProfileApiPort):
        self.client = client

    def execute(self, arguments: Optional[Mapping[str, Any]]) -> ToolOutcome:
        args: Dict[str, Any] = dict(arguments or {})
        profile_url = args.pop("profile_url", None)
        try:
            if not isinstance(profile_url, str):
                raise SchemaValidationError("profile_url is required and must be a string")
            text = lookup_person_profile(profile_url, args, self.client)
            return ToolOutcome(text=text)
        except ProfileLookupError as exc:
            logger.warning(
                "%s failed: %s", TOOL_NAME, exc,
                extra={"step": TOOL_NAME, "status": "error", "error": type(exc).__name__},
            )
            return ToolOutcome(text=f"Error: {exc}", is_error=True)
        except Exception as exc:
            logger.exception("Unexpected failure in %s", TOOL_NAME, extra={"step": TOOL_NAME, "status": "error"})
            return ToolOutcome(text=f"Error: {str(exc) or 'Unknown error occurred'}", is_error=True)

    def get_person_profile(
        self,
        profile_url: Annotated[
            str,
            Field(description="The profile URL (LinkedIn, Twitter/X, or Facebook) or username to look up"),
        ],
        extra: _option("Include extra data (gender, birth date, industry, interests) - costs 1 extra credit") = None,
        github_profile_id: _option("Include GitHub profile ID - costs 1 extra credit") = None,
        facebook_profile_id: _option("Include Facebook profile ID - costs 1 extra credit") = None,
        twitter_profile_id: _option("Include Twitter profile ID - costs 1 extra credit") = None,
        personal_contact_number: _option("Include personal phone numbers - costs 1 credit per number") = None,
        personal_email: _option("Include personal emails - costs 1 credit per email") = None,
        inferred_salary: _option("Include inferred salary range - costs 1 extra credit") = None,
        skills: _option("Include skills data - costs 1 extra credit") = None,
        use_cache: _option(
            "Cache usage: if-present (any age), if-recent (max 29 days old)", ("if-present", "if-recent")
        ) = None,
        fallback_to_cache: _option("Fallback behavior on errors", ("on-error", "never")) = None,
    ) -> str:
        """Look up a person profile and return it as readable text."""
        outcome = self.execute({
            "profile_url": profile_url,
            "extra": extra,
            "github_profile_id": github_profile_id,
            "facebook_profile_id": facebook_profile_id,
            "twitter_profile_id": twitter_profile_id,
            "personal_contact_number": personal_contact_number,
            "personal_email": personal_email,
            "inferred_salary": inferred_salary,
            "skills": skills,
            "use_cache": use_cache,
            "fallback_to_cache": fallback_to_cache,
        })
        if outcome.is_error:
            # FastMCP reports a ToolError as an isError result carrying this text
            raise ToolError(outcome.text)
        return outcome.text


def error_text(exc: BaseException) -> str:
    """Render any tool-call failure as ``Error: <message>``."""
    cause = exc if isinstance(exc, ValidationError) else exc.__cause__
    if isinstance(cause, ValidationError):
        message = describe_validation_error(cause)
    else:
        message = str(exc) or "Unknown error occurred"
    return message if message.startswith("Error: ") else f"Error: {message}"


class ErrorTextMiddleware(Middleware):
    """Keeps FastMCP's own argument checks behind the ``Error: `` text contract."""

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        try:
            return await call_next(context)
        except Exception as exc:
            text = error_text(exc)
            if isinstance(exc, ToolError) and str(exc) == text:
                raise
            logger.warning(
                "%s rejected: %s", TOOL_NAME, text,
                extra={"step": TOOL_NAME, "status": "error", "error": type(exc).__name__},
            )
            raise ToolError(text) from exc
