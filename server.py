"""
Proxycurl MCP server: one person profile tool plus four canned prompts.
"""

import logging
from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from config.settings import Settings, get_settings
from ports.profile_api import ProfileApiPort
from services.prompts import PROMPTS, render_prompt
from services.proxycurl_client import ProxycurlClient
from tools.profile_tool import ErrorTextMiddleware, ProfileLookupTool


logger = logging.getLogger(__name__)


def analyze_profile(
    profile_url: Annotated[str, Field(description="The profile URL to analyze")],
) -> str:
    return render_prompt("analyze-profile", {"profile_url": profile_url})


def compare_candidates(
    profile_urls: Annotated[str, Field(description="Comma-separated list of profile URLs")],
    role_requirements: Annotated[str, Field(description="Key requirements for the role")],
) -> str:
    return render_prompt(
        "compare-candidates",
        {"profile_urls": profile_urls, "role_requirements": role_requirements},
    )


def enrich_contact(
    profile_url: Annotated[str, Field(description="The profile URL to enrich")],
) -> str:
    return render_prompt("enrich-contact", {"profile_url": profile_url})


def sales_research(
    profile_url: Annotated[str, Field(description="The prospect's profile URL")],
    product_context: Annotated[Optional[str], Field(description="Your product/service context")] = None,
) -> str:
    return render_prompt(
        "sales-research",
        {"profile_url": profile_url, "product_context": product_context},
    )


PROMPT_FUNCTIONS = {
    "analyze-profile": analyze_profile,
    "compare-candidates": compare_candidates,
    "enrich-contact": enrich_contact,
    "sales-research": sales_research,
}


def create_server(
    settings: Optional[Settings] = None,
    client: Optional[ProfileApiPort] = None,
) -> FastMCP:
    """Build the MCP server; the API key is read once here and reused for every call."""
    settings = settings or get_settings()
    if client is None:
        client = ProxycurlClient(api_key=settings.require_api_key(), settings=settings)

    mcp = FastMCP(
        name=settings.server_name,
        instructions="Person profile enrichment from LinkedIn, Twitter/X and Facebook via Proxycurl.",
        version=settings.server_version,
    )

    tool = ProfileLookupTool(client)
    mcp.tool(tool.get_person_profile, name=tool.name, description=tool.description)
    mcp.add_middleware(ErrorTextMiddleware())

    for name, fn in PROMPT_FUNCTIONS.items():
        mcp.prompt(fn, name=name, description=PROMPTS[name].description)

    logger.debug("Registered tool %s and %d prompts", tool.name, len(PROMPT_FUNCTIONS))
    return mcp
