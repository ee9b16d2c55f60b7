from __future__ import annotations

import asyncio
from dataclasses import replace

import pytest
from fastmcp import Client

from models.person_profile import PersonProfile
from server import analyze_profile, create_server, sales_research
from services.errors import RemoteApiError


class NullClient:
    def get_person_profile(self, request):
        raise AssertionError("no network in tests")


def test_server_registers_tool_and_prompts(test_settings):
    mcp = create_server(settings=test_settings, client=NullClient())

    tools = asyncio.run(mcp.get_tools())
    assert list(tools) == ["get_person_profile"]
    params = tools["get_person_profile"].parameters
    assert params["required"] == ["profile_url"]
    assert params["properties"]["use_cache"]["enum"] == ["if-present", "if-recent"]
    assert params["properties"]["skills"]["enum"] == ["include", "exclude"]

    prompts = asyncio.run(mcp.get_prompts())
    assert set(prompts) == {"analyze-profile", "compare-candidates", "enrich-contact", "sales-research"}


def test_server_builds_real_client_from_settings(test_settings):
    mcp = create_server(settings=test_settings)
    assert mcp.name == "mcp-server-proxycurl"


def test_server_refuses_to_build_without_key(test_settings):
    with pytest.raises(RuntimeError):
        create_server(settings=replace(test_settings, proxycurl_api_key=None))


def test_prompt_functions_render_text():
    assert "https://x.com/alice" in analyze_profile("https://x.com/alice")
    assert "Product/Service Context: payroll" in sales_research("alice", "payroll")


class StubClient:
    def __init__(self, payload=None, exc: Exception | None = None):
        self.payload = payload
        self.exc = exc
        self.requests = []

    def get_person_profile(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return PersonProfile.model_validate(self.payload)


def call_tool(mcp, arguments):
    async def _call():
        async with Client(mcp) as client:
            return await client.call_tool("get_person_profile", arguments, raise_on_error=False)

    return asyncio.run(_call())


def test_client_call_returns_rendered_profile(test_settings, profile_payload):
    stub = StubClient(profile_payload)
    mcp = create_server(settings=test_settings, client=stub)

    result = call_tool(mcp, {"profile_url": "@johnrmarty", "skills": "include"})

    assert result.is_error is False
    assert result.content[0].text.startswith("# John Marty")
    assert stub.requests[0].to_query_params() == {
        "twitter_profile_url": "https://x.com/johnrmarty",
        "skills": "include",
    }


def test_client_call_reports_remote_error_text(test_settings):
    stub = StubClient(exc=RemoteApiError("Proxycurl API error: Invalid API key", status_code=401))
    mcp = create_server(settings=test_settings, client=stub)

    result = call_tool(mcp, {"profile_url": "johnrmarty"})

    assert result.is_error is True
    assert result.content[0].text == "Error: Proxycurl API error: Invalid API key"


def test_client_call_reports_invalid_reference(test_settings):
    stub = StubClient({})
    mcp = create_server(settings=test_settings, client=stub)

    result = call_tool(mcp, {"profile_url": "https://invalid-website.com/profile"})

    assert result.is_error is True
    assert result.content[0].text.startswith("Error: Invalid profile URL or username provided.")
    assert stub.requests == []


def test_client_call_reports_bad_enum_flag(test_settings):
    stub = StubClient({})
    mcp = create_server(settings=test_settings, client=stub)

    result = call_tool(mcp, {"profile_url": "johnrmarty", "use_cache": "always"})

    assert result.is_error is True
    assert result.content[0].text.startswith("Error: ")
    assert "use_cache" in result.content[0].text
    assert stub.requests == []


@pytest.mark.parametrize("arguments, fragment", [
    ({}, "profile_url"),
    ({"profile_url": 123}, "profile_url"),
    ({"profile_url": "johnrmarty", "skills": 1}, "skills"),
])
def test_client_call_rejected_arguments_keep_error_prefix(test_settings, arguments, fragment):
    stub = StubClient({})
    mcp = create_server(settings=test_settings, client=stub)

    result = call_tool(mcp, arguments)

    assert result.is_error is True
    assert result.content[0].text.startswith("Error: ")
    assert fragment in result.content[0].text
    assert stub.requests == []
