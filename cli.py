from __future__ import annotations

import argparse
import logging
import os
import sys
import uuid
from typing import Dict, List, Optional

from config.settings import get_settings
from models.enrichment_request import EnrichmentFlags
from services.errors import InvalidReference
from services.profile_reference import extract_profile_reference
from services.prompts import PROMPTS, render_prompt
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)

_INCLUDE_FLAGS = [
    "extra",
    "github_profile_id",
    "facebook_profile_id",
    "twitter_profile_id",
    "personal_contact_number",
    "personal_email",
    "inferred_salary",
    "skills",
]


def cmd_serve(args) -> int:
    settings = get_settings()
    try:
        settings.require_api_key()
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    from server import create_server

    server = create_server(settings)
    transport = getattr(args, "transport", None) or settings.mcp_transport
    logger.info("Proxycurl MCP server running on %s", transport)
    server.run(transport=transport)
    return 0


def cmd_lookup(args) -> int:
    settings = get_settings()
    try:
        settings.require_api_key()
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    from services.proxycurl_client import ProxycurlClient
    from tools.profile_tool import ProfileLookupTool

    arguments: Dict[str, Optional[str]] = {"profile_url": args.profile}
    for name in EnrichmentFlags.model_fields:
        arguments[name] = getattr(args, name, None)
    tool = ProfileLookupTool(ProxycurlClient(settings=settings))
    outcome = tool.execute(arguments)
    if outcome.is_error:
        print(outcome.text, file=sys.stderr)
        return 1
    print(outcome.text)
    return 0


def cmd_normalize(args) -> int:
    try:
        reference = extract_profile_reference(args.profile)
    except InvalidReference as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"{reference.provider} {reference.canonical_url}")
    return 0


def _parse_prompt_args(pairs: Optional[List[str]]) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"Prompt argument must be key=value, got: {pair}")
        result[key.strip()] = value
    return result


def cmd_prompt(args) -> int:
    try:
        text = render_prompt(args.name, _parse_prompt_args(args.arg))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Proxycurl person profile MCP server")
    sub = parser.add_subparsers(dest="cmd")

    p_serve = sub.add_parser("serve", help="Run the MCP server (default)")
    p_serve.add_argument("--transport", default=None, help="MCP transport (default from MCP_TRANSPORT, stdio)")
    p_serve.set_defaults(func=cmd_serve)

    p_lookup = sub.add_parser("lookup", help="Look up one person profile and print it")
    p_lookup.add_argument("--profile", "-p", required=True, help="Profile URL, @handle or LinkedIn username")
    for name in _INCLUDE_FLAGS:
        p_lookup.add_argument(f"--{name.replace('_', '-')}", dest=name, choices=["include", "exclude"])
    p_lookup.add_argument("--use-cache", dest="use_cache", choices=["if-present", "if-recent"])
    p_lookup.add_argument("--fallback-to-cache", dest="fallback_to_cache", choices=["on-error", "never"])
    p_lookup.set_defaults(func=cmd_lookup)

    p_norm = sub.add_parser("normalize", help="Print the provider and canonical URL for a profile reference")
    p_norm.add_argument("--profile", "-p", required=True)
    p_norm.set_defaults(func=cmd_normalize)

    p_prompt = sub.add_parser("prompt", help="Print a prompt template")
    p_prompt.add_argument("name", choices=sorted(PROMPTS))
    p_prompt.add_argument("--arg", "-a", action="append", help="Prompt argument as key=value (repeatable)")
    p_prompt.set_defaults(func=cmd_prompt)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    # One RUN_ID per process correlates log lines with the API call trace
    if not os.getenv("RUN_ID"):
        os.environ["RUN_ID"] = uuid.uuid4().hex
    settings = get_settings()
    init_logging(settings.log_level)
    parser = build_parser()
    args = parser.parse_args(argv)
    func = getattr(args, "func", None) or cmd_serve
    return func(args)


if __name__ == "__main__":
    sys.exit(main())
