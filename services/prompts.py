from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from string import Template
from typing import Dict, List, Mapping, Optional


PROMPTS_DIR = Path(__file__).resolve().parent.parent / "prompts"


@dataclass(frozen=True)
class PromptArgument:
    name: str
    description: str
    required: bool = True


@dataclass(frozen=True)
class PromptSpec:
    name: str
    description: str
    template_file: str
    arguments: List[PromptArgument]


PROMPTS: Dict[str, PromptSpec] = {
    "analyze-profile": PromptSpec(
        name="analyze-profile",
        description="Analyze a person's professional profile for insights",
        template_file="analyze_profile.txt",
        arguments=[PromptArgument("profile_url", "The profile URL to analyze")],
    ),
    "compare-candidates": PromptSpec(
        name="compare-candidates",
        description="Compare multiple candidate profiles for a role",
        template_file="compare_candidates.txt",
        arguments=[
            PromptArgument("profile_urls", "Comma-separated list of profile URLs"),
            PromptArgument("role_requirements", "Key requirements for the role"),
        ],
    ),
    "enrich-contact": PromptSpec(
        name="enrich-contact",
        description="Enrich a contact with additional information",
        template_file="enrich_contact.txt",
        arguments=[PromptArgument("profile_url", "The profile URL to enrich")],
    ),
    "sales-research": PromptSpec(
        name="sales-research",
        description="Research a prospect for sales outreach",
        template_file="sales_research.txt",
        arguments=[
            PromptArgument("profile_url", "The prospect's profile URL"),
            PromptArgument("product_context", "Your product/service context", required=False),
        ],
    ),
}


def _load_template(spec: PromptSpec) -> Template:
    return Template((PROMPTS_DIR / spec.template_file).read_text(encoding="utf-8").rstrip("\n"))


def render_prompt(name: str, arguments: Optional[Mapping[str, Optional[str]]] = None) -> str:
    """Fill a prompt template with caller-supplied arguments."""
    if name not in PROMPTS:
        raise KeyError(f"Unknown prompt: {name}")
    spec = PROMPTS[name]
    args = dict(arguments or {})
    missing = [a.name for a in spec.arguments if a.required and not args.get(a.name)]
    if missing:
        raise ValueError(f"Missing required prompt argument(s) for {name}: {', '.join(missing)}")

    values = {a.name: args.get(a.name) or "" for a in spec.arguments}
    if name == "sales-research":
        context = args.get("product_context")
        values["product_context_line"] = f"Product/Service Context: {context}" if context else ""
    return _load_template(spec).substitute(values)
