from __future__ import annotations

from typing import List, Optional

from models.person_profile import Experience, PersonProfile


def _format_amount(value: Optional[float]) -> str:
    """Thousands-grouped amount; a missing bound renders as NaN, never as zero."""
    if value is None:
        return "NaN"
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{round(value, 3):,}"


def _current_position(experiences: Optional[List[Experience]]) -> Optional[Experience]:
    # First open-ended entry in the API's order, not the latest start date
    for exp in experiences or []:
        if exp.ends_at is None:
            return exp
    return None


def _position_line(exp: Experience) -> str:
    title = f"**{exp.title}**" if exp.title else ""
    company = f"at {exp.company}" if exp.company else ""
    return " ".join(part for part in (title, company) if part) or "**Unknown**"


def format_profile(profile: PersonProfile) -> str:
    """Render a person profile as a plain-text document.

    Sections appear in a fixed order and only when their data is present;
    they are separated by one blank line.
    """
    sections: List[str] = []

    sections.append(f"# {profile.full_name or 'Unknown'}")
    if profile.headline:
        sections.append(f"**{profile.headline}**")
    if profile.city and profile.state and profile.country_full_name:
        sections.append(f"📍 {profile.city}, {profile.state}, {profile.country_full_name}")
    if profile.connections:
        sections.append(f"🔗 {profile.connections}+ connections")

    if profile.summary:
        sections.append(f"## Summary\n{profile.summary}")

    current = _current_position(profile.experiences)
    if current is not None:
        lines = ["## Current Position", _position_line(current)]
        if current.description:
            lines.append(current.description)
        sections.append("\n".join(lines))

    if profile.education:
        lines = ["## Education"]
        for edu in profile.education:
            lines.append(
                f"- **{edu.school or 'N/A'}** — {edu.degree_name or 'N/A'} in {edu.field_of_study or 'N/A'}"
            )
        sections.append("\n".join(lines))

    if profile.skills:
        sections.append(f"## Skills\n{', '.join(profile.skills)}")

    if profile.extra is not None:
        lines = ["## Additional Information"]
        if profile.extra.website:
            lines.append(f"🌐 Website: {profile.extra.website}")
        if profile.extra.github_profile_id:
            lines.append(f"💻 GitHub: @{profile.extra.github_profile_id}")
        if profile.extra.twitter_profile_id:
            lines.append(f"🐦 Twitter: @{profile.extra.twitter_profile_id}")
        sections.append("\n".join(lines))

    if profile.personal_emails:
        sections.append(f"## Contact\n📧 Email: {', '.join(profile.personal_emails)}")

    if profile.inferred_salary is not None:
        salary = profile.inferred_salary
        sections.append(
            f"## Salary Range\n💰 ${_format_amount(salary.min)} - ${_format_amount(salary.max)}"
        )

    return "\n\n".join(sections)
