"""robots.txt generation."""

from typing import List, NamedTuple, Sequence

from app.config import SiteConfig


class RobotsRule(NamedTuple):
    user_agent: str
    allow: Sequence[str] = ()
    disallow: Sequence[str] = ()


# Private or framework-internal areas are hidden from every crawler; AI
# training crawlers are blocked entirely.
ROBOTS_RULES: Sequence[RobotsRule] = (
    RobotsRule(
        user_agent="*",
        allow=("/",),
        disallow=("/api/", "/studio/", "/_next/", "/admin/", "/draft/", "/private/"),
    ),
    RobotsRule(user_agent="GPTBot", disallow=("/",)),
    RobotsRule(user_agent="ChatGPT-User", disallow=("/",)),
)


def generate_robots_txt(config: SiteConfig, rules: Sequence[RobotsRule] = ROBOTS_RULES) -> str:
    lines: List[str] = []
    for rule in rules:
        lines.append(f"User-agent: {rule.user_agent}")
        lines.extend(f"Allow: {path}" for path in rule.allow)
        lines.extend(f"Disallow: {path}" for path in rule.disallow)
        lines.append("")
    lines.append(f"Sitemap: {config.origin}/sitemap.xml")
    lines.append(f"Host: {config.origin}")
    return "\n".join(lines) + "\n"
