"""Skill system — Markdown guidance documents with YAML front matter."""

from skillkit.skills.loader import SkillLoader, split_frontmatter
from skillkit.skills.models import Reference, Skill
from skillkit.skills.references import extract_references, resolve_reference

__all__ = [
    "Reference",
    "Skill",
    "SkillLoader",
    "extract_references",
    "resolve_reference",
    "split_frontmatter",
]
