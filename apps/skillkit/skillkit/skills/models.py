"""Skill data model — a Markdown guidance document with YAML front matter."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class Skill:
    """A skill loaded from a SKILL.md file.

    Skills are Markdown documents that tell an assistant how to approach a
    class of requests. Each one lives in its own directory, carries `name`
    and `description` front matter, and may link longer playbooks under
    `references/`.

    Parsing problems are recorded on the instance rather than raised, so a
    linter can report every broken skill in one pass.
    """

    path: Path
    name: str = ""
    description: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    body: str = ""
    has_frontmatter: bool = False
    frontmatter_error: str | None = None
    # 1-based line where the body starts inside SKILL.md
    body_offset: int = 1

    @property
    def root(self) -> Path:
        """Directory that holds SKILL.md and its references."""
        return self.path.parent

    @property
    def directory_name(self) -> str:
        return self.root.resolve().name

    @property
    def display_name(self) -> str:
        return self.name or self.directory_name

    def __repr__(self) -> str:
        return f"Skill(name={self.display_name!r}, path={str(self.path)!r})"


@dataclass
class Reference:
    """A path referenced from a skill (link, inline code span or front matter)."""

    target: str
    line: int = 0
    source: str = "link"
