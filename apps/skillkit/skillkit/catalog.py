"""Skill catalog — the discovery manifest a skill-loading host reads."""

import json
from pathlib import Path

from pydantic import BaseModel, Field

from skillkit.evals.loader import find_eval_files
from skillkit.skills.models import Skill
from skillkit.skills.references import extract_references


class CatalogEntry(BaseModel):
    name: str
    description: str
    path: str
    references: list[str] = Field(default_factory=list)
    evals: list[str] = Field(default_factory=list)


def _relative(path: Path, root: Path) -> str:
    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return str(path)


def build_catalog(skills: list[Skill], root: str | Path, evals_dir: str = "evals") -> list[CatalogEntry]:
    """One entry per skill, sorted by name. Nameless skills use their directory name."""
    root = Path(root)
    entries = [
        CatalogEntry(
            name=skill.display_name,
            description=skill.description,
            path=_relative(skill.path, root),
            references=[ref.target for ref in extract_references(skill)],
            evals=[_relative(p, root) for p in find_eval_files(skill.root, evals_dir)],
        )
        for skill in skills
    ]
    return sorted(entries, key=lambda e: (e.name, e.path))


def render_catalog_text(entries: list[CatalogEntry]) -> str:
    if not entries:
        return "No skills found."
    width = max(len(e.name) for e in entries)
    return "\n".join(f"{e.name:<{width}}  {e.description}" for e in entries)


def render_catalog_json(entries: list[CatalogEntry]) -> str:
    return json.dumps([e.model_dump() for e in entries], indent=2)
