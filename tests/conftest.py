"""Shared fixtures: small skill trees built under tmp_path."""

import json
import os
import textwrap
from pathlib import Path

import pytest

from skillkit.config.settings import LintSettings, reload_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Isolate settings from the developer's environment and .env file."""
    for key in list(os.environ):
        if key.startswith("SKILLKIT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    reload_settings()
    yield
    reload_settings()


@pytest.fixture
def settings() -> LintSettings:
    return LintSettings()


def write_skill(root: Path, dirname: str, frontmatter: str | None, body: str = "# Guide\n\nUse it.\n") -> Path:
    skill_dir = root / dirname
    skill_dir.mkdir(parents=True, exist_ok=True)
    text = body
    if frontmatter is not None:
        text = f"---\n{textwrap.dedent(frontmatter).strip()}\n---\n{body}"
    path = skill_dir / "SKILL.md"
    path.write_text(text, encoding="utf-8")
    return path


def write_file(path: Path, content: str = "content\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def write_json(path: Path, data) -> Path:
    return write_file(path, json.dumps(data, indent=2))


@pytest.fixture
def skills_tree(tmp_path) -> Path:
    """A clean tree modelled on the ink/docker/crawl4ai guides."""
    root = tmp_path / "skills"
    write_skill(
        root,
        "ink",
        "name: ink\ndescription: Build terminal UIs with Ink and React",
        "# Ink\n\nSee [the playbook](references/ink-playbook.md).\n",
    )
    write_file(root / "ink" / "references" / "ink-playbook.md", "# Playbook\n")
    write_json(
        root / "ink" / "evals" / "evals.json",
        {
            "skill_name": "ink",
            "evals": [
                {"id": 1, "prompt": "Build a spinner", "expectations": ["uses useEffect"]},
                {"id": 2, "prompt": "Add a select list", "expectations": ["handles arrow keys"]},
            ],
        },
    )
    write_skill(
        root,
        "docker",
        "name: docker\ndescription: Write Dockerfiles and compose files",
        "# Docker\n\nDeeper notes live in `references/docker-playbook.md`.\n",
    )
    write_file(root / "docker" / "references" / "docker-playbook.md", "# Docker playbook\n")
    write_skill(
        root,
        "crawl4ai",
        "name: crawl4ai\ndescription: Scrape websites with Crawl4AI",
        "# Crawl4AI\n\n```python\n# see references/not-real.md\n```\n",
    )
    return root
