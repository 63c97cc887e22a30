"""Extract the file paths a skill points at.

Three sources are scanned:
- Markdown links and images, `[text](references/playbook.md)`
- inline mentions of `references/...` paths, quoted or bare
- the optional `references:` front-matter key

Fenced code blocks are skipped; they hold third-party sample code.
"""

import re
from pathlib import Path

from skillkit.skills.models import Reference, Skill

_LINK_RE = re.compile(r"!?\[[^\]]*\]\(\s*(<[^>]+>|[^)\s]+)(?:\s+[\"'(][^)]*)?\)")
_INLINE_RE = re.compile(r"(?<![\w./-])(references/[\w./-]*[\w-]\.[A-Za-z0-9]+)")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")
_FENCE_RE = re.compile(r"^\s*(`{3,}|~{3,})(.*)$")


def _normalise_target(raw: str) -> str | None:
    target = raw.strip()
    if target.startswith("<") and target.endswith(">"):
        target = target[1:-1].strip()
    if not target or target.startswith("#") or _SCHEME_RE.match(target):
        return None
    if target.startswith("//"):
        return None
    target = target.split("#", 1)[0].split("?", 1)[0]
    return target or None


def _body_lines(skill: Skill):
    """Yield (line_number, line) for body lines outside fenced code blocks.

    A fence closes only on a line of the opening character, at least as long
    as the opener, with no info string.
    """
    fence: str | None = None
    for idx, line in enumerate(skill.body.splitlines()):
        match = _FENCE_RE.match(line)
        if fence is None:
            if match:
                fence = match.group(1)
                continue
            yield skill.body_offset + idx, line
        elif (
            match
            and match.group(1)[0] == fence[0]
            and len(match.group(1)) >= len(fence)
            and not match.group(2).strip()
        ):
            fence = None


def _frontmatter_targets(skill: Skill) -> list[str]:
    value = skill.metadata.get("references")
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [v for v in value if isinstance(v, str)]
    return []


def extract_references(skill: Skill) -> list[Reference]:
    """Return the relative paths referenced by a skill, first occurrence wins."""
    refs: list[Reference] = []
    seen: set[str] = set()

    def add(target: str | None, line: int, source: str) -> None:
        if target is None or target in seen:
            return
        seen.add(target)
        refs.append(Reference(target=target, line=line, source=source))

    for target in _frontmatter_targets(skill):
        add(_normalise_target(target), 0, "frontmatter")

    for line_no, line in _body_lines(skill):
        link_spans: list[tuple[int, int]] = []
        for match in _LINK_RE.finditer(line):
            link_spans.append(match.span())
            add(_normalise_target(match.group(1)), line_no, "link")
        for match in _INLINE_RE.finditer(line):
            if any(start <= match.start() < end for start, end in link_spans):
                continue
            add(match.group(1), line_no, "inline")

    return refs


def resolve_reference(skill: Skill, ref: Reference) -> Path:
    """Resolve a reference relative to the skill directory."""
    target = ref.target
    if target.startswith("/"):
        return Path(target).resolve()
    return (skill.root / target).resolve()


def is_within(path: Path, base: Path) -> bool:
    base = base.resolve()
    return path == base or base in path.parents
