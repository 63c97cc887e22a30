"""SkillLoader — discovers SKILL.md files and parses their YAML front matter."""

import logging
from collections.abc import Iterable
from pathlib import Path

import yaml

from skillkit.errors import SkillParseError
from skillkit.skills.models import Skill

logger = logging.getLogger(__name__)

SKILL_FILENAME = "SKILL.md"
DEFAULT_EXCLUDE_DIRS = frozenset(
    {"archive", "archived", "drafts", ".git", "node_modules", "__pycache__", ".venv"}
)

_DELIMITER = "---"


def _locate_frontmatter(text: str) -> tuple[str | None, str, int]:
    """Find the front-matter block.

    Returns (frontmatter_text, body, body_offset). frontmatter_text is None
    when the document does not open with `---`. An opening `---` with no
    closing line raises SkillParseError.
    """
    text = text.lstrip("\ufeff")
    lines = text.splitlines()
    if not lines or lines[0].rstrip() != _DELIMITER:
        return None, text, 1

    for idx in range(1, len(lines)):
        if lines[idx].rstrip() in (_DELIMITER, "..."):
            frontmatter = "\n".join(lines[1:idx])
            body = "\n".join(lines[idx + 1 :])
            return frontmatter, body, idx + 2

    raise SkillParseError("unclosed front matter: no closing '---' line")


def split_frontmatter(text: str) -> tuple[dict, str]:
    """Split YAML front matter from a Markdown body.

    Returns (metadata_dict, body_text). If there is no front matter, returns
    ({}, full_text). Raises SkillParseError for an unclosed block, invalid
    YAML, or a block that is not a mapping.
    """
    frontmatter, body, _ = _locate_frontmatter(text)
    if frontmatter is None:
        return {}, body
    return _parse_frontmatter(frontmatter), body


def _parse_frontmatter(frontmatter: str) -> dict:
    try:
        meta = yaml.safe_load(frontmatter)
    except yaml.YAMLError as e:
        raise SkillParseError(f"invalid YAML front matter: {e}") from e

    if meta is None:
        return {}
    if not isinstance(meta, dict):
        raise SkillParseError(
            f"front matter must be a mapping, got {type(meta).__name__}"
        )
    return meta


def _text_field(meta: dict, key: str) -> str:
    value = meta.get(key)
    if isinstance(value, str):
        return value.strip()
    return ""


class SkillLoader:
    """Load skills from a directory tree.

    A skill is a directory containing SKILL.md with YAML front matter:

        ---
        name: docker
        description: Write and debug Dockerfiles and compose files
        ---
        # Docker
        [guidance here]

    See references/docker-playbook.md for extended examples.
    """

    @staticmethod
    def discover(
        root: str | Path,
        skill_filename: str = SKILL_FILENAME,
        exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
    ) -> list[Path]:
        """Return the sorted SKILL.md paths under root.

        If root is itself a skill directory, only its own SKILL.md is returned.
        """
        root_path = Path(root)
        own = root_path / skill_filename
        if own.is_file():
            return [own]

        excluded = set(exclude_dirs)
        found: list[Path] = []
        for candidate in root_path.rglob(skill_filename):
            if not candidate.is_file():
                continue
            rel_dirs = candidate.relative_to(root_path).parts[:-1]
            if excluded.intersection(rel_dirs):
                logger.debug("Skipping excluded skill file: %s", candidate)
                continue
            found.append(candidate)
        return sorted(found, key=lambda p: p.parts)

    @staticmethod
    def load(
        root: str | Path,
        skill_filename: str = SKILL_FILENAME,
        exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
    ) -> list[Skill]:
        """Discover and parse every skill under root."""
        root_path = Path(root)
        if not root_path.is_dir():
            logger.warning("Skills directory not found: %s", root_path)
            return []

        skills: list[Skill] = []
        for skill_file in SkillLoader.discover(root_path, skill_filename, exclude_dirs):
            try:
                skill = SkillLoader.parse_skill_file(skill_file)
            except (OSError, UnicodeDecodeError):
                logger.warning("Failed to read skill file: %s", skill_file, exc_info=True)
                continue
            skills.append(skill)
            logger.debug("Loaded skill: %s from %s", skill.display_name, skill_file)

        logger.info("Loaded %d skills from %s", len(skills), root_path)
        return skills

    @staticmethod
    def parse_skill_file(path: str | Path) -> Skill:
        """Parse a single SKILL.md.

        Front-matter problems are recorded on the returned Skill instead of
        raised. I/O and decoding errors propagate.
        """
        path = Path(path)
        raw = path.read_text(encoding="utf-8")
        return SkillLoader.parse_skill_text(raw, path)

    @staticmethod
    def parse_skill_text(raw: str, path: Path) -> Skill:
        try:
            frontmatter, body, body_offset = _locate_frontmatter(raw)
        except SkillParseError as e:
            logger.warning("Invalid front matter in %s: %s", path, e)
            return Skill(path=path, body=raw, has_frontmatter=True, frontmatter_error=str(e))

        skill = Skill(path=path, body=body, body_offset=body_offset)
        if frontmatter is None:
            return skill

        skill.has_frontmatter = True
        try:
            meta = _parse_frontmatter(frontmatter)
        except SkillParseError as e:
            logger.warning("Invalid front matter in %s: %s", path, e)
            skill.frontmatter_error = str(e)
            return skill

        skill.metadata = meta
        skill.name = _text_field(meta, "name")
        skill.description = _text_field(meta, "description")
        return skill
