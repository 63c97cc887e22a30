"""skillkit error hierarchy."""


class SkillError(Exception):
    """Base error for skill loading and validation."""


class SkillParseError(SkillError):
    """SKILL.md front matter is malformed (bad YAML or not a mapping)."""


class EvalFormatError(SkillError):
    """An eval prompt list is not valid structured text or has the wrong shape."""

    def __init__(self, path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {detail}")


class ConfigError(SkillError):
    """Invalid lint configuration (settings, .skillkit.yaml or CLI flags)."""
