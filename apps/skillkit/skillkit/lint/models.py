"""Lint result models."""

from enum import Enum

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """Finding severity. Errors always fail a run; warnings fail only in strict mode."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Finding(BaseModel):
    """One rule violation."""

    code: str
    rule: str
    severity: Severity
    path: str
    line: int = 0
    message: str
    skill: str | None = None

    def location(self) -> str:
        if self.line:
            return f"{self.path}:{self.line}"
        return self.path


class LintReport(BaseModel):
    """Outcome of linting a skills tree."""

    root: str
    skills_checked: int = 0
    findings: list[Finding] = Field(default_factory=list)

    def count(self, severity: Severity) -> int:
        return sum(1 for f in self.findings if f.severity == severity)

    @property
    def errors(self) -> int:
        return self.count(Severity.ERROR)

    @property
    def warnings(self) -> int:
        return self.count(Severity.WARNING)

    def ok(self, strict: bool = False) -> bool:
        if self.errors:
            return False
        return not (strict and self.warnings)

    def exit_code(self, strict: bool = False) -> int:
        return 0 if self.ok(strict) else 1
