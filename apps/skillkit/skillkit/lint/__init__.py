"""Documentation-integrity checks for skill trees."""

from skillkit.lint.models import Finding, LintReport, Severity
from skillkit.lint.registry import Rule, all_rules, get_rule, register_rule
from skillkit.lint.runner import lint_repository, lint_skill

__all__ = [
    "Finding",
    "LintReport",
    "Rule",
    "Severity",
    "all_rules",
    "get_rule",
    "lint_repository",
    "lint_skill",
    "register_rule",
]
