"""Rule definition and registry."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from skillkit.lint.models import Severity

# A check yields (message, path, line) tuples. path None means the skill file.
Violation = tuple[str, Any, int]


@dataclass
class Rule:
    """A documentation-integrity check.

    Each rule has:
    - code: stable identifier used in reports and ignore lists (e.g. "SK003")
    - name: short kebab-case label
    - description: one line shown by `skill-lint rules`
    - severity: default severity of its findings
    - scope: "skill" (run once per skill) or "repository" (once per run)
    - check: callable yielding violations
    """

    code: str
    name: str
    description: str
    severity: Severity
    check: Callable[..., Iterable[Violation]]
    scope: str = "skill"

    def __repr__(self) -> str:
        return f"Rule(code={self.code!r}, name={self.name!r})"


_registry: dict[str, Rule] = {}


def register_rule(rule: Rule) -> Rule:
    if rule.code in _registry:
        raise ValueError(f"Rule code already registered: {rule.code}")
    _registry[rule.code] = rule
    return rule


def rule(code: str, name: str, description: str, severity: Severity, scope: str = "skill"):
    """Decorator form of register_rule for check functions."""

    def decorator(func: Callable[..., Iterable[Violation]]) -> Callable[..., Iterable[Violation]]:
        register_rule(
            Rule(
                code=code,
                name=name,
                description=description,
                severity=severity,
                check=func,
                scope=scope,
            )
        )
        return func

    return decorator


def get_rule(code: str) -> Rule | None:
    return _registry.get(code.upper())


def all_rules() -> list[Rule]:
    return [_registry[code] for code in sorted(_registry)]
