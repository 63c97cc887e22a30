"""Render lint reports for humans and machines."""

import json

from skillkit.lint.models import LintReport
from skillkit.lint.registry import Rule


def render_text(report: LintReport, strict: bool = False) -> str:
    lines = [
        f"{f.location()}: {f.severity.value} {f.code} [{f.rule}] {f.message}"
        for f in report.findings
    ]
    status = "OK" if report.ok(strict) else "FAIL"
    lines.append(
        f"{status}: {report.skills_checked} skills checked, "
        f"{report.errors} errors, {report.warnings} warnings"
    )
    return "\n".join(lines)


def render_json(report: LintReport, strict: bool = False) -> str:
    payload = report.model_dump(mode="json")
    payload["summary"] = {
        "errors": report.errors,
        "warnings": report.warnings,
        "ok": report.ok(strict),
    }
    return json.dumps(payload, indent=2)


def render_rules(rules: list[Rule]) -> str:
    width = max((len(r.name) for r in rules), default=0)
    return "\n".join(
        f"{r.code}  {r.severity.value:<7}  {r.name:<{width}}  {r.description}" for r in rules
    )
