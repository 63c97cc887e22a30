"""Run lint rules over a skills tree."""

import logging
from pathlib import Path

from skillkit.config.settings import LintSettings, get_settings
from skillkit.lint import rules as _builtin_rules  # noqa: F401
from skillkit.lint.context import RepositoryContext, SkillContext
from skillkit.lint.models import Finding, LintReport, Severity
from skillkit.lint.registry import Rule, all_rules
from skillkit.skills.loader import SkillLoader
from skillkit.skills.models import Skill

logger = logging.getLogger(__name__)


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return str(path)


def _active_rules(settings: LintSettings, scope: str) -> list[Rule]:
    ignored = set(settings.ignore)
    return [r for r in all_rules() if r.scope == scope and r.code not in ignored]


def _severity(rule: Rule, settings: LintSettings) -> Severity:
    override = settings.severity_overrides.get(rule.code)
    return Severity(override) if override else rule.severity


def _run_rule(rule: Rule, target, settings: LintSettings, default_path: Path, root: Path, skill_name):
    findings: list[Finding] = []
    severity = _severity(rule, settings)
    for message, path, line in rule.check(target):
        findings.append(
            Finding(
                code=rule.code,
                rule=rule.name,
                severity=severity,
                path=_display_path(Path(path) if path else default_path, root),
                line=line,
                message=message,
                skill=skill_name,
            )
        )
    return findings


def _sort_key(finding: Finding):
    return (finding.path, finding.line, finding.code, finding.message)


def lint_skill(skill: Skill, settings: LintSettings | None = None, root: Path | None = None) -> list[Finding]:
    """Run every skill-scoped rule against one skill."""
    settings = settings or get_settings()
    root = root or skill.root
    ctx = SkillContext(skill=skill, settings=settings)
    return sorted(_lint_context(ctx, settings, root), key=_sort_key)


def _lint_context(ctx: SkillContext, settings: LintSettings, root: Path) -> list[Finding]:
    findings: list[Finding] = []
    name = ctx.skill.name or None
    for rule in _active_rules(settings, "skill"):
        findings.extend(_run_rule(rule, ctx, settings, ctx.skill.path, root, name))
    return findings


def lint_repository(root: str | Path, settings: LintSettings | None = None) -> LintReport:
    """Load every skill under root and lint it.

    Skill-scoped rules run once per skill, repository-scoped rules once per
    run. Findings are sorted by path, line and code.
    """
    settings = settings or get_settings()
    root_path = Path(root)
    skills = SkillLoader.load(
        root_path,
        skill_filename=settings.skill_filename,
        exclude_dirs=settings.effective_exclude_dirs,
    )

    repo = RepositoryContext(
        root=root_path,
        settings=settings,
        skills=[SkillContext(skill=s, settings=settings) for s in skills],
    )

    findings: list[Finding] = []
    for ctx in repo.skills:
        findings.extend(_lint_context(ctx, settings, root_path))
    for rule in _active_rules(settings, "repository"):
        findings.extend(_run_rule(rule, repo, settings, root_path, root_path, None))

    report = LintReport(
        root=str(root_path),
        skills_checked=len(skills),
        findings=sorted(findings, key=_sort_key),
    )
    logger.info(
        "Linted %d skills under %s: %d errors, %d warnings",
        report.skills_checked,
        root_path,
        report.errors,
        report.warnings,
    )
    return report
