"""Eval rules: prompt lists parse and pair every prompt with a checklist."""

from collections import Counter

from skillkit.lint.context import SkillContext
from skillkit.lint.models import Severity
from skillkit.lint.registry import rule


def _loaded(ctx: SkillContext):
    for result in ctx.eval_files:
        if result.suite is not None:
            yield result.path, result.suite


@rule("EV001", "eval-parse-error", "Eval files are valid JSON/YAML in a known shape", Severity.ERROR)
def eval_parse_error(ctx: SkillContext):
    for result in ctx.eval_files:
        if result.error is not None:
            yield result.error.detail, result.path, 0


@rule(
    "EV002",
    "eval-count-mismatch",
    "Eval files have one assertion list per prompt",
    Severity.ERROR,
)
def eval_count_mismatch(ctx: SkillContext):
    for path, suite in _loaded(ctx):
        if suite.prompt_count != suite.assertion_count:
            yield (
                f"{suite.prompt_count} prompts but {suite.assertion_count} assertion lists",
                path,
                0,
            )


@rule("EV003", "eval-empty-assertions", "Every eval prompt has at least one assertion", Severity.WARNING)
def eval_empty_assertions(ctx: SkillContext):
    for path, suite in _loaded(ctx):
        for idx, group in enumerate(suite.assertion_groups):
            if not [a for a in group if a.strip()]:
                label = suite.ids[idx] if idx < len(suite.ids) and suite.ids[idx] is not None else idx
                yield f"eval {label!r} has no assertions", path, 0


@rule("EV004", "eval-duplicate-id", "Eval ids are unique within a file", Severity.ERROR)
def eval_duplicate_id(ctx: SkillContext):
    for path, suite in _loaded(ctx):
        counts = Counter(i for i in suite.ids if i is not None)
        for eval_id, count in sorted(counts.items(), key=lambda item: str(item[0])):
            if count > 1:
                yield f"eval id {eval_id!r} appears {count} times", path, 0


@rule(
    "EV005",
    "eval-skill-mismatch",
    "An eval file's skill_name matches the skill it belongs to",
    Severity.WARNING,
)
def eval_skill_mismatch(ctx: SkillContext):
    name = ctx.skill.name
    if not name:
        return
    for path, suite in _loaded(ctx):
        if suite.skill_name and suite.skill_name != name:
            yield f"skill_name {suite.skill_name!r} does not match skill {name!r}", path, 0
