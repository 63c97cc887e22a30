"""Reference rules: every playbook a skill points at exists inside the skill."""

from skillkit.lint.context import SkillContext
from skillkit.lint.models import Severity
from skillkit.lint.registry import rule
from skillkit.skills.references import is_within


@rule("RF001", "missing-reference", "Every referenced path exists on disk", Severity.ERROR)
def missing_reference(ctx: SkillContext):
    for ref, resolved in ctx.references:
        if not resolved.exists():
            yield f"referenced path {ref.target!r} does not exist", None, ref.line


@rule(
    "RF002",
    "reference-outside-skill",
    "Referenced paths stay inside the skill directory",
    Severity.ERROR,
)
def reference_outside_skill(ctx: SkillContext):
    for ref, resolved in ctx.references:
        if not is_within(resolved, ctx.skill.root):
            yield f"referenced path {ref.target!r} points outside the skill directory", None, ref.line


@rule(
    "RF003",
    "unreferenced-file",
    "Every file under references/ is linked from SKILL.md",
    Severity.WARNING,
)
def unreferenced_file(ctx: SkillContext):
    ref_dir = ctx.skill.root / ctx.settings.references_dir
    if not ref_dir.is_dir():
        return

    referenced = {resolved for _, resolved in ctx.references}
    # Linking the directory itself covers everything in it.
    if ref_dir.resolve() in referenced:
        return

    for path in sorted(ref_dir.rglob("*")):
        if not path.is_file() or path.name.startswith("."):
            continue
        if path.resolve() not in referenced:
            rel = path.relative_to(ctx.skill.root).as_posix()
            yield f"{rel} is not referenced from {ctx.skill.path.name}", path, 0
