"""Front-matter rules: every SKILL.md names and describes itself."""

import re

from skillkit.lint.context import RepositoryContext, SkillContext
from skillkit.lint.models import Severity
from skillkit.lint.registry import rule

NAME_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def _frontmatter_ok(ctx: SkillContext) -> bool:
    return ctx.skill.has_frontmatter and ctx.skill.frontmatter_error is None


def _required_text(ctx: SkillContext, key: str):
    if not _frontmatter_ok(ctx):
        return
    meta = ctx.skill.metadata
    if key not in meta or meta[key] is None:
        yield f"front matter has no '{key}' field", None, 1
    elif not isinstance(meta[key], str):
        yield f"front matter '{key}' must be a string, got {type(meta[key]).__name__}", None, 1
    elif not meta[key].strip():
        yield f"front matter '{key}' is empty", None, 1


@rule("SK001", "missing-frontmatter", "SKILL.md opens with a YAML front-matter block", Severity.ERROR)
def missing_frontmatter(ctx: SkillContext):
    if not ctx.skill.has_frontmatter:
        yield "SKILL.md has no YAML front matter (expected a leading '---' block)", None, 1


@rule("SK002", "invalid-frontmatter", "Front matter is valid YAML and a mapping", Severity.ERROR)
def invalid_frontmatter(ctx: SkillContext):
    if ctx.skill.frontmatter_error:
        yield ctx.skill.frontmatter_error, None, 1


@rule("SK003", "missing-name", "Front matter has a non-empty 'name'", Severity.ERROR)
def missing_name(ctx: SkillContext):
    yield from _required_text(ctx, "name")


@rule("SK004", "missing-description", "Front matter has a non-empty 'description'", Severity.ERROR)
def missing_description(ctx: SkillContext):
    yield from _required_text(ctx, "description")


@rule(
    "SK005",
    "name-format",
    "Name uses lowercase letters, digits and single hyphens within the length limit",
    Severity.WARNING,
)
def name_format(ctx: SkillContext):
    name = ctx.skill.name
    if not name:
        return
    if not NAME_PATTERN.match(name):
        yield f"name {name!r} should be lowercase words joined by single hyphens", None, 1
    limit = ctx.settings.max_name_length
    if len(name) > limit:
        yield f"name is {len(name)} characters (limit {limit})", None, 1


@rule("SK006", "name-directory-mismatch", "Name matches the skill's directory name", Severity.WARNING)
def name_directory_mismatch(ctx: SkillContext):
    name = ctx.skill.name
    if name and name != ctx.skill.directory_name:
        yield f"name {name!r} does not match directory {ctx.skill.directory_name!r}", None, 1


@rule("SK007", "description-length", "Description stays within the length limit", Severity.WARNING)
def description_length(ctx: SkillContext):
    limit = ctx.settings.max_description_length
    length = len(ctx.skill.description)
    if length > limit:
        yield f"description is {length} characters (limit {limit})", None, 1


@rule("SK008", "empty-body", "SKILL.md has guidance text after the front matter", Severity.WARNING)
def empty_body(ctx: SkillContext):
    if ctx.skill.frontmatter_error is None and not ctx.skill.body.strip():
        yield "SKILL.md has no content after the front matter", None, ctx.skill.body_offset


@rule(
    "SK009",
    "duplicate-name",
    "No two skills share a name",
    Severity.ERROR,
    scope="repository",
)
def duplicate_name(repo: RepositoryContext):
    first_seen: dict[str, SkillContext] = {}
    for ctx in repo.skills:
        name = ctx.skill.name
        if not name:
            continue
        if name in first_seen:
            other = first_seen[name].skill.path
            if other.is_relative_to(repo.root):
                other = other.relative_to(repo.root).as_posix()
            yield f"name {name!r} is already used by {other}", ctx.skill.path, 1
        else:
            first_seen[name] = ctx
