"""skill-lint: check a skills tree for documentation-integrity problems.

Usage:
    skill-lint check [ROOT] [--format text|json] [--strict] [--ignore CODE]...
    skill-lint list [ROOT] [--format text|json]
    skill-lint rules

Exit codes: 0 clean, 1 lint failures, 2 configuration error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skillkit.catalog import build_catalog, render_catalog_json, render_catalog_text
from skillkit.config.settings import LintSettings, settings_for
from skillkit.errors import ConfigError
from skillkit.lint import all_rules, lint_repository
from skillkit.lint.reporters import render_json, render_rules, render_text
from skillkit.skills.loader import SkillLoader

logger = logging.getLogger("skill_lint")

EXIT_OK = 0
EXIT_FAIL = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skill-lint",
        description="Lint SKILL.md front matter, references and eval prompt lists.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Lint a skills tree")
    check.add_argument("root", nargs="?", default=".", help="Skills tree or single skill directory")
    check.add_argument("--format", choices=("text", "json"), default="text")
    check.add_argument("--strict", action="store_true", default=None, help="Fail on warnings too")
    check.add_argument(
        "--ignore",
        action="append",
        default=None,
        metavar="CODE",
        help="Skip a rule code (repeatable)",
    )
    check.add_argument(
        "--include-archived",
        action="store_true",
        default=None,
        help="Also lint skills under archive/, archived/ and drafts/",
    )

    listing = sub.add_parser("list", help="Print the skill catalog")
    listing.add_argument("root", nargs="?", default=".")
    listing.add_argument("--format", choices=("text", "json"), default="text")
    listing.add_argument("--include-archived", action="store_true", default=None)

    sub.add_parser("rules", help="List available rules")
    return parser


def _configure_logging(verbose: int, default_level: str) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.getLevelName(default_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _cmd_check(args: argparse.Namespace, settings: LintSettings) -> int:
    report = lint_repository(args.root, settings)
    if args.format == "json":
        print(render_json(report, settings.strict))
    else:
        print(render_text(report, settings.strict))
    return report.exit_code(settings.strict)


def _cmd_list(args: argparse.Namespace, settings: LintSettings) -> int:
    skills = SkillLoader.load(
        args.root,
        skill_filename=settings.skill_filename,
        exclude_dirs=settings.effective_exclude_dirs,
    )
    entries = build_catalog(skills, args.root, settings.evals_dir)
    if args.format == "json":
        print(render_catalog_json(entries))
    else:
        print(render_catalog_text(entries))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "rules":
        _configure_logging(args.verbose, "WARNING")
        print(render_rules(all_rules()))
        return EXIT_OK

    try:
        if not Path(args.root).is_dir():
            raise ConfigError(f"skills root is not a directory: {args.root}")
        settings = settings_for(
            args.root,
            strict=getattr(args, "strict", None),
            include_archived=args.include_archived,
        )
    except ConfigError as e:
        print(f"CONFIG ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG

    extra_ignore = getattr(args, "ignore", None)
    if extra_ignore:
        codes = [*settings.ignore, *(code.strip().upper() for code in extra_ignore)]
        settings = settings.model_copy(update={"ignore": codes})

    _configure_logging(args.verbose, settings.log_level)
    logger.debug("Settings: %s", settings.model_dump())

    if args.command == "check":
        return _cmd_check(args, settings)
    return _cmd_list(args, settings)
