"""Tests for repository-level linting, settings and reporting."""

import json

import pytest

from conftest import write_file, write_skill
from skillkit.config.settings import LintSettings, get_settings, reload_settings, settings_for
from skillkit.errors import ConfigError
from skillkit.lint import Severity, lint_repository
from skillkit.lint.reporters import render_json, render_text


def test_clean_tree_passes(skills_tree, settings):
    report = lint_repository(skills_tree, settings)
    assert report.skills_checked == 3
    assert report.findings == []
    assert report.ok()
    assert report.exit_code() == 0


def test_duplicate_names_across_skills(skills_tree, settings):
    write_skill(skills_tree, "ink-copy", "name: ink\ndescription: Another Ink guide")
    report = lint_repository(skills_tree, settings)
    dupes = [f for f in report.findings if f.code == "SK009"]
    assert len(dupes) == 1
    assert dupes[0].path == "ink-copy/SKILL.md"
    assert "ink/SKILL.md" in dupes[0].message


def test_archived_drafts_are_skipped_by_default(skills_tree, settings):
    write_skill(skills_tree / "archive", "ink", "name: ink\ndescription: draft")
    report = lint_repository(skills_tree, settings)
    assert report.skills_checked == 3
    assert report.findings == []


def test_include_archived(skills_tree):
    write_skill(skills_tree / "archive", "ink", "name: ink\ndescription: draft")
    report = lint_repository(skills_tree, LintSettings(include_archived=True))
    assert report.skills_checked == 4
    assert [f.code for f in report.findings] == ["SK009"]


def test_findings_sorted_and_warnings_gate_strict(tmp_path, settings):
    write_skill(tmp_path, "zeta", "name: Zeta\ndescription: z")
    write_skill(tmp_path, "alpha", "name: alpha")
    report = lint_repository(tmp_path, settings)
    assert [(f.path, f.code) for f in report.findings] == [
        ("alpha/SKILL.md", "SK004"),
        ("zeta/SKILL.md", "SK005"),
        ("zeta/SKILL.md", "SK006"),
    ]
    assert report.errors == 1
    assert report.warnings == 2


def test_strict_mode_fails_on_warnings(tmp_path, settings):
    write_skill(tmp_path, "ink", "name: ink-guide\ndescription: Terminal UIs")
    report = lint_repository(tmp_path, settings)
    assert report.errors == 0
    assert report.ok() is True
    assert report.ok(strict=True) is False
    assert report.exit_code(strict=True) == 1


def test_ignore_and_severity_overrides(tmp_path):
    write_skill(tmp_path, "ink", "name: ink-guide\ndescription: Terminal UIs", "See `references/gone.md`.\n")
    settings = LintSettings(ignore=["rf001"], severity_overrides={"sk006": "error"})
    report = lint_repository(tmp_path, settings)
    assert [(f.code, f.severity) for f in report.findings] == [("SK006", Severity.ERROR)]


def test_missing_root_reports_nothing(tmp_path, settings):
    report = lint_repository(tmp_path / "missing", settings)
    assert report.skills_checked == 0
    assert report.ok()


def test_render_text(tmp_path, settings):
    write_skill(tmp_path, "ink", "name: ink")
    text = render_text(lint_repository(tmp_path, settings))
    lines = text.splitlines()
    assert lines[0] == "ink/SKILL.md:1: error SK004 [missing-description] front matter has no 'description' field"
    assert lines[-1] == "FAIL: 1 skills checked, 1 errors, 0 warnings"


def test_render_json(skills_tree, settings):
    payload = json.loads(render_json(lint_repository(skills_tree, settings)))
    assert payload["skills_checked"] == 3
    assert payload["summary"] == {"errors": 0, "warnings": 0, "ok": True}


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SKILLKIT_STRICT", "true")
    monkeypatch.setenv("SKILLKIT_IGNORE", '["rf003"]')
    settings = reload_settings()
    assert settings.strict is True
    assert settings.ignore == ["RF003"]
    assert get_settings() is settings


def test_project_config_overrides_env(tmp_path, monkeypatch):
    monkeypatch.setenv("SKILLKIT_MAX_NAME_LENGTH", "10")
    reload_settings()
    write_file(tmp_path / ".skillkit.yaml", "max_name_length: 20\nignore: [sk008]\n")
    settings = settings_for(tmp_path, strict=True, include_archived=None)
    assert settings.max_name_length == 20
    assert settings.ignore == ["SK008"]
    assert settings.strict is True
    assert settings.include_archived is False


@pytest.mark.parametrize(
    "content",
    ["max_name_length: [oops\n", "- just\n- a list\n", "severity_overrides: {SK001: fatal}\n"],
)
def test_bad_project_config_raises(tmp_path, content):
    write_file(tmp_path / ".skillkit.yaml", content)
    with pytest.raises(ConfigError):
        settings_for(tmp_path)
