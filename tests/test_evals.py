"""Tests for eval prompt list loading."""

import pytest

from conftest import write_file, write_json
from skillkit.errors import EvalFormatError
from skillkit.evals import find_eval_files, load_eval_file, parse_eval_data


def test_case_list_with_expectations(tmp_path):
    path = write_json(
        tmp_path / "evals.json",
        {
            "skill_name": "crawl4ai",
            "evals": [
                {
                    "id": 1,
                    "prompt": "Scrape a paginated blog",
                    "expected_output": "An async crawler script",
                    "files": [],
                    "expectations": ["uses AsyncWebCrawler", "handles pagination"],
                }
            ],
        },
    )
    suite = load_eval_file(path)
    assert suite.skill_name == "crawl4ai"
    assert suite.prompt_count == 1
    assert suite.assertion_groups == [["uses AsyncWebCrawler", "handles pagination"]]
    assert suite.ids == [1]


def test_top_level_list_is_accepted():
    suite = parse_eval_data([{"prompt": "a", "assertions": ["x"]}, {"prompt": "b"}], "inline")
    assert suite.prompt_count == 2
    assert suite.assertion_count == 2
    assert suite.assertion_groups[1] == []


def test_parallel_lists_from_yaml(tmp_path):
    path = write_file(
        tmp_path / "prompts.yml",
        "prompts:\n  - Build a CLI menu\n  - Render a table\n"
        "assertions:\n  - [uses ink-select-input]\n  - renders columns\n",
    )
    suite = load_eval_file(path)
    assert suite.prompts == ["Build a CLI menu", "Render a table"]
    assert suite.assertion_groups == [["uses ink-select-input"], ["renders columns"]]


@pytest.mark.parametrize(
    "data, fragment",
    [
        ({"unexpected": True}, "expected a list of eval cases"),
        ("just a string", "expected a list of eval cases"),
        ({"evals": [{"prompt": "   "}]}, "evals.0.prompt"),
        ({"prompts": ["a"], "assertions": [[1, 2]]}, "assertions"),
    ],
)
def test_bad_shapes_raise(data, fragment):
    with pytest.raises(EvalFormatError) as exc:
        parse_eval_data(data, "evals.json")
    assert fragment in str(exc.value)


def test_invalid_yaml_raises(tmp_path):
    path = write_file(tmp_path / "evals.yaml", "prompts: [unclosed\n")
    with pytest.raises(EvalFormatError, match="invalid YAML"):
        load_eval_file(path)


def test_find_eval_files(tmp_path):
    write_file(tmp_path / "evals" / "b.yaml", "[]")
    write_file(tmp_path / "evals" / "a.json", "[]")
    write_file(tmp_path / "evals" / "notes.md", "# not an eval")
    write_file(tmp_path / "evals.json", "[]")
    found = find_eval_files(tmp_path)
    assert [p.relative_to(tmp_path).as_posix() for p in found] == [
        "evals/a.json",
        "evals/b.yaml",
        "evals.json",
    ]


def test_assertions_and_expectations_are_merged():
    suite = parse_eval_data(
        {
            "evals": [
                {
                    "prompt": "Write a compose file",
                    "assertions": ["defines a healthcheck"],
                    "expectations": "pins image tags",
                }
            ]
        },
        "evals.json",
    )
    assert suite.assertion_groups == [["defines a healthcheck", "pins image tags"]]
