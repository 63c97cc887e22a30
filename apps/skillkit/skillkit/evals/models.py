"""Eval prompt list models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _as_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value) if isinstance(value, (list, tuple)) else [value]


class EvalCase(BaseModel):
    """One eval prompt and the checklist its answer is judged against.

    Assertions may be written under `assertions`, `expectations`, or both;
    both lists are merged, `assertions` first.
    """

    model_config = ConfigDict(extra="allow")

    id: int | str | None = None
    prompt: str = Field(min_length=1)
    expected_output: str | None = None
    files: list[str] = Field(default_factory=list)
    assertions: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def merge_expectations(cls, data: Any) -> Any:
        if isinstance(data, dict) and "expectations" in data:
            data = dict(data)
            expectations = data.pop("expectations")
            if "assertions" not in data:
                data["assertions"] = expectations
            else:
                data["assertions"] = _as_list(data["assertions"]) + _as_list(expectations)
        return data

    @field_validator("prompt")
    @classmethod
    def prompt_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("prompt must not be blank")
        return v

    @field_validator("assertions", mode="before")
    @classmethod
    def single_assertion(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [v]
        return v


class EvalCaseList(BaseModel):
    """`{"skill_name": ..., "evals": [...]}` form."""

    skill_name: str | None = None
    evals: list[EvalCase]


class ParallelEvalLists(BaseModel):
    """`{"prompts": [...], "assertions": [...]}` form.

    Each entry of `assertions` is the checklist for the prompt at the same
    index; a bare string is a one-item checklist.
    """

    skill_name: str | None = None
    prompts: list[str]
    assertions: list[list[str]]

    @field_validator("assertions", mode="before")
    @classmethod
    def wrap_strings(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [[item] if isinstance(item, str) else item for item in v]
        return v


class EvalSuite(BaseModel):
    """Normalised view of one eval file, whatever shape it was written in."""

    path: str
    skill_name: str | None = None
    prompts: list[str] = Field(default_factory=list)
    assertion_groups: list[list[str]] = Field(default_factory=list)
    ids: list[int | str | None] = Field(default_factory=list)

    @property
    def prompt_count(self) -> int:
        return len(self.prompts)

    @property
    def assertion_count(self) -> int:
        return len(self.assertion_groups)

    @classmethod
    def from_cases(cls, path: str, cases: EvalCaseList) -> "EvalSuite":
        return cls(
            path=path,
            skill_name=cases.skill_name,
            prompts=[c.prompt for c in cases.evals],
            assertion_groups=[c.assertions for c in cases.evals],
            ids=[c.id for c in cases.evals],
        )

    @classmethod
    def from_parallel(cls, path: str, lists: ParallelEvalLists) -> "EvalSuite":
        return cls(
            path=path,
            skill_name=lists.skill_name,
            prompts=lists.prompts,
            assertion_groups=lists.assertions,
            ids=[None] * len(lists.prompts),
        )
