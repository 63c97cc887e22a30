"""Per-skill state shared by lint rules, computed lazily once per run."""

from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path

from skillkit.config.settings import LintSettings
from skillkit.errors import EvalFormatError
from skillkit.evals.loader import find_eval_files, load_eval_file
from skillkit.evals.models import EvalSuite
from skillkit.skills.models import Reference, Skill
from skillkit.skills.references import extract_references, resolve_reference


@dataclass
class EvalFileResult:
    """A loaded eval suite, or the error that stopped it loading."""

    path: Path
    suite: EvalSuite | None = None
    error: EvalFormatError | None = None


@dataclass
class SkillContext:
    skill: Skill
    settings: LintSettings

    @cached_property
    def references(self) -> list[tuple[Reference, Path]]:
        return [(ref, resolve_reference(self.skill, ref)) for ref in extract_references(self.skill)]

    @cached_property
    def eval_files(self) -> list[EvalFileResult]:
        results = []
        for path in find_eval_files(self.skill.root, self.settings.evals_dir):
            try:
                results.append(EvalFileResult(path=path, suite=load_eval_file(path)))
            except EvalFormatError as e:
                results.append(EvalFileResult(path=path, error=e))
        return results


@dataclass
class RepositoryContext:
    root: Path
    settings: LintSettings
    skills: list[SkillContext] = field(default_factory=list)
