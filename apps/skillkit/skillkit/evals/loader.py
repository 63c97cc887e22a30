"""Load eval prompt lists from JSON or YAML files."""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from skillkit.errors import EvalFormatError
from skillkit.evals.models import EvalCaseList, EvalSuite, ParallelEvalLists

logger = logging.getLogger(__name__)

EVAL_SUFFIXES = (".json", ".yaml", ".yml")


def find_eval_files(skill_root: Path, evals_dir: str = "evals") -> list[Path]:
    """Eval files for a skill: `<skill>/evals/*.{json,yaml,yml}` plus `<skill>/evals.json`."""
    files: list[Path] = []
    directory = skill_root / evals_dir
    if directory.is_dir():
        files.extend(
            p for p in sorted(directory.iterdir()) if p.is_file() and p.suffix in EVAL_SUFFIXES
        )
    flat = skill_root / "evals.json"
    if flat.is_file():
        files.append(flat)
    return files


def _read_structured(path: Path):
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise EvalFormatError(path, f"invalid JSON: {e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise EvalFormatError(path, f"invalid YAML: {e}") from e


def _format_validation(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "(root)"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def parse_eval_data(data, path: str | Path) -> EvalSuite:
    """Normalise already-decoded eval data into an EvalSuite."""
    path_str = str(path)
    try:
        if isinstance(data, list):
            return EvalSuite.from_cases(path_str, EvalCaseList(evals=data))
        if isinstance(data, dict) and "evals" in data:
            return EvalSuite.from_cases(path_str, EvalCaseList.model_validate(data))
        if isinstance(data, dict) and "prompts" in data:
            return EvalSuite.from_parallel(path_str, ParallelEvalLists.model_validate(data))
    except ValidationError as e:
        raise EvalFormatError(path, _format_validation(e)) from e

    raise EvalFormatError(
        path,
        "expected a list of eval cases, an object with 'evals', "
        "or an object with 'prompts' and 'assertions'",
    )


def load_eval_file(path: str | Path) -> EvalSuite:
    """Read and validate one eval file. Raises EvalFormatError."""
    path = Path(path)
    try:
        data = _read_structured(path)
    except (OSError, UnicodeDecodeError) as e:
        raise EvalFormatError(path, f"unreadable: {e}") from e

    suite = parse_eval_data(data, path)
    logger.debug("Loaded %d eval prompts from %s", suite.prompt_count, path)
    return suite
