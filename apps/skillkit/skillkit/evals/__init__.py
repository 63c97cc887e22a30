"""Eval prompt lists attached to skills."""

from skillkit.evals.loader import find_eval_files, load_eval_file, parse_eval_data
from skillkit.evals.models import EvalCase, EvalSuite

__all__ = ["EvalCase", "EvalSuite", "find_eval_files", "load_eval_file", "parse_eval_data"]
