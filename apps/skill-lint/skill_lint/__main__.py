"""skill-lint entry point (`python -m skill_lint`)."""

from skill_lint.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
