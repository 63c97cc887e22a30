"""Built-in rules. Importing this package registers them."""

from skillkit.lint.rules import evals, frontmatter, references

__all__ = ["evals", "frontmatter", "references"]
