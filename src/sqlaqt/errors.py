"""Exceptions raised while rendering an AST.

Every failure is final for the render call that raised it: a malformed AST or
configuration is a caller error, so nothing is retried or partially rendered.
"""

from __future__ import annotations

from sqlaqt.models.errors import RenderIssue


class RenderError(Exception):
    """Base class for all rendering failures."""


class StructuralError(RenderError):
    """A required clause is missing or has the wrong shape."""

    def __init__(self, message: str, issues: list[RenderIssue] | None = None) -> None:
        self.issues = issues or []
        super().__init__(message)

    @classmethod
    def from_issues(cls, issues: list[RenderIssue]) -> StructuralError:
        return cls("; ".join(i.message for i in issues), issues=issues)


class UnknownTagError(RenderError):
    """An operation tag (``-name`` style) has no handler in the dispatch table."""

    def __init__(self, tag: str, context: str = "an AST") -> None:
        self.tag = tag
        super().__init__(f"'{tag}' is not a valid clause in {context}")


class UnknownOperatorError(RenderError):
    """A bare-word operator tag has no handler in the WHERE dispatch table."""

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"'{operator}' is not a valid operator")


class UnmappedOperatorError(RenderError):
    """A binary operator has a handler but no SQL token in the operator map."""

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"Unknown binary operator {operator}")


class ConfigurationError(RenderError):
    """A node is missing one of a set of alternative keys, or carries several."""
