"""Exceptions raised by the cleaning stages."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional


class CleaningError(Exception):
    """Base class for failures that abort a cleaning run."""


class ParseError(CleaningError):
    """A ``date`` value does not match the expected text format."""

    def __init__(self, row_id: Any, value: Any, company: Optional[str] = None, date_format: str = "") -> None:
        self.row_id = row_id
        self.value = value
        self.company = company
        self.date_format = date_format
        message = f"Row {row_id} has a malformed date {value!r}"
        if company is not None:
            message += f" (company={company!r})"
        if date_format:
            message += f"; expected format {date_format}"
        super().__init__(message)


class AmbiguousBackfillError(CleaningError):
    """Records of one company disagree on their industry."""

    def __init__(self, company: str, industries: Iterable[str]) -> None:
        self.company = company
        self.industries = list(industries)
        super().__init__(
            f"Company {company!r} has conflicting industries: {', '.join(self.industries)}"
        )


class ValidationError(CleaningError):
    """The cleaned dataset violates one or more invariants."""

    def __init__(self, problems: List[str]) -> None:
        self.problems = list(problems)
        super().__init__("Cleaned dataset failed validation: " + "; ".join(self.problems))


class MissingColumnsError(CleaningError):
    """The raw file lacks one or more of the source columns."""

    def __init__(self, source: Any, columns: Iterable[str]) -> None:
        self.source = source
        self.columns = list(columns)
        super().__init__(f"{source} is missing expected columns: {', '.join(self.columns)}")


class InvalidValueError(CleaningError):
    """A count column holds text that is not a whole number."""

    def __init__(self, row_id: Any, column: str, value: Any) -> None:
        self.row_id = row_id
        self.column = column
        self.value = value
        super().__init__(f"Row {row_id} has a non-integer {column} {value!r}")
