"""Optional strict validation layered on top of the tolerant codecs.

The codecs skip anything they cannot use. Callers that want malformed input
rejected instead run :func:`ensure_valid` before parsing.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .model import GraphFormat


class GraphFormatError(ValueError):
    """Raised when input text fails strict validation."""

    def __init__(self, fmt: GraphFormat, issues: List["FormatIssue"]) -> None:
        self.format = fmt
        self.issues = list(issues)
        details = "; ".join(str(issue) for issue in self.issues)
        super().__init__(f"Invalid {fmt.value} input: {details}")


@dataclass(frozen=True)
class FormatIssue:
    """A problem found on ``line`` (1-based, ``0`` for the whole input)."""

    line: int
    message: str

    def __str__(self) -> str:
        if self.line:
            return f"line {self.line}: {self.message}"
        return self.message


def _validate_edge_list(lines: List[str]) -> List[FormatIssue]:
    issues = []
    for number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) < 2:
            issues.append(FormatIssue(number, "expected two node identifiers"))
        elif len(tokens) > 2:
            issues.append(FormatIssue(number, f"unexpected extra tokens {tokens[2:]}"))
    return issues


def _validate_adjacency_list(lines: List[str]) -> List[FormatIssue]:
    issues = []
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        segments = line.split(":")
        if not segments[0].strip():
            issues.append(FormatIssue(number, "missing node identifier before ':'"))
        if len(segments) > 2:
            issues.append(FormatIssue(number, "more than one ':' separator"))
    return issues


def _validate_adjacency_matrix(lines: List[str]) -> List[FormatIssue]:
    numbered = [(number, line.split()) for number, line in enumerate(lines, start=1) if line.strip()]
    size = len(numbered)
    issues = []
    for number, row in numbered:
        if len(row) != size:
            issues.append(FormatIssue(number, f"expected {size} cells, found {len(row)}"))
        invalid = [cell for cell in row if cell not in ("0", "1")]
        if invalid:
            issues.append(FormatIssue(number, f"cells must be 0 or 1, found {invalid}"))
    return issues


_VALIDATORS = {
    GraphFormat.EDGE_LIST: _validate_edge_list,
    GraphFormat.ADJACENCY_LIST: _validate_adjacency_list,
    GraphFormat.ADJACENCY_MATRIX: _validate_adjacency_matrix,
}


def validate(fmt: str | GraphFormat, text: str) -> List[FormatIssue]:
    """Return every issue found in ``text`` for ``fmt``."""

    fmt = GraphFormat.coerce(fmt)
    if not text.strip():
        return [FormatIssue(0, "input is empty")]
    return _VALIDATORS[fmt](text.splitlines())


def ensure_valid(fmt: str | GraphFormat, text: str) -> None:
    """Raise :class:`GraphFormatError` if ``text`` has any issue."""

    issues = validate(fmt, text)
    if issues:
        raise GraphFormatError(GraphFormat.coerce(fmt), issues)
