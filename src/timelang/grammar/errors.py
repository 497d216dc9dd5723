"""ParseError — the single public failure type of the grammar."""

from __future__ import annotations

from typing import Any

from timelang.grammar.cursor import Failure


class ParseError(ValueError):
    """Input is not a valid expression of the requested node type.

    Calendar and clock violations ("30/2/2023", "13:00 PM") are reported
    the same way as shape mismatches, at the position of the offending
    field.

    Attributes:
        text: The full input.
        position: Offset where matching failed.
        construct: Grammar construct being attempted there.
        expected: Alternatives that would have been accepted.
        reason: Validation detail, if the shape matched but a rule did not.
    """

    def __init__(self, text: str, failure: Failure) -> None:
        self.text = text
        self.position = failure.position
        self.construct = failure.construct
        self.expected = failure.expected
        self.reason = failure.reason
        super().__init__(self.describe())

    @property
    def found(self) -> str:
        """The input text at the failure position (up to the next space)."""
        tail = self.text[self.position :].split(maxsplit=1)
        return tail[0] if tail else ""

    def describe(self) -> str:
        if self.reason:
            head = self.reason
        elif self.expected:
            head = "expected " + _alternatives(self.expected)
        else:
            head = f"invalid {self.construct}"
        found = f"'{self.found}'" if self.found else "end of input"
        return f"{head} at position {self.position}, found {found} (in {self.construct})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "position": self.position,
            "construct": self.construct,
            "expected": list(self.expected),
            "reason": self.reason,
        }


def _alternatives(expected: tuple[str, ...]) -> str:
    if len(expected) == 1:
        return expected[0]
    return ", ".join(expected[:-1]) + " or " + expected[-1]
