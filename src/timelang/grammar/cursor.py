"""Cursor, rule results, and combinators for the recursive-descent grammar.

Every grammar rule is a function ``(Cursor) -> Match[T] | Failure``.

INVARIANT: A failing rule consumes nothing. Cursors are immutable, so
the caller still holds the position it started from and can hand it
to the next alternative. Exceptions are never used for grammar control
flow; ``Match`` is truthy and ``Failure`` is falsy, so rules compose
with plain ``if not result: return result`` checks.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Cursor:
    """A position in the input text."""

    text: str
    pos: int = 0

    def skip_space(self) -> Cursor:
        pos = self.pos
        while pos < len(self.text) and self.text[pos].isspace():
            pos += 1
        return self if pos == self.pos else Cursor(self.text, pos)

    def advance(self, count: int) -> Cursor:
        return Cursor(self.text, self.pos + count)

    @property
    def at_end(self) -> bool:
        return self.skip_space().pos >= len(self.text)

    def peek(self) -> str:
        """Next non-space character, or ``""`` at end of input."""
        cur = self.skip_space()
        return cur.text[cur.pos] if cur.pos < len(cur.text) else ""


@dataclass(frozen=True)
class Failure:
    """No alternative matched at ``position``.

    Attributes:
        position: Offset in the input where matching was attempted.
        construct: The grammar construct being attempted (``"date"``).
        expected: What would have been accepted there.
        reason: Validation message when the text matched the shape but
            not the rules (e.g. day 30 in February).
        reach: End of the text read before a validation failure was
            detected. A validated field that was read in full outranks
            a shape mismatch found earlier in the input.
    """

    position: int
    construct: str
    expected: tuple[str, ...] = ()
    reason: str | None = None
    reach: int | None = None

    def __bool__(self) -> bool:
        return False

    @property
    def extent(self) -> tuple[int, int]:
        """How far the attempt got: the end of the text it had read, then ``position``."""
        return (self.position if self.reach is None else self.reach, self.position)

    def merge(self, other: Failure | None) -> Failure:
        """Keep the failure that got furthest; union expectations on a tie."""
        if other is None or other.extent < self.extent:
            return self
        if other.extent > self.extent:
            return other
        expected = self.expected + tuple(e for e in other.expected if e not in self.expected)
        return replace(self, expected=expected, reason=self.reason or other.reason)


@dataclass(frozen=True)
class Match(Generic[T]):
    """A successful rule application.

    ``hint`` records the furthest failure seen while producing this
    match (e.g. a longer alternative that almost matched), so callers
    can report it if the overall parse later fails.
    """

    value: T
    rest: Cursor
    hint: Failure | None = field(default=None, compare=False)

    def __bool__(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> Match[U]:
        return Match(func(self.value), self.rest, self.hint)


Result = Match[T] | Failure
Rule = Callable[[Cursor], "Match[T] | Failure"]


def fail(
    cur: Cursor,
    construct: str,
    *expected: str,
    reason: str | None = None,
    reach: Cursor | None = None,
) -> Failure:
    """Failure at the next token of *cur*, optionally having read up to *reach*."""
    return Failure(cur.skip_space().pos, construct, expected, reason, reach.pos if reach else None)


def merge_hints(failure: Failure, *matches: Match) -> Failure:
    """Fold hints from earlier matches in a sequence into *failure*."""
    for m in matches:
        failure = failure.merge(m.hint)
    return failure


def first_of(construct: str, *rules: Rule) -> Rule:
    """Ordered choice: the first alternative that matches wins.

    Each alternative starts from the same cursor. When all fail, the
    furthest failure is returned, relabelled only if no alternative
    got past the starting token.
    """

    def choice(cur: Cursor) -> Match | Failure:
        best: Failure | None = None
        for rule in rules:
            result = rule(cur)
            if result:
                return replace(result, hint=result.hint.merge(best) if result.hint else best)
            best = result if best is None else best.merge(result)
        start = cur.skip_space().pos
        if best is None:
            return Failure(start, construct)
        if best.position == start and best.reason is None:
            return replace(best, construct=construct)
        return best

    return choice


def word(cur: Cursor, construct: str = "word") -> Match[str] | Failure:
    """Read an alphabetic word, lowercased."""
    start = cur.skip_space()
    end = start.pos
    text = start.text
    while end < len(text) and text[end].isascii() and text[end].isalpha():
        end += 1
    if end == start.pos:
        return Failure(start.pos, construct, ("word",))
    return Match(text[start.pos : end].lower(), Cursor(text, end))


def keyword(cur: Cursor, *words: str, construct: str = "keyword") -> Match[str] | Failure:
    """Match one of *words* (case-insensitive, whole word only)."""
    result = word(cur, construct)
    if result and result.value in words:
        return result
    return fail(cur, construct, *(f"'{w}'" for w in words))


def phrase(cur: Cursor, *words: str, construct: str = "keyword") -> Match[str] | Failure:
    """Match a fixed sequence of words, e.g. ``from now``."""
    rest = cur
    for w in words:
        result = keyword(rest, w, construct=construct)
        if not result:
            return result
        rest = result.rest
    return Match(" ".join(words), rest)


def symbol(cur: Cursor, char: str, construct: str) -> Match[str] | Failure:
    start = cur.skip_space()
    if start.pos < len(start.text) and start.text[start.pos] == char:
        return Match(char, start.advance(1))
    return Failure(start.pos, construct, (f"'{char}'",))


def digits(cur: Cursor, construct: str) -> Match[str] | Failure:
    """Read a run of ASCII digits (no sign, no decimal point)."""
    start = cur.skip_space()
    end = start.pos
    text = start.text
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    if end == start.pos:
        return Failure(start.pos, construct, ("digits",))
    return Match(text[start.pos : end], Cursor(text, end))


def end_of_input(match: Match[T], construct: str) -> Match[T] | Failure:
    """Require that *match* consumed everything but trailing whitespace."""
    if match.rest.at_end:
        return match
    return merge_hints(fail(match.rest, construct, "end of input"), match)
