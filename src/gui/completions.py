"""Name completion for the statement input line."""

from __future__ import annotations

from linecalc.environment import Environment
from linecalc.lexer import is_letter, is_name_char


def word_before(text: str, cursor: int) -> tuple[int, str]:
    """Return (start, fragment) of the partial name ending at ``cursor``."""
    start = cursor
    while start > 0 and is_name_char(text[start - 1]):
        start -= 1
    fragment = text[start:cursor]
    if fragment and not is_letter(fragment[0]):
        return cursor, ""
    return start, fragment


class CompletionProvider:
    """Completion candidates drawn from an environment's name tables.

    Functions complete with a trailing ``(`` so the call form is obvious.
    """

    def __init__(self, env: Environment):
        self.env = env

    def candidates(self) -> list[str]:
        items = [f"{name}(" for name in self.env.functions]
        items.extend(self.env.constants)
        items.extend(self.env.variables)
        return sorted(items)

    def get_completions(self, prefix: str) -> list[str]:
        if not prefix:
            return []
        return [c for c in self.candidates() if c.startswith(prefix)]

    def get_best_completion(self, prefix: str) -> str | None:
        """Single completion when the prefix is unambiguous."""
        completions = self.get_completions(prefix)
        if len(completions) == 1:
            return completions[0]
        return None

    def complete(self, text: str, cursor: int) -> tuple[str, int]:
        """Complete the name before ``cursor``; returns (text, cursor)."""
        start, fragment = word_before(text, cursor)
        best = self.get_best_completion(fragment)
        if best is None:
            return text, cursor
        return text[:start] + best + text[cursor:], start + len(best)
