"""Semantic line breaks.

Long lines are rewrapped at punctuation in two tiers. Sentence-ending
punctuation is tried first; lines that are still too long are then split at
finer joints: commas, brackets and a few conjunction phrases. After each split
the fragments are greedily rejoined with spaces while they fit under the
maximum line length, so a line only breaks where it has to.

Headings are never rewrapped.
"""

import re
import string
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from loguru import logger

from md_styler.constants import (
    DEFAULT_MAX_LINE_LENGTH,
    INNER_CLOSING_PUNCTUATION,
    INNER_OPENING_PUNCTUATION,
    LINE_STARTING_PHRASES,
    OUTER_SEPARATOR_PUNCTUATION,
)
from md_styler.rules.base import RewriteRule


@dataclass(frozen=True)
class SeparatorClass:
    """
    A set of candidate break points within a line.

    ``pattern`` matches a separator together with its surrounding run of
    spaces. The named group ``before`` captures text that stays at the end of
    the line before the break; the named group ``after`` captures text that
    starts the line after it. The spaces in the match are dropped.

    Attributes:
        name: Identifier used in log messages
        pattern: Compiled separator regex with a ``before`` or ``after`` group
    """

    name: str
    pattern: re.Pattern

    def insert_breaks(self, line: str) -> List[str]:
        """Split a line at every separator match.

        Args:
            line: A single line without newlines

        Returns:
            List[str]: The fragments, in order
        """
        return self.pattern.sub(self._replace, line).split("\n")

    @staticmethod
    def _replace(match: re.Match) -> str:
        groups = match.groupdict()
        if groups.get("before") is not None:
            return groups["before"] + "\n"
        if groups.get("after") is not None:
            return "\n" + groups["after"]
        raise ValueError(f"Separator match has neither a 'before' nor an 'after' group: {match!r}")


def sort_phrases(phrases: Iterable[str]) -> List[str]:
    """Order phrases by word count, most words first.

    Regex alternation takes the first alternative that matches, so longer
    phrases must come first to win over phrases they start with.
    """
    return sorted(phrases, key=lambda phrase: len(phrase.split()), reverse=True)


def outer_separators() -> SeparatorClass:
    """Sentence-ending punctuation followed by spaces; break after it."""
    return SeparatorClass(
        name="outer",
        pattern=re.compile(f"(?P<before>[{re.escape(OUTER_SEPARATOR_PUNCTUATION)}]) +"),
    )


def inner_separators(phrases: Sequence[str] = LINE_STARTING_PHRASES) -> SeparatorClass:
    """
    Clause-level break points.

    Closing punctuation followed by spaces breaks after itself. Opening
    punctuation and the line-starting phrases, preceded by spaces, break
    before themselves. Leading indentation is never a break point.

    Args:
        phrases: Phrases that should start a new line

    Returns:
        SeparatorClass: The inner separator class
    """
    starters = [f"[{re.escape(INNER_OPENING_PUNCTUATION)}]"]
    if phrases:
        alternation = "|".join(re.escape(phrase) for phrase in sort_phrases(phrases))
        starters.append(rf"(?:{alternation})\b")
    return SeparatorClass(
        name="inner",
        pattern=re.compile(
            f"(?P<before>[{re.escape(INNER_CLOSING_PUNCTUATION)}]) +" rf"|(?<=\S) +(?P<after>{'|'.join(starters)})"
        ),
    )


def is_heading(line: str) -> bool:
    """Return True if the line starts with ``#`` after leading ASCII whitespace."""
    return line.lstrip(string.whitespace).startswith("#")


class SemanticLineBreaksRule(RewriteRule):
    """
    Add semantic line breaks as best as possible.

    Each line of the document is rewrapped independently; every separator
    tier is applied in turn to the lines the previous tier produced.
    """

    def __init__(
        self,
        max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
        line_starting_phrases: Sequence[str] = LINE_STARTING_PHRASES,
        tiers: Optional[Sequence[SeparatorClass]] = None,
    ):
        if max_line_length <= 0:
            raise ValueError(f"max_line_length must be positive, got {max_line_length}")
        super().__init__(
            name="semantic_line_breaks",
            config={"max_line_length": max_line_length, "line_starting_phrases": tuple(line_starting_phrases)},
        )
        self.max_line_length = max_line_length
        if tiers is None:
            tiers = (outer_separators(), inner_separators(line_starting_phrases))
        self.tiers = tuple(tiers)

    def _fits(self, line: str) -> bool:
        return len(line) < self.max_line_length

    def rejoin(self, fragments: Sequence[str]) -> List[str]:
        """
        Greedily merge fragments back into lines.

        A fragment is appended to the current line with a single space if the
        result stays under the maximum line length; otherwise the current line
        is emitted and the fragment starts a new one. A fragment that is too
        long on its own is kept whole.

        Args:
            fragments: Fragments produced by splitting a single line

        Returns:
            List[str]: The rejoined lines
        """
        lines: List[str] = []
        current = ""
        for fragment in fragments:
            if not current:
                current = fragment
            elif self._fits(f"{current} {fragment}"):
                current = f"{current} {fragment}"
            else:
                lines.append(current)
                current = fragment
        lines.append(current)
        return lines

    def add_line_breaks(self, line: str, separators: SeparatorClass) -> List[str]:
        """Split a line at every separator, then rejoin what fits.

        Args:
            line: A single line without newlines
            separators: The separator tier to break at

        Returns:
            List[str]: The resulting lines; ``[line]`` if the line is short or a heading
        """
        if self._fits(line) or is_heading(line):
            return [line]
        lines = self.rejoin(separators.insert_breaks(line))
        logger.debug(f"Broke a {len(line)}-character line into {len(lines)} at {separators.name} separators")
        return lines

    def rewrap_line(self, line: str) -> List[str]:
        """Apply every separator tier to a line, in order."""
        lines = [line]
        for separators in self.tiers:
            lines = [rewrapped for current in lines for rewrapped in self.add_line_breaks(current, separators)]
        return lines

    def rewrite(self, text: str) -> str:
        original_lines = text.split("\n")
        rewrapped_lines: List[str] = []
        for line in original_lines:
            # Lines ending in "\r\n" keep that ending on every line they are split into
            ending = "\r" if line.endswith("\r") else ""
            content = line[: len(line) - len(ending)]
            rewrapped_lines.extend(rewrapped + ending for rewrapped in self.rewrap_line(content))
        logger.debug(
            f"Rewrapped {len(original_lines)} lines into {len(rewrapped_lines)} "
            f"(max line length {self.max_line_length})"
        )
        return "\n".join(rewrapped_lines)
