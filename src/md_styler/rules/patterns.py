"""Pattern rules: single-pass regex and substring rewrites.

Each rule targets one pattern and leaves every byte outside its matches
untouched.
"""

import re
from typing import Optional

from loguru import logger

from md_styler.constants import (
    DEFAULT_FOOTNOTE_PUNCTUATION,
    DOUBLE_CURLY_QUOTES,
    EMBEDDED_IMAGE_PLACEHOLDER,
    SINGLE_CURLY_QUOTES,
    THROUGH_RUNNING_REPLACEMENTS,
)
from md_styler.rules.base import RewriteRule


class CanonicalizeQuotesRule(RewriteRule):
    """Replace curly quotes (``‘’``, ``“”``) with ASCII quotes (``'``, ``"``)."""

    SINGLE_QUOTE_PATTERN = re.compile(f"[{SINGLE_CURLY_QUOTES}]")
    DOUBLE_QUOTE_PATTERN = re.compile(f"[{DOUBLE_CURLY_QUOTES}]")

    def __init__(self):
        super().__init__(name="quotes")

    def rewrite(self, text: str) -> str:
        text, single_count = self.SINGLE_QUOTE_PATTERN.subn("'", text)
        text, double_count = self.DOUBLE_QUOTE_PATTERN.subn('"', text)
        logger.debug(f"Replaced {single_count} single and {double_count} double curly quotes")
        return text


class RemoveEmbeddedImagesRule(RewriteRule):
    """
    Replace embedded ``<data:image/...>`` elements with a placeholder.

    The document is split on the pattern and rejoined with the placeholder, so
    each removed image leaves exactly one placeholder behind.
    """

    DATA_IMAGE_PATTERN = re.compile(r"<data:image/[^>]*>")

    def __init__(self, placeholder: str = EMBEDDED_IMAGE_PLACEHOLDER):
        super().__init__(name="embedded_images", config={"placeholder": placeholder})
        self.placeholder = placeholder

    def rewrite(self, text: str) -> str:
        pieces = self.DATA_IMAGE_PATTERN.split(text)
        logger.debug(f"Removed {len(pieces) - 1} embedded images")
        return self.placeholder.join(pieces)


class RemoveExtraRefSpacesRule(RewriteRule):
    """Collapse the run of spaces after a reference label (``[^2]:    x``) to one space."""

    REF_WITH_SPACES_PATTERN = re.compile(r"(\[[^\]]*\]: ) +")

    def __init__(self):
        super().__init__(name="extra_ref_spaces")

    def rewrite(self, text: str) -> str:
        text, count = self.REF_WITH_SPACES_PATTERN.subn(r"\1", text)
        logger.debug(f"Trimmed spaces after {count} reference labels")
        return text


class SimplifyUrlsRule(RewriteRule):
    """
    Simplify self-links such as ``[URL](URL)`` to ``<URL>``.

    Backslash escapes are ignored when comparing the link text to its target,
    so ``[URL\\_2](URL_2)`` becomes ``<URL_2>``. Links whose text differs from
    the target are left as they are.
    """

    LINK_PATTERN = re.compile(r"\[(?P<text>[^\]]*)\]\((?P<link>[^)]*)\)")

    def __init__(self):
        super().__init__(name="simplify_urls")

    @staticmethod
    def _simplify(match: re.Match) -> str:
        link = match.group("link")
        if match.group("text").replace("\\", "") == link:
            return f"<{link}>"
        return match.group(0)

    def rewrite(self, text: str) -> str:
        return self.LINK_PATTERN.sub(self._simplify, text)


class CanonicalizeThroughRunningRule(RewriteRule):
    """
    Canonicalize "through-running" phrases.

    Always hyphenate, and always put "through" before "run". Each replacement
    is applied to the whole document before the next one.
    """

    def __init__(self):
        super().__init__(name="through_running")

    def rewrite(self, text: str) -> str:
        for phrase, canonical in THROUGH_RUNNING_REPLACEMENTS:
            text = text.replace(phrase, canonical)
        return text


class MoveFootnotesAfterPunctuationRule(RewriteRule):
    """
    Move footnote markers after adjacent punctuation: ``[^1].`` becomes ``.[^1]``.

    Only markers immediately followed by one of the configured punctuation
    characters are moved. A run of adjacent markers (``[^1][^2].``) moves as
    one, keeping its order.
    """

    def __init__(self, punctuation: Optional[str] = None):
        punctuation = punctuation or DEFAULT_FOOTNOTE_PUNCTUATION
        super().__init__(name="footnotes_after_punctuation", config={"punctuation": punctuation})
        self.punctuation = punctuation
        self.footnote_pattern = re.compile(
            r"(?P<footnote>(?:\[\^[^\]]*\])+)(?P<punctuation>[" + re.escape(punctuation) + r"])"
        )

    def rewrite(self, text: str) -> str:
        text, count = self.footnote_pattern.subn(r"\g<punctuation>\g<footnote>", text)
        logger.debug(f"Moved {count} footnotes after punctuation")
        return text
