"""Rewrite rules for Markdown documents."""

from md_styler.rules.base import RewriteRule
from md_styler.rules.line_breaks import (
    SemanticLineBreaksRule,
    SeparatorClass,
    inner_separators,
    is_heading,
    outer_separators,
)
from md_styler.rules.patterns import (
    CanonicalizeQuotesRule,
    CanonicalizeThroughRunningRule,
    MoveFootnotesAfterPunctuationRule,
    RemoveEmbeddedImagesRule,
    RemoveExtraRefSpacesRule,
    SimplifyUrlsRule,
)

__all__ = [
    "RewriteRule",
    "CanonicalizeQuotesRule",
    "RemoveEmbeddedImagesRule",
    "RemoveExtraRefSpacesRule",
    "SimplifyUrlsRule",
    "SemanticLineBreaksRule",
    "CanonicalizeThroughRunningRule",
    "MoveFootnotesAfterPunctuationRule",
    "SeparatorClass",
    "outer_separators",
    "inner_separators",
    "is_heading",
]
