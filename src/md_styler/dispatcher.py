"""Select and run a single rewrite rule.

Rules are identified by the closed ``RuleType`` enumeration. The command-line
names of the rules are the lowercase, hyphenated enum names, e.g.
``semantic-line-breaks``.
"""

from enum import Enum, auto
from typing import Callable, Dict, Optional, Union

from loguru import logger

from md_styler.config import RuleOptions
from md_styler.exceptions import UnknownRuleError
from md_styler.rules import (
    CanonicalizeQuotesRule,
    CanonicalizeThroughRunningRule,
    MoveFootnotesAfterPunctuationRule,
    RemoveEmbeddedImagesRule,
    RemoveExtraRefSpacesRule,
    RewriteRule,
    SemanticLineBreaksRule,
    SimplifyUrlsRule,
)


class RuleType(Enum):
    """Enumeration of available rewrite rules."""

    QUOTES = auto()
    EMBEDDED_IMAGES = auto()
    EXTRA_REF_SPACES = auto()
    SIMPLIFY_URLS = auto()
    SEMANTIC_LINE_BREAKS = auto()
    THROUGH_RUNNING = auto()
    FOOTNOTES_AFTER_PUNCTUATION = auto()

    @property
    def cli_name(self) -> str:
        """The rule's command-line name, e.g. ``simplify-urls``."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_name(cls, name: str) -> "RuleType":
        """
        Look up a rule by its command-line or enum name.

        Matching is case-insensitive and treats ``-`` and ``_`` alike.

        Args:
            name: Rule name such as ``semantic-line-breaks`` or ``SEMANTIC_LINE_BREAKS``

        Returns:
            RuleType: The matching rule type

        Raises:
            UnknownRuleError: If no rule has this name
        """
        try:
            return cls[name.strip().upper().replace("-", "_")]
        except KeyError:
            raise UnknownRuleError(name) from None


RuleId = Union[RuleType, str]


class RuleDispatcher:
    """
    Maps every ``RuleType`` to exactly one rule instance.

    Rules are created once, with the given options, and reused for every call.
    """

    def __init__(self, options: Optional[RuleOptions] = None):
        self.options = options or RuleOptions()
        factories: Dict[RuleType, Callable[[], RewriteRule]] = {
            RuleType.QUOTES: CanonicalizeQuotesRule,
            RuleType.EMBEDDED_IMAGES: RemoveEmbeddedImagesRule,
            RuleType.EXTRA_REF_SPACES: RemoveExtraRefSpacesRule,
            RuleType.SIMPLIFY_URLS: SimplifyUrlsRule,
            RuleType.SEMANTIC_LINE_BREAKS: lambda: SemanticLineBreaksRule(
                max_line_length=self.options.max_line_length,
                line_starting_phrases=self.options.line_starting_phrases,
            ),
            RuleType.THROUGH_RUNNING: CanonicalizeThroughRunningRule,
            RuleType.FOOTNOTES_AFTER_PUNCTUATION: lambda: MoveFootnotesAfterPunctuationRule(
                punctuation=self.options.footnote_punctuation
            ),
        }
        missing = [rule_type.name for rule_type in RuleType if rule_type not in factories]
        if missing:
            raise RuntimeError(f"No rule registered for: {', '.join(missing)}")
        self._rules: Dict[RuleType, RewriteRule] = {
            rule_type: factory() for rule_type, factory in factories.items()
        }

    def rule_for(self, rule_id: RuleId) -> RewriteRule:
        """Return the rule for a rule type or rule name.

        Raises:
            UnknownRuleError: If a rule name does not match any rule
        """
        rule_type = rule_id if isinstance(rule_id, RuleType) else RuleType.from_name(rule_id)
        return self._rules[rule_type]

    def rewrite(self, rule_id: RuleId, text: str) -> str:
        """
        Rewrite a document with a single rule.

        Args:
            rule_id: The rule to apply, as a ``RuleType`` or rule name
            text: The full document text

        Returns:
            str: The rewritten document text
        """
        rule = self.rule_for(rule_id)
        logger.debug(f"Applying {rule!r}")
        return rule.rewrite(text)


def rewrite(rule_id: RuleId, text: str, options: Optional[RuleOptions] = None) -> str:
    """Rewrite a document with a single rule, using default options unless given."""
    return RuleDispatcher(options=options).rewrite(rule_id, text)
