"""md-styler - Rewrite rules for styling Markdown documents."""

__version__ = "0.1.0"

from md_styler.config import RuleOptions, Settings
from md_styler.dispatcher import RuleDispatcher, RuleType, rewrite
from md_styler.exceptions import (
    DirtyWorkingTreeError,
    GitCommandError,
    GitError,
    MdStylerError,
    UnknownRuleError,
)
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

__all__ = [
    # Version
    "__version__",
    # Dispatch
    "rewrite",
    "RuleType",
    "RuleDispatcher",
    # Config
    "Settings",
    "RuleOptions",
    # Rules
    "RewriteRule",
    "CanonicalizeQuotesRule",
    "RemoveEmbeddedImagesRule",
    "RemoveExtraRefSpacesRule",
    "SimplifyUrlsRule",
    "SemanticLineBreaksRule",
    "CanonicalizeThroughRunningRule",
    "MoveFootnotesAfterPunctuationRule",
    # Exceptions
    "MdStylerError",
    "UnknownRuleError",
    "GitError",
    "GitCommandError",
    "DirtyWorkingTreeError",
]
