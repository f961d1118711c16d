"""Base class for the rewrite rules.

Every rule is a pure function of the whole document: it receives the text,
returns the rewritten text and keeps no state between calls.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class RewriteRule(ABC):
    """Abstract base class for a named document rewrite.

    Attributes:
        name: Identifier used in log messages
        config: Optional rule-specific configuration values
    """

    def __init__(self, name: str, config: Optional[Dict[str, Any]] = None):
        self.name = name
        self.config = config or {}

    @abstractmethod
    def rewrite(self, text: str) -> str:
        """
        Rewrite a document.

        Args:
            text: The full document text

        Returns:
            str: The rewritten document text
        """
        ...

    def __call__(self, text: str) -> str:
        return self.rewrite(text)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, config={self.config!r})"
