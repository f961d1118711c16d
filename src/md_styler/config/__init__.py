"""Configuration models and application settings."""

from md_styler.config.settings import RuleOptions, Settings

__all__ = [
    "RuleOptions",
    "Settings",
]
