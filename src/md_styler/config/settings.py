"""Application settings using Pydantic Settings."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from md_styler.constants import (
    DEFAULT_FOOTNOTE_PUNCTUATION,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_LINE_LENGTH,
    LINE_STARTING_PHRASES,
)


class RuleOptions(BaseModel):
    """Tunable values the rewrite rules are built with."""

    model_config = ConfigDict(validate_assignment=True, validate_default=True)

    max_line_length: int = Field(default=DEFAULT_MAX_LINE_LENGTH, gt=0)
    footnote_punctuation: str = Field(default=DEFAULT_FOOTNOTE_PUNCTUATION, min_length=1)
    line_starting_phrases: tuple[str, ...] = LINE_STARTING_PHRASES

    @field_validator("line_starting_phrases")
    @classmethod
    def validate_line_starting_phrases(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for phrase in value:
            if not phrase.strip():
                raise ValueError("line_starting_phrases must not contain blank phrases")
        return value


class Settings(BaseSettings):
    """Application-wide settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MD_STYLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    max_line_length: int = Field(default=DEFAULT_MAX_LINE_LENGTH, gt=0)
    footnote_punctuation: str = Field(default=DEFAULT_FOOTNOTE_PUNCTUATION, min_length=1)
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    def rule_options(self, **overrides) -> RuleOptions:
        """Build the options the rewrite rules are created with.

        Args:
            **overrides: Field values that take precedence over the settings,
                e.g. a line length given on the command line. ``None`` values
                are ignored.

        Returns:
            RuleOptions: Validated rule options
        """
        values = {
            "max_line_length": self.max_line_length,
            "footnote_punctuation": self.footnote_punctuation,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return RuleOptions(**values)

