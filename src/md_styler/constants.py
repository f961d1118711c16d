"""
Constants for md-styler.

This module centralizes the fixed values shared by the rewrite rules and the
command-line layer.
"""

# =============================================================================
# Semantic Line Breaks
# =============================================================================

# Lines at or above this length are rewrapped
DEFAULT_MAX_LINE_LENGTH = 100

# Phrases that start a new line when a long line is rewrapped.
# Usually coordinating and subordinating conjunctions.
LINE_STARTING_PHRASES = ("because", "rather than", "of how", "in order to")

# Sentence-ending punctuation, each followed by one or more spaces
OUTER_SEPARATOR_PUNCTUATION = ".!?;:"

# Closing punctuation that ends a line, opening punctuation that starts one
INNER_CLOSING_PUNCTUATION = ",)]"
INNER_OPENING_PUNCTUATION = "(["


# =============================================================================
# Pattern Rules
# =============================================================================

# Curly quotes and their ASCII replacements
SINGLE_CURLY_QUOTES = "‘’"
DOUBLE_CURLY_QUOTES = "“”"

# Inserted in place of every removed embedded image
EMBEDDED_IMAGE_PLACEHOLDER = "TODO"

# Punctuation a footnote marker is moved past
DEFAULT_FOOTNOTE_PUNCTUATION = ".,!?;:"

# Ordered (phrase, canonical form) pairs; each is applied fully before the next
THROUGH_RUNNING_REPLACEMENTS = (
    ("through running", "through-running"),
    ("running through", "through-running"),
    ("through run", "through-run"),
    ("run through", "through-run"),
)


# =============================================================================
# Logging
# =============================================================================

DEFAULT_LOG_LEVEL = "INFO"
