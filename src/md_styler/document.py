"""Reading, rewriting and writing Markdown documents.

The document is rewritten fully in memory; the file is only overwritten once
the rewrite has succeeded.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from md_styler.config import RuleOptions
from md_styler.dispatcher import RuleDispatcher, RuleId


def read_document(path: Path) -> str:
    """Read a document as-is, without newline translation.

    Args:
        path: Path to the file to read

    Returns:
        The file contents as a string

    Raises:
        FileNotFoundError: If the file does not exist
        Exception: If there's an error reading the file
    """
    if not path.exists():
        logger.error(f"File not found: {path}")
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with path.open(mode="r", encoding="utf-8", newline="") as f:
            content = f.read()
        logger.debug(f"Successfully read file: {path}")
        return content
    except Exception as e:
        logger.error(f"Error reading file {path}: {e}")
        raise


def write_document(path: Path, content: str) -> None:
    """Write a document, replacing the file's contents.

    Args:
        path: Path to write to
        content: Content to write

    Raises:
        Exception: If there's an error writing the file
    """
    try:
        with path.open(mode="w", encoding="utf-8", newline="") as f:
            f.write(content)
        logger.debug(f"Successfully wrote file: {path} ({len(content)} chars)")
    except Exception as e:
        logger.error(f"Error writing file {path}: {e}")
        raise


def ensure_trailing_newline(text: str) -> str:
    """Append a newline unless the text already ends with one."""
    if text.endswith("\n"):
        return text
    return text + "\n"


def rewrite_file(
    path: Path,
    rule_id: RuleId,
    options: Optional[RuleOptions] = None,
    dispatcher: Optional[RuleDispatcher] = None,
) -> bool:
    """
    Rewrite a Markdown file in place with a single rule.

    Args:
        path: The file to rewrite
        rule_id: The rule to apply
        options: Rule options, used when no dispatcher is given
        dispatcher: Dispatcher to run the rule with

    Returns:
        bool: True if the file's content changed
    """
    dispatcher = dispatcher or RuleDispatcher(options=options)
    rule = dispatcher.rule_for(rule_id)

    before = read_document(path)
    after = ensure_trailing_newline(dispatcher.rewrite(rule_id, before))
    changed = after != before

    write_document(path, after)
    before_lines = before.count("\n")
    after_lines = after.count("\n")
    if changed:
        logger.info(f"Applied '{rule.name}' to {path}: {before_lines} -> {after_lines} lines")
    else:
        logger.info(f"Applied '{rule.name}' to {path}: no changes")
    return changed
