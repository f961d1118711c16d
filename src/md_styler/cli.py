"""
Command-line interface for md-styler.

Usage:
    md-styler [--commit] PATH <rule> [args...]
    md-styler --help

Available rules:
    quotes                       Replace curly quotes with ASCII quotes
    embedded-images              Replace embedded data images with a placeholder
    extra-ref-spaces             Delete extra spaces after reference labels
    simplify-urls                Simplify [URL](URL) links as <URL>
    semantic-line-breaks         Add semantic line breaks
    through-running              Canonicalize "through-running" phrases
    footnotes-after-punctuation  Move footnotes after punctuation

Examples:
    md-styler README.md quotes
    md-styler --commit post.md semantic-line-breaks --max-line-length 80
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click
from loguru import logger
from pydantic import ValidationError

from md_styler.config import Settings
from md_styler.dispatcher import RuleType
from md_styler.document import rewrite_file
from md_styler.exceptions import MdStylerError
from md_styler.git import GitRepository, commit_message
from md_styler.logging_config import setup_logging

RULE_HELP = {
    RuleType.QUOTES: "Replace fancy (‘’, “”) quotes with simple (', \") quotes.",
    RuleType.EMBEDDED_IMAGES: "Delete large embedded images (<data:image/...> elements).",
    RuleType.EXTRA_REF_SPACES: "Delete extra spaces after reference labels such as footnotes ([^1]:).",
    RuleType.SIMPLIFY_URLS: "Simplify [URL](URL) links as <URL>.",
    RuleType.SEMANTIC_LINE_BREAKS: "Add semantic line breaks as best as possible.",
    RuleType.THROUGH_RUNNING: (
        'Canonicalize "through-running" words, always hyphenating and always putting "through" before "run".'
    ),
    RuleType.FOOTNOTES_AFTER_PUNCTUATION: "Move footnotes to always after punctuation.",
}


@dataclass
class CliState:
    """Values shared by the group and the rule subcommands."""

    path: Path
    commit: bool
    settings: Settings


def run_rule(state: CliState, rule_type: RuleType, max_line_length: Optional[int] = None) -> None:
    """
    Rewrite the file with one rule, committing it if requested.

    Args:
        state: Path, commit flag and settings from the command group
        rule_type: The rule to apply
        max_line_length: Overrides the configured maximum line length

    Raises:
        click.ClickException: If the rewrite or a git step fails
    """
    repository = GitRepository() if state.commit else None
    try:
        options = state.settings.rule_options(max_line_length=max_line_length)
        if repository is not None:
            # No current changes, so the commit contains only this rewrite
            repository.ensure_clean()
        changed = rewrite_file(state.path, rule_type, options=options)
        if repository is not None:
            if changed:
                repository.commit_file(state.path, commit_message(sys.argv))
            else:
                logger.info("Nothing changed, skipping commit")
    except (MdStylerError, OSError, ValidationError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--commit", is_flag=True, default=False, help="`git commit` the changes.")
@click.help_option("--help", "-h")
@click.version_option(package_name="md-styler")
@click.pass_context
def cli(ctx: click.Context, path: Path, commit: bool) -> None:
    """Style the Markdown file PATH with one rewrite rule."""
    try:
        settings = Settings()
    except ValidationError as e:
        raise click.ClickException(f"Invalid settings: {e}") from e
    setup_logging(level=settings.log_level)
    ctx.obj = CliState(path=path, commit=commit, settings=settings)


def _make_rule_command(rule_type: RuleType) -> click.Command:
    @click.pass_obj
    def command(state: CliState) -> None:
        run_rule(state, rule_type)

    return click.command(rule_type.cli_name, help=RULE_HELP[rule_type])(command)


@click.command(RuleType.SEMANTIC_LINE_BREAKS.cli_name, help=RULE_HELP[RuleType.SEMANTIC_LINE_BREAKS])
@click.option(
    "--max-line-length",
    type=click.IntRange(min=1),
    default=None,
    help="Rewrap lines at or above this length. Defaults to the configured value (100).",
)
@click.pass_obj
def semantic_line_breaks_command(state: CliState, max_line_length: Optional[int]) -> None:
    run_rule(state, RuleType.SEMANTIC_LINE_BREAKS, max_line_length=max_line_length)


for _rule_type in RuleType:
    if _rule_type is RuleType.SEMANTIC_LINE_BREAKS:
        cli.add_command(semantic_line_breaks_command)
    else:
        cli.add_command(_make_rule_command(_rule_type))


def main() -> None:
    """
    Main function to handle CLI execution with error handling.
    """
    try:
        cli()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(1)
