"""
Entry point for running the CLI as a module.

This allows the CLI to be executed with:
    python -m md_styler
"""

from md_styler.cli import main

if __name__ == "__main__":
    main()
