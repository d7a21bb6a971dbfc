"""
An interactive assistant for creating conventional git branches.

This package asks for a branch prefix (feat, fix, refactor, chore), an optional
reference, a description and an optional start branch, then prints the matching
``git checkout -b`` command and, with ``--execute``, runs it.

Example:
    >>> from mkcheckout import main
    >>> main()
"""


def main() -> None:
    """Run the mkcheckout command-line application."""
    from .cli import run_app

    run_app()
