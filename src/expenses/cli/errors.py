"""
Mapping of tracker errors to CLI exit codes.

Each error kind exits with its own status so scripts can tell them apart.
Usage errors (unknown commands, malformed flag values) are reported by click
itself with exit code 2.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import click

from ..core.errors import ExpenseNotFoundError, ExpenseTrackerError, StoreError, ValidationError

EXIT_VALIDATION = 2
EXIT_NOT_FOUND = 3
EXIT_STORE = 74  # EX_IOERR from sysexits.h
EXIT_GENERIC = 1


class CommandError(click.ClickException):
    """ClickException carrying the exit code of the underlying tracker error."""

    def __init__(self, message: str, exit_code: int = EXIT_GENERIC) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def exit_code_for(error: ExpenseTrackerError) -> int:
    """Exit status for a tracker error."""
    if isinstance(error, ValidationError):
        return EXIT_VALIDATION
    if isinstance(error, ExpenseNotFoundError):
        return EXIT_NOT_FOUND
    if isinstance(error, StoreError):
        return EXIT_STORE
    return EXIT_GENERIC


def describe(error: ExpenseTrackerError, verbose: bool = False) -> str:
    """Error message, followed by its details when verbose output is on."""
    if not verbose or not error.details:
        return error.message
    extra = ", ".join(f"{key}: {value}" for key, value in error.details.items())
    return f"{error.message} ({extra})"


@contextmanager
def reported_errors() -> Iterator[None]:
    """Convert tracker errors raised inside the block into CommandError."""
    try:
        yield
    except ExpenseTrackerError as e:
        ctx = click.get_current_context(silent=True)
        verbose = bool(ctx and ctx.find_root().obj and ctx.find_root().obj.get("verbose"))
        raise CommandError(describe(e, verbose), exit_code_for(e)) from e
