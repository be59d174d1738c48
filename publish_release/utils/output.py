"""Console and logging setup.

User-facing status goes through the shared rich ``console``. Diagnostics go
through stdlib loggers rendered by RichHandler.
"""

import contextlib
import logging
import os
from collections.abc import Iterator

from rich.console import Console
from rich.logging import RichHandler

console = Console()
err_console = Console(stderr=True)

LOG_FORMAT = "%(message)s"


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Install a RichHandler on the package logger.

    Verbose enables DEBUG. Quiet (without verbose) silences logging
    entirely. Otherwise only warnings and errors are shown.
    """
    logger = logging.getLogger("publish_release")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.CRITICAL + 1
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=err_console,
        show_time=verbose,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


@contextlib.contextmanager
def quiet_output(enabled: bool = True) -> Iterator[None]:
    """Silence stdout, stderr and logging for the duration of the block.

    The previous sinks and logging threshold are restored on every exit
    path, including exceptions. With ``enabled=False`` this is a no-op.
    """
    if not enabled:
        yield
        return

    previous_disable = logging.root.manager.disable
    previous_quiet = (console.quiet, err_console.quiet)
    with open(os.devnull, "w", encoding="utf-8") as devnull:
        try:
            console.quiet = True
            err_console.quiet = True
            logging.disable(logging.CRITICAL)
            with contextlib.redirect_stdout(devnull), contextlib.redirect_stderr(devnull):
                yield
        finally:
            logging.disable(previous_disable)
            console.quiet, err_console.quiet = previous_quiet
