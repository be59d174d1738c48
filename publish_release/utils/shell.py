"""Subprocess execution for git and registry commands.

Every external command the release runs goes through run(): argv list,
no shell, text output captured and cleaned of terminal escape codes. A
command either exits 0 or raises ShellError; callers translate that into
their own failure reason.
"""

import logging
import re
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

# Exit statuses a shell reports for a command it cannot find or cannot execute
COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


class ShellError(Exception):
    """An external command exited non-zero or could not be started.

    Attributes:
        cmd: The command line, joined for display
        returncode: Exit status
        stdout: Captured standard output (escape codes removed)
        stderr: Captured standard error (escape codes removed)
    """

    def __init__(self, cmd: str, returncode: int, stdout: str, stderr: str) -> None:
        self.cmd = cmd
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(f"{cmd} exited with {returncode}")

    @property
    def diagnostics(self) -> str:
        """Best available explanation: stderr, else stdout, else the exit status."""
        return self.stderr or self.stdout or str(self)


# CSI sequences (colours, cursor moves), OSC strings and DCS/PM/APC strings
ANSI_PATTERN = re.compile(
    r"\x1b\[[0-9;]*[a-zA-Z]|\x1b\][^\x07]*\x07|\x1b[PX^_][^\x1b]*\x1b\\"
)
CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def strip_ansi(text: str | None) -> str:
    """Remove terminal escape sequences and stray control characters.

    npm and git colour their output when they think they are on a terminal;
    failure details shown to the user must be plain text.
    """
    if not text:
        return ""
    return CONTROL_CHARS_PATTERN.sub("", ANSI_PATTERN.sub("", text)).strip()


def run(
    cmd: Sequence[str],
    cwd: Path | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run a command to completion, capturing its output.

    There is no timeout: a release step waits for its command however long
    it takes.

    Args:
        cmd: Program and arguments
        cwd: Working directory (defaults to the current one)
        check: Raise ShellError when the command does not exit 0

    Returns:
        The completed process, with cleaned stdout/stderr

    Raises:
        ShellError: If the command cannot start, or fails and check is set
    """
    argv = list(cmd)
    cmd_text = " ".join(argv)
    logger.debug("Running: %s (cwd=%s)", cmd_text, cwd or Path.cwd())

    try:
        result = subprocess.run(argv, cwd=cwd, capture_output=True, text=True)
    except OSError as e:
        returncode = (
            COMMAND_NOT_FOUND if isinstance(e, FileNotFoundError) else COMMAND_NOT_EXECUTABLE
        )
        raise ShellError(cmd_text, returncode, "", str(e)) from e

    result.stdout = strip_ansi(result.stdout)
    result.stderr = strip_ansi(result.stderr)

    logger.debug("Exit code %d: %s", result.returncode, cmd_text)

    if check and result.returncode != 0:
        raise ShellError(cmd_text, result.returncode, result.stdout, result.stderr)

    return result
