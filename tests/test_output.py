"""Tests for console and logging helpers in publish_release.utils.output."""

import logging
import sys

import pytest

from publish_release.utils.output import configure_logging, console, quiet_output


class TestQuietOutput:
    def test_suppresses_print_and_console(self, capsys: pytest.CaptureFixture[str]) -> None:
        with quiet_output():
            print("plain")
            sys.stderr.write("stderr\n")
            console.print("rich")
            logging.getLogger("publish_release.test").error("logged")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_restores_state_after_exception(self) -> None:
        stdout, stderr = sys.stdout, sys.stderr
        disable_level = logging.root.manager.disable

        with pytest.raises(RuntimeError):
            with quiet_output():
                raise RuntimeError("boom")

        assert sys.stdout is stdout
        assert sys.stderr is stderr
        assert logging.root.manager.disable == disable_level
        assert console.quiet is False

    def test_disabled_is_noop(self, capsys: pytest.CaptureFixture[str]) -> None:
        with quiet_output(enabled=False):
            print("visible")

        assert capsys.readouterr().out == "visible\n"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = logging.getLogger("publish_release")
        saved = (list(logger.handlers), logger.level, logger.propagate)
        yield logger
        logger.handlers[:] = saved[0]
        logger.setLevel(saved[1])
        logger.propagate = saved[2]

    @pytest.mark.parametrize(
        ("verbose", "quiet", "level"),
        [
            (False, False, logging.WARNING),
            (True, False, logging.DEBUG),
            (True, True, logging.DEBUG),
            (False, True, logging.CRITICAL + 1),
        ],
    )
    def test_levels(self, restore_logger, verbose: bool, quiet: bool, level: int) -> None:
        configure_logging(verbose=verbose, quiet=quiet)

        assert restore_logger.level == level
        assert len(restore_logger.handlers) == 1

    def test_repeated_calls_do_not_stack_handlers(self, restore_logger) -> None:
        configure_logging()
        configure_logging(verbose=True)

        assert len(restore_logger.handlers) == 1
