"""Tests for terminal mode handling."""

import io
from unittest.mock import MagicMock, patch

import pytest

termios = pytest.importorskip("termios")

from confirm_cli.errors import TerminalIOError  # noqa: E402
from confirm_cli.terminal import cbreak, raw_mode_available, read_keystroke  # noqa: E402


@pytest.fixture
def mock_termios():
    with (
        patch("confirm_cli.terminal.termios") as mocked,
        patch("confirm_cli.terminal.tty") as mock_tty,
    ):
        mocked.error = termios.error
        mocked.tcgetattr.return_value = ["saved-attrs"]
        mocked.tty = mock_tty
        yield mocked


def _tty_stream(data):
    stream = MagicMock()
    stream.fileno.return_value = 7
    stream.read.side_effect = list(data) if isinstance(data, list) else [data]
    return stream


class TestCbreak:
    def test_restores_attributes(self, mock_termios):
        with cbreak(7):
            mock_termios.tty.setcbreak.assert_called_once_with(7)
        mock_termios.tcsetattr.assert_called_once_with(7, mock_termios.TCSADRAIN, ["saved-attrs"])

    def test_restores_attributes_on_error(self, mock_termios):
        with pytest.raises(RuntimeError):
            with cbreak(7):
                raise RuntimeError("boom")
        mock_termios.tcsetattr.assert_called_once_with(7, mock_termios.TCSADRAIN, ["saved-attrs"])

    def test_restores_attributes_on_interrupt(self, mock_termios):
        with pytest.raises(KeyboardInterrupt):
            with cbreak(7):
                raise KeyboardInterrupt
        mock_termios.tcsetattr.assert_called_once()

    def test_unreadable_attributes(self, mock_termios):
        mock_termios.tcgetattr.side_effect = termios.error(25, "Inappropriate ioctl for device")

        with pytest.raises(TerminalIOError):
            with cbreak(7):
                pass
        mock_termios.tcsetattr.assert_not_called()


class TestReadKeystroke:
    def test_reads_one_character(self, mock_termios):
        stream = _tty_stream("y")

        assert read_keystroke(stream) == "y"
        stream.read.assert_called_once_with(1)
        mock_termios.tcsetattr.assert_called_once()

    def test_eof_is_fatal_and_restores(self, mock_termios):
        with pytest.raises(TerminalIOError, match="closed"):
            read_keystroke(_tty_stream(""))
        mock_termios.tcsetattr.assert_called_once()

    def test_read_error_is_fatal_and_restores(self, mock_termios):
        stream = _tty_stream([OSError("Input/output error")])

        with pytest.raises(TerminalIOError):
            read_keystroke(stream)
        mock_termios.tcsetattr.assert_called_once()

    def test_stream_without_descriptor(self, mock_termios):
        with pytest.raises(TerminalIOError):
            read_keystroke(io.StringIO("y"))
        mock_termios.tcgetattr.assert_not_called()


class TestRawModeAvailable:
    def test_requires_a_tty(self):
        assert not raw_mode_available(io.StringIO())

    def test_tty_stream(self):
        stream = MagicMock()
        stream.isatty.return_value = True
        assert raw_mode_available(stream)


class TestRestoreFailure:
    def test_restore_failure_after_clean_read(self, mock_termios):
        mock_termios.tcsetattr.side_effect = termios.error(5, "Input/output error")

        with pytest.raises(TerminalIOError, match="restore"):
            read_keystroke(_tty_stream("y"))

    def test_read_error_is_not_masked_by_restore_failure(self, mock_termios):
        mock_termios.tcsetattr.side_effect = termios.error(5, "Input/output error")
        stream = _tty_stream([OSError(5, "Input/output error")])

        with pytest.raises(TerminalIOError, match="reading user input"):
            read_keystroke(stream)

    def test_interrupt_is_not_masked_by_restore_failure(self, mock_termios):
        mock_termios.tcsetattr.side_effect = termios.error(5, "Input/output error")

        with pytest.raises(KeyboardInterrupt):
            with cbreak(7):
                raise KeyboardInterrupt
