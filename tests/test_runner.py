"""
Tests for fetchcli/runner.py
"""

from unittest.mock import MagicMock, patch

import pytest

from fetchcli.errors import SourceUnavailableError
from fetchcli.runner import SafeExecutionError, run_safe_command


@pytest.mark.unit
class TestRunSafeCommand:

    def test_rejects_unlisted_executable(self):
        with pytest.raises(SafeExecutionError):
            run_safe_command(["rm", "-rf", "/"])

    def test_rejects_empty_command(self):
        with pytest.raises(SafeExecutionError):
            run_safe_command([])

    def test_is_a_source_error(self):
        assert issubclass(SafeExecutionError, SourceUnavailableError)

    @patch("fetchcli.runner.subprocess.Popen")
    def test_captures_output(self, mock_popen):
        proc = MagicMock()
        proc.communicate.return_value = ("00:02.0 VGA ...\n", "")
        proc.returncode = 0
        mock_popen.return_value = proc

        result = run_safe_command(["lspci"])

        assert result == {
            "ok": True,
            "returncode": 0,
            "stdout": "00:02.0 VGA ...\n",
            "stderr": "",
            "cmd": "lspci",
        }
        args, kwargs = mock_popen.call_args
        assert args[0] == ["lspci"]
        assert kwargs["text"] is True
        proc.communicate.assert_called_once_with()

    @patch("fetchcli.runner.subprocess.Popen")
    def test_path_basename_checked_against_whitelist(self, mock_popen):
        proc = MagicMock()
        proc.communicate.return_value = ("", "")
        proc.returncode = 0
        mock_popen.return_value = proc

        run_safe_command(["/usr/bin/lspci", "-nn"])
        assert mock_popen.call_args[0][0] == ["/usr/bin/lspci", "-nn"]

    @patch("fetchcli.runner.subprocess.Popen")
    def test_string_command_rejected(self, mock_popen):
        with pytest.raises(SafeExecutionError):
            run_safe_command("lspci -nn")
        mock_popen.assert_not_called()

    @patch("fetchcli.runner.subprocess.Popen", side_effect=FileNotFoundError(2, "No such file or directory"))
    def test_spawn_failure(self, mock_popen):
        with pytest.raises(SafeExecutionError) as exc:
            run_safe_command(["lspci"])
        assert exc.value.operation == "lspci"

    @patch("fetchcli.runner.subprocess.Popen")
    def test_custom_whitelist(self, mock_popen):
        proc = MagicMock()
        proc.communicate.return_value = ("hi\n", "")
        proc.returncode = 0
        mock_popen.return_value = proc

        assert run_safe_command(["echo", "hi"], whitelist={"echo"})["stdout"] == "hi\n"
