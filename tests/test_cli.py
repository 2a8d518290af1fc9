"""Tests for the command line entry point."""

from unittest.mock import patch

import pytest

from unlock_keyring.cli import main, set_args
from unlock_keyring.results import ResultCode


class TestSetArgs:

    def test_no_arguments(self):
        args = set_args().parse_args([])
        assert args.verbose == 0

    def test_verbose_counts(self):
        assert set_args().parse_args(["-vv"]).verbose == 2


class TestMain:

    def test_success(self, fake_backend, capsys):
        assert main([], backend=fake_backend(ResultCode.OK)) == 0
        captured = capsys.readouterr()
        assert captured.out == "Successfully unlocked\n"
        assert captured.err == ""

    def test_failure(self, fake_backend, capsys):
        assert main([], backend=fake_backend(ResultCode.DENIED)) == 1
        assert capsys.readouterr().out == "Error unlocking keyring: 1\n"

    def test_uses_secret_service_by_default(self, fake_backend, capsys):
        backend = fake_backend(ResultCode.OK)
        with patch("unlock_keyring.cli.SecretServiceBackend", return_value=backend) as cls:
            assert main([]) == 0
        cls.assert_called_once_with()
        assert backend.calls == 1

    @pytest.mark.parametrize(
        "argv",
        [["collection-name"], ["--bogus"], ["--help"], ["--version"], ["-vx"], ["-v", "login", "--force"]],
    )
    def test_stray_arguments_are_ignored(self, fake_backend, capsys, argv):
        backend = fake_backend(ResultCode.OK)
        assert main(argv, backend=backend) == 0
        assert backend.calls == 1
        assert capsys.readouterr().out == "Successfully unlocked\n"

    def test_stray_arguments_still_report_failure(self, fake_backend, capsys):
        backend = fake_backend(ResultCode.DENIED)
        assert main(["foo"], backend=backend) == 1
        assert backend.calls == 1
        assert capsys.readouterr().out == "Error unlocking keyring: 1\n"

    def test_ignored_arguments_are_logged(self, fake_backend, capsys):
        main(["-v", "foo"], backend=fake_backend(ResultCode.OK))
        assert "INFO: Ignoring arguments: foo" in capsys.readouterr().err

    def test_verbose_logs_to_stderr_only(self, fake_backend, capsys):
        assert main(["-vv"], backend=fake_backend(ResultCode.CANCELLED)) == 1
        captured = capsys.readouterr()
        assert captured.out == "Error unlocking keyring: 7\n"
        assert "DEBUG: Requesting unlock of the default collection" in captured.err
