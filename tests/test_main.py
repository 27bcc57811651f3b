from __future__ import annotations

import pytest

from nordpaths.main import main

pytestmark = pytest.mark.usefixtures("restore_logging")


def test_socket_for_root(locator, capsys) -> None:
    assert main(["socket", "--uid", "0"], locator=locator) == 0

    assert capsys.readouterr().out == "/run/nordfileshared/nordfileshared.sock\n"


def test_socket_for_user_session(locator, runtime_dirs, capsys) -> None:
    runtime_dirs.add("/run/user/1000")

    assert main(["socket", "--uid", "1000"], locator=locator) == 0

    assert capsys.readouterr().out == "/run/user/1000/nordfileshared/nordfileshared.sock\n"


def test_daemon_socket(locator, capsys) -> None:
    assert main(["daemon-socket"], locator=locator) == 0

    assert capsys.readouterr().out == "/run/nordvpn/nordvpnd.sock\n"


def test_config_dir_from_uid(locator, home, capsys) -> None:
    (home / ".config" / "nordvpn").mkdir(parents=True)

    assert main(["config-dir", "--uid", "1000"], locator=locator) == 0

    assert capsys.readouterr().out == f"{home}/.config/nordvpn/\n"


def test_missing_config_dir_is_an_error(locator, home, capsys) -> None:
    assert main(["history-path", "--home", str(home)], locator=locator) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error: .config directory not found" in captured.err


def test_log_path_fallback_keeps_stdout_clean(locator, monkeypatch, capsys) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    assert main(["log-path", "--uid", "4242"], locator=locator) == 0

    captured = capsys.readouterr()
    assert captured.out == "/var/log/nordvpn/nordfileshared-4242.log\n"
    assert "failed to lookup user" in captured.err


def test_gid(locator, capsys) -> None:
    assert main(["gid"], locator=locator) == 0

    assert capsys.readouterr().out == "977\n"


def test_missing_group_exits_nonzero(locator, capsys) -> None:
    assert main(["gid", "--group", "nosuchgroup"], locator=locator) == 1

    assert "unknown group nosuchgroup" in capsys.readouterr().err


def test_iptables(locator, monkeypatch, capsys) -> None:
    monkeypatch.delenv("NORDPATHS_IPV4", raising=False)
    monkeypatch.delenv("NORDPATHS_IPV6", raising=False)

    assert main(["iptables", "--no-ipv6"], locator=locator) == 0

    assert capsys.readouterr().out == "iptables\n"


def test_command_required(capsys) -> None:
    with pytest.raises(SystemExit):
        main([])
