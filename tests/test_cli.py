import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from plnk.blocker.config import BLOCK_MARK
from plnk.cli import cli

runner = CliRunner()


@pytest.fixture
def setup(tmp_path: Path, monkeypatch):
    hosts = tmp_path / "hosts"
    hosts.write_text("127.0.0.1 localhost\n", encoding="utf-8")
    config = tmp_path / "plnk.toml"
    config.write_text('blocked_domains = ["ads.example", "tracker.example"]\n', encoding="utf-8")
    monkeypatch.setenv("PLNK_HOSTS_FILE", str(hosts))
    monkeypatch.setenv("PLNK_CONFIG", str(config))
    return hosts


def test_block_and_unblock(setup):
    result = runner.invoke(cli, [])
    assert result.exit_code == 0, result.output
    assert "urls blocked" in result.output
    content = setup.read_text()
    assert BLOCK_MARK in content
    assert "127.0.0.1 tracker.example" in content

    result = runner.invoke(cli, ["u"])
    assert result.exit_code == 0, result.output
    assert "urls unblocked" in result.output
    assert setup.read_text() == "127.0.0.1 localhost\n"


def test_block_twice_fails(setup):
    assert runner.invoke(cli, []).exit_code == 0
    result = runner.invoke(cli, [])
    assert result.exit_code == 1
    assert "already blocked" in result.output


def test_unblock_without_backup(setup):
    result = runner.invoke(cli, ["u"])
    assert result.exit_code == 1
    assert "no backup file found" in result.output


def test_help_token(setup):
    result = runner.invoke(cli, ["h"])
    assert result.exit_code == 0
    assert "usage:" in result.output
    assert setup.read_text() == "127.0.0.1 localhost\n"


def test_unknown_argument(setup):
    result = runner.invoke(cli, ["x"])
    assert result.exit_code == 2
    assert "unrecognized argument: x" in result.output
    assert setup.read_text() == "127.0.0.1 localhost\n"


def test_bad_config(setup, tmp_path: Path):
    bad = tmp_path / "bad.toml"
    bad.write_text('blocked_domains = [""]\n', encoding="utf-8")
    result = runner.invoke(cli, ["--config", str(bad)])
    assert result.exit_code == 1
    assert "failed to parse" in result.output
    assert setup.read_text() == "127.0.0.1 localhost\n"


@pytest.mark.skipif(sys.platform == "win32", reason="no root check on Windows")
def test_privilege_failure(setup, monkeypatch):
    from plnk.blocker import privilege

    monkeypatch.setattr(privilege, "can_write", lambda hosts: False)

    result = runner.invoke(cli, [])
    assert result.exit_code == 1
    assert "must run as root" in result.output
    assert not Path(str(setup) + ".backup").exists()


@pytest.mark.skipif(sys.platform == "win32", reason="no root check on Windows")
def test_missing_hosts_file_is_not_created(setup, tmp_path: Path, monkeypatch):
    missing = tmp_path / "no-such-hosts"
    monkeypatch.setenv("PLNK_HOSTS_FILE", str(missing))

    result = runner.invoke(cli, [])
    assert result.exit_code == 1
    assert "must run as root" in result.output
    assert not missing.exists()

    result = runner.invoke(cli, ["u"])
    assert result.exit_code == 1
    assert not missing.exists()
