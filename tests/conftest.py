from pathlib import Path

import pytest

from plnk.blocker.hosts_file import HostsFile

ORIGINAL = "# Test hosts file\n127.0.0.1 localhost\n::1 localhost\n"


@pytest.fixture
def hosts(tmp_path: Path) -> HostsFile:
    """A scratch hosts file with a couple of stock entries."""
    path = tmp_path / "hosts"
    path.write_text(ORIGINAL, encoding="utf-8")
    return HostsFile(path)


@pytest.fixture
def empty_hosts(tmp_path: Path) -> HostsFile:
    path = tmp_path / "hosts"
    path.write_text("", encoding="utf-8")
    return HostsFile(path)
