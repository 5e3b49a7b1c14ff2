# src/plnk/blocker/hosts_file.py
"""Host file handle and line classification."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from .config import BACKUP_SUFFIX, REDIRECT_ADDRESS, hosts_path
from .errors import HostsReadError


class HostsFile:
    """The live host file and its sibling backup path."""

    def __init__(self, path: Path, backup_path: Optional[Path] = None):
        self.path = Path(path)
        if backup_path is None:
            backup_path = self.path.with_name(self.path.name + BACKUP_SUFFIX)
        self.backup_path = Path(backup_path)

    @classmethod
    def default(cls) -> "HostsFile":
        return cls(hosts_path())

    def read_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise HostsReadError(f"cannot read {self.path}: {exc}") from exc

    def __repr__(self) -> str:
        return f"HostsFile({str(self.path)!r})"


@dataclass(frozen=True)
class Redirect:
    address: str
    host: str


@dataclass(frozen=True)
class Opaque:
    raw: str


HostsLine = Union[Redirect, Opaque]


def parse_line(line: str) -> HostsLine:
    # only the first two tokens matter, aliases after the host are ignored
    parts = line.split()
    if len(parts) < 2 or parts[0].startswith("#"):
        return Opaque(line)
    return Redirect(parts[0], parts[1])


def is_managed_entry(line: HostsLine, domains: Sequence[str]) -> bool:
    return isinstance(line, Redirect) and line.address == REDIRECT_ADDRESS and line.host in domains


def parse_hosts(content: str) -> List[HostsLine]:
    return [parse_line(line) for line in content.splitlines()]


def classify(content: str, domains: Sequence[str]) -> Iterator[bool]:
    """Yield, for each line of ``content``, whether it redirects one of ``domains``."""
    for line in parse_hosts(content):
        yield is_managed_entry(line, domains)
