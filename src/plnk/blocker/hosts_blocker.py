# src/plnk/blocker/hosts_blocker.py
import logging
from typing import Sequence

from .backup_helper import backup_hosts, restore_backup
from .config import BLOCK_MARK, REDIRECT_ADDRESS, is_valid_domain
from .errors import (
    AlreadyBlocked,
    BackupExists,
    ConfigError,
    EmptyDomainSet,
    HostsPermissionError,
    HostsWriteError,
)
from .hosts_file import HostsFile, classify

logger = logging.getLogger(__name__)


def is_blocked(hosts: HostsFile, domains: Sequence[str]) -> bool:
    """
    True if any line already redirects one of ``domains`` to the loopback.

    Any overlap counts, so a partially blocked set is reported as blocked.
    """
    for lineno, managed in enumerate(classify(hosts.read_text(), domains), start=1):
        if managed:
            logger.debug("%s:%d already redirects a requested domain", hosts.path, lineno)
            return True
    return False


def block_domains(hosts: HostsFile, domains: Sequence[str]) -> None:
    """Back up the host file, then append a marker and one redirect per domain."""
    if not domains:
        raise EmptyDomainSet()
    if not all(is_valid_domain(d) for d in domains):
        raise ConfigError("blocked domains must be non-empty and contain no whitespace")
    if is_blocked(hosts, domains):
        raise AlreadyBlocked()
    # an earlier cycle that was never unblocked
    if hosts.backup_path.exists():
        raise BackupExists(hosts.backup_path)

    backup_hosts(hosts)

    try:
        f = open(hosts.path, "a", encoding="utf-8")
    except OSError as exc:
        raise HostsPermissionError(f"cannot write to {hosts.path}") from exc

    with f:
        try:
            f.write(f"\n{BLOCK_MARK}\n")
            for d in domains:
                f.write(f"{REDIRECT_ADDRESS} {d}\n")
        except OSError as exc:
            raise HostsWriteError(f"failed to write to {hosts.path}") from exc

    logger.info("Blocked %d domain(s) in %s", len(domains), hosts.path)


def unblock_all(hosts: HostsFile) -> None:
    """Roll the host file back to its last backup, dropping every edit made since."""
    restore_backup(hosts)
    logger.info("Unblocked %s", hosts.path)
