# src/plnk/blocker/backup_helper.py
import logging
import os

from .errors import BackupError, NoBackupFound, RestoreError
from .hosts_file import HostsFile

logger = logging.getLogger(__name__)


def backup_hosts(hosts: HostsFile):
    """Copy the host file verbatim to its backup path. The source is only read."""
    try:
        content = hosts.path.read_bytes()
    except OSError as exc:
        raise BackupError(f"cannot read host file {hosts.path}") from exc

    try:
        hosts.backup_path.write_bytes(content)
    except OSError as exc:
        # drop a half-written copy so the next block is not refused
        try:
            hosts.backup_path.unlink(missing_ok=True)
        except OSError:
            logger.warning("Could not remove partial backup %s", hosts.backup_path)
        raise BackupError(f"cannot create backup file {hosts.backup_path}") from exc

    logger.info("Backed up %s to %s", hosts.path, hosts.backup_path)
    return hosts.backup_path


def restore_backup(hosts: HostsFile):
    """
    Move the backup back onto the host file.

    A rename, so the host file is either fully replaced or left as it was.
    On failure the backup stays where it is.
    """
    if not hosts.backup_path.exists():
        raise NoBackupFound()

    try:
        os.replace(hosts.backup_path, hosts.path)
    except OSError as exc:
        raise RestoreError(f"failed to restore {hosts.path}: {exc}") from exc

    logger.info("Restored %s from %s", hosts.path, hosts.backup_path)
    return hosts.path
