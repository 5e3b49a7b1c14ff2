# src/plnk/blocker/privilege.py
import os
import platform
from typing import Callable, Optional

from .errors import HostsPermissionError
from .hosts_file import HostsFile


def can_write(hosts: HostsFile) -> bool:
    """Open the existing host file for append without writing or creating anything."""
    if platform.system() == "Windows":
        # no root concept; failures surface from the operation itself
        return True
    try:
        fd = os.open(hosts.path, os.O_WRONLY | os.O_APPEND)
    except OSError:
        return False
    os.close(fd)
    return True


def check_privilege(hosts: HostsFile, probe: Optional[Callable[[HostsFile], bool]] = None) -> None:
    probe = probe or can_write
    if not probe(hosts):
        raise HostsPermissionError("must run as root")
