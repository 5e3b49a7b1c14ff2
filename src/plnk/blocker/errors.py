# src/plnk/blocker/errors.py
"""Error kinds raised by the blocker core.

Every failure is terminal for the current invocation. The CLI is the only
place that turns these into an exit status.
"""


class PlnkError(Exception):
    """Base class for all blocker failures."""


class ConfigError(PlnkError):
    """Configuration is missing, unreadable, malformed or has an empty domain."""


class HostsPermissionError(PlnkError):
    """The process cannot write to the host file."""


class HostsReadError(PlnkError):
    """The host file cannot be opened or decoded."""


class HostsWriteError(PlnkError):
    """Appending to the host file failed after it was opened."""


class BackupError(PlnkError):
    """The backup could not be taken."""


class RestoreError(PlnkError):
    """The backup could not be moved back onto the host file."""


class NoBackupFound(RestoreError):
    def __init__(self, message: str = "no backup file found"):
        super().__init__(message)


class IllegalStateError(PlnkError):
    """The requested transition is not allowed from the current state."""


class AlreadyBlocked(IllegalStateError):
    def __init__(self, message: str = "urls already blocked"):
        super().__init__(message)


class EmptyDomainSet(IllegalStateError):
    def __init__(self, message: str = "no domains to block"):
        super().__init__(message)


class BackupExists(IllegalStateError):
    def __init__(self, path):
        super().__init__(f"backup {path} already exists, run unblock first")
        self.path = path
