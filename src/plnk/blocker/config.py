# src/plnk/blocker/config.py

import logging
import os
import platform
import tomllib
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ValidationError, field_validator

from .errors import ConfigError

logger = logging.getLogger(__name__)

SYSTEM = platform.system()
DEFAULT_HOSTS_PATH = Path("/etc/hosts") if SYSTEM != "Windows" else Path(r"C:\Windows\System32\drivers\etc\hosts")
BACKUP_SUFFIX = ".backup"

REDIRECT_ADDRESS = "127.0.0.1"
BLOCK_MARK = "# plnk url blocking"

PLNK_ENV = "PLNK_CONFIG"
HOSTS_ENV = "PLNK_HOSTS_FILE"
LOCAL_CONFIG = Path("plnk.toml")
HOME_CONFIG_NAME = ".plnk.toml"


def is_valid_domain(domain: str) -> bool:
    # one whitespace-free token, or the written line would not read back as this host
    return bool(domain) and not any(c.isspace() for c in domain)


class PlnkConfig(BaseModel):
    blocked_domains: List[str]

    @field_validator("blocked_domains")
    @classmethod
    def check_domains(cls, domains: List[str]) -> List[str]:
        for i, d in enumerate(domains):
            if not is_valid_domain(d):
                raise ValueError(f"blocked_domains[{i}] is empty or contains whitespace: {d!r}")
        return domains


def hosts_path() -> Path:
    """Host file path, overridable through PLNK_HOSTS_FILE."""
    override = os.getenv(HOSTS_ENV)
    return Path(override) if override else DEFAULT_HOSTS_PATH


def resolve_config_path(explicit: Optional[Path] = None) -> Path:
    """
    Pick the configuration file.

    Order: explicit path, $PLNK_CONFIG, ./plnk.toml, ~/.plnk.toml. When none
    of the candidates exist the last one is returned so the error names it.
    """
    if explicit is not None:
        return Path(explicit)

    from_env = os.getenv(PLNK_ENV)
    if from_env:
        return Path(from_env)

    if LOCAL_CONFIG.is_file():
        return LOCAL_CONFIG
    return Path.home() / HOME_CONFIG_NAME


def load_config(path: Optional[Path] = None) -> PlnkConfig:
    config_path = resolve_config_path(path)
    logger.debug("Loading config from %s", config_path)

    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"failed to read {config_path}") from exc

    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"failed to parse {config_path}: {exc}") from exc

    try:
        return PlnkConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"failed to parse {config_path}: {exc}") from exc
