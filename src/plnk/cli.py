# src/plnk/cli.py
import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from plnk.blocker.config import load_config
from plnk.blocker.errors import PlnkError
from plnk.blocker.hosts_blocker import block_domains, unblock_all
from plnk.blocker.hosts_file import HostsFile
from plnk.blocker.privilege import check_privilege

# PLNK_CONFIG and PLNK_HOSTS_FILE may come from a local .env
load_dotenv()

UNBLOCK = "u"
HELP = "h"

USAGE = """usage: plnk [u]
  u  unblock
  h  usage"""

cli = typer.Typer(add_completion=False)


@cli.command()
def main(
    action: Optional[str] = typer.Argument(None, help="'u' to unblock, 'h' for usage, nothing to block."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to the TOML config file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
):
    """Block the configured domains through the hosts file, or restore it."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if action == HELP:
        typer.echo(USAGE)
        raise typer.Exit()
    if action not in (None, UNBLOCK):
        typer.echo(f"unrecognized argument: {action}", err=True)
        typer.echo(USAGE, err=True)
        raise typer.Exit(code=2)

    hosts = HostsFile.default()
    try:
        if action == UNBLOCK:
            check_privilege(hosts)
            unblock_all(hosts)
            typer.echo("urls unblocked")
        else:
            cfg = load_config(config)
            check_privilege(hosts)
            block_domains(hosts, cfg.blocked_domains)
            typer.echo("urls blocked")
    except PlnkError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    cli()

# to block using the configured domains:
# sudo plnk
# and to put the hosts file back:
# sudo plnk u
