"""
pandacord CLI — `pandacord` command.

Commands:
  pandacord auth set-token          Store the bot token
  pandacord decode <frames.jsonl>   Replay recorded gateway frames through the decoder
  pandacord send <channel> <text>   Post a message
  pandacord react <channel> <message> <emoji>
"""

import asyncio
import json
import logging
import os
from pathlib import Path

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install pandacord[cli]")

from pandacord.transport.http import DEFAULT_BASE_URL, HttpClient

console = Console()
CONFIG_FILE = Path.home() / ".pandacord" / "config.json"
TOKEN_ENV = "PANDACORD_TOKEN"


def _load_config() -> dict:
    """Stored settings; a missing or malformed file counts as empty."""
    if not CONFIG_FILE.exists():
        return {}
    try:
        cfg = json.loads(CONFIG_FILE.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        return {}
    return cfg if isinstance(cfg, dict) else {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2, sort_keys=True), encoding="utf-8")
    # Holds a bot token.
    CONFIG_FILE.chmod(0o600)


def _get_client() -> HttpClient:
    cfg = _load_config()
    token = os.environ.get(TOKEN_ENV) or cfg.get("token")
    if not token:
        console.print(f"[red]No bot token. Run `pandacord auth set-token` or set {TOKEN_ENV}.[/red]")
        raise SystemExit(1)
    return HttpClient(token=token, base_url=cfg.get("base_url", DEFAULT_BASE_URL))


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Log decoder and HTTP activity")
def main(verbose: bool):
    """pandacord CLI — gateway decoding and message tools."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands from separate modules
from pandacord.cli.auth import auth
from pandacord.cli.decode import decode_cmd
from pandacord.cli.messages import react_cmd, send_cmd

main.add_command(auth)
main.add_command(decode_cmd)
main.add_command(send_cmd)
main.add_command(react_cmd)


if __name__ == "__main__":
    main()
