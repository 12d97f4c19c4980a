"""CLI: pandacord auth set-token|status|clear"""

from typing import Optional

import click
from rich.console import Console

console = Console()


def _load_config() -> dict:
    from pandacord.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from pandacord.cli.main import _save_config
    _save_config(cfg)


@click.group()
def auth():
    """Bot token management."""


@auth.command("set-token")
@click.option("--base-url", default=None, help="REST API base URL")
def auth_set_token(base_url: Optional[str]):
    """Store a bot token."""
    cfg = _load_config()
    token = click.prompt("Bot token", hide_input=True)
    cfg["token"] = token
    if base_url:
        cfg["base_url"] = base_url
    _save_config(cfg)
    console.print("[green]Token saved to ~/.pandacord/config.json[/green]")


@auth.command("status")
def auth_status():
    """Show whether a token is stored."""
    cfg = _load_config()
    if cfg.get("token"):
        console.print(f"[green]Token stored[/green] (base URL: {cfg.get('base_url', 'default')})")
    else:
        console.print("[yellow]No token stored. Run `pandacord auth set-token`.[/yellow]")


@auth.command("clear")
def auth_clear():
    """Forget the stored token. The base URL is kept."""
    cfg = _load_config()
    cfg.pop("token", None)
    _save_config(cfg)
    console.print("[green]Token cleared.[/green]")
