"""CLI: pandacord send, pandacord react"""

import json

import click
from rich.console import Console

console = Console()


def _get_client():
    from pandacord.cli.main import _get_client
    return _get_client()


def _run(coro):
    from pandacord.cli.main import _run
    return _run(coro)


@click.command("send")
@click.argument("channel_id")
@click.argument("content")
@click.option("--json-output", "--json", is_flag=True)
def send_cmd(channel_id: str, content: str, json_output: bool):
    """Post a message to a channel."""

    async def _send():
        async with _get_client() as http:
            message = await http.send_message(channel_id, content)
        if json_output:
            click.echo(json.dumps(message.model_dump(mode="json")))
        else:
            console.print(f"[green]Sent message {message.id}[/green]")

    _run(_send())


@click.command("react")
@click.argument("channel_id")
@click.argument("message_id")
@click.argument("emoji")
def react_cmd(channel_id: str, message_id: str, emoji: str):
    """React to a message with a unicode emoji or name:id."""

    async def _react():
        async with _get_client() as http:
            await http.add_reaction(channel_id, message_id, emoji)
        console.print(f"[green]Reacted to {message_id} with {emoji}[/green]")

    _run(_react())
