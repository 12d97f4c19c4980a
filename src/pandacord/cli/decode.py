"""CLI: pandacord decode — replay a recorded gateway log (one JSON frame per line)."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pandacord.errors import PandaError, UnrecognizedDispatchError
from pandacord.gateway.events import Dispatch, decode_frame

console = Console()


def _describe(event) -> str:
    if isinstance(event, Dispatch):
        return event.event_type.value
    return type(event).__name__


@click.command("decode")
@click.argument("frames", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--strict", is_flag=True, help="Stop at the first frame that fails to decode")
@click.option("--ignore-unknown", is_flag=True, help="Do not report unrecognized dispatch types")
def decode_cmd(frames: Path, strict: bool, ignore_unknown: bool):
    """Decode each frame in FRAMES and print what it resolved to."""
    table = Table(title=str(frames))
    table.add_column("Line", justify="right")
    table.add_column("Seq", justify="right")
    table.add_column("Event")
    failures = 0

    with frames.open("rb") as fh:
        for lineno, line in enumerate(fh, start=1):
            if not line.strip():
                continue
            try:
                event = decode_frame(line)
            except UnrecognizedDispatchError as e:
                if ignore_unknown:
                    continue
                failures += 1
                table.add_row(str(lineno), "", f"[yellow]unknown dispatch {escape(e.event_type)}[/yellow]")
                if strict:
                    break
            except PandaError as e:
                failures += 1
                table.add_row(str(lineno), "", f"[red]{e.code}: {escape(str(e))}[/red]")
                if strict:
                    break
            else:
                seq = event.sequence if isinstance(event, Dispatch) else None
                table.add_row(str(lineno), "" if seq is None else str(seq), _describe(event))

    console.print(table)
    if failures:
        console.print(f"[red]{failures} frame(s) failed to decode[/red]")
        raise SystemExit(1)
