"""kover CLI.

Usage:
    python -m kover [--json] [--verbose] SUBCOMMAND < scene.txt

Query subcommands read a scene on stdin and print one result to stdout.
Errors go to stderr (or into the JSON envelope with --json) and exit 1.
"""
from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from typing import NoReturn

import click
import typer
from typer.core import TyperGroup

from kover.config import Settings, get_settings
from kover.errors import SceneError
from kover.models.scene import Scene
from kover.parser.reader import read_scene
from kover.queries.scene import (
    bounding_box,
    describe as describe_scene,
    format_bounding_box,
    scene_to_dict,
    summarize as summarize_scene,
)


class SubcommandGroup(TyperGroup):
    """Top-level group taking exactly one subcommand.

    Unknown subcommands and surplus arguments exit 1 with an `error: ...`
    line instead of click's usage message.
    """

    def resolve_command(self, ctx: click.Context, args: list[str]):
        name = args[0]
        if self.get_command(ctx, name) is None and not name.startswith("-"):
            typer.echo(f"error: subcommand '{name}' is not recognized", err=True)
            ctx.exit(1)
        if any(not arg.startswith("-") for arg in args[1:]):
            typer.echo("error: subcommand is mandatory", err=True)
            ctx.exit(1)
        return super().resolve_command(ctx, args)


app = typer.Typer(
    name="kover",
    cls=SubcommandGroup,
    help="Handles positioning of communication antennas by reading a scene on stdin.",
    add_completion=False,
)

HELP_TEXT = """\
Usage: kover SUBCOMMAND
Handles positioning of communication antennas by reading a scene on stdin.

SUBCOMMAND is mandatory and must take one of the following values:
  bounding-box: returns a bounding box of the loaded scene
  describe: describes the loaded scene in details
  help: shows this message
  summarize: summarizes the loaded scene

A scene is a text stream that must satisfy the following syntax:

  1. The first line must be exactly 'begin scene'
  2. The last line must be exactly 'end scene'
  3. Any line between the first and last line must either be a building line
     or an antenna line
  4. A building line has the form 'building ID X Y W H' (with any number of
     blank characters before or after), where
       ID is the building identifier
       X is the x-coordinate of the building
       Y is the y-coordinate of the building
       W is the half-width of the building
       H is the half-height of the building
  5. An antenna line has the form 'antenna ID X Y R' (with any number of
     blank characters before or after), where
       ID is the antenna identifier
       X is the x-coordinate of the antenna
       Y is the y-coordinate of the antenna
       R is the radius scope of the antenna"""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(ctx: typer.Context, error: SceneError) -> NoReturn:
    """Report a scene error and exit 1."""
    if ctx.obj["json"]:
        payload: dict = {"ok": False, "error": error.message}
        if error.line_num is not None:
            payload["line"] = error.line_num
        _output(payload)
    else:
        typer.echo(f"error: {error}", err=True)
    raise typer.Exit(1)


def _load_scene(ctx: typer.Context) -> Scene:
    """Read the scene from stdin, exiting on the first error."""
    settings: Settings = ctx.obj["settings"]
    try:
        return read_scene(sys.stdin, max_line_length=settings.max_line_length)
    except SceneError as e:
        _fail(ctx, e)


def _run_query(
    ctx: typer.Context,
    render: Callable[[Scene], str],
    to_json: Callable[[Scene], dict],
) -> None:
    scene = _load_scene(ctx)
    if ctx.obj["json"]:
        _output({"ok": True, **to_json(scene)})
    else:
        typer.echo(render(scene))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Print results as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
):
    """Handles positioning of communication antennas by reading a scene on stdin."""
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        typer.echo("error: subcommand is mandatory", err=True)
        raise typer.Exit(1)
    ctx.obj = {"json": json_output, "settings": settings}


@app.command("bounding-box")
def bounding_box_cmd(ctx: typer.Context):
    """Returns a bounding box of the loaded scene."""
    def to_json(scene: Scene) -> dict:
        box = bounding_box(scene)
        return {"bounding_box": box.model_dump() if box is not None else None}

    _run_query(ctx, format_bounding_box, to_json)


@app.command()
def describe(ctx: typer.Context):
    """Describes the loaded scene in details."""
    _run_query(ctx, describe_scene, scene_to_dict)


@app.command()
def summarize(ctx: typer.Context):
    """Summarizes the loaded scene."""
    _run_query(ctx, summarize_scene, lambda scene: {"summary": summarize_scene(scene)})


@app.command("help")
def help_cmd():
    """Shows the usage and scene syntax."""
    typer.echo(HELP_TEXT)


@app.command()
def version() -> None:
    """Show version."""
    from kover import __version__

    typer.echo(f"kover v{__version__}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app()
