from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from .version import __version__
from .convert.reflow import DOCUMENTATION, MODES
from .utils.logging import setup_logger
from .pipeline import RunConfig, run


app = typer.Typer(add_completion=False, help="Reflow the comment block at a line to a maximum width.")


def _version_callback(value: bool):
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def _check_mode(value: str) -> str:
    if value not in MODES:
        raise typer.BadParameter(f"expected one of: {', '.join(MODES)}")
    return value


@app.command()
def main(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Source file to edit"),
    line: int = typer.Option(..., "-l", "--line", help="Line of the cursor (1-based)"),
    end_line: Optional[int] = typer.Option(None, "-e", "--end-line", help="Last selected line (1-based); selects a range"),
    width: int = typer.Option(80, "-w", "--width", envvar="COMMENTFLOW_WIDTH", help="Maximum line width"),
    language: Optional[str] = typer.Option(None, "--language", help="Language id; default from the file extension"),
    mode: str = typer.Option(DOCUMENTATION, "--mode", envvar="COMMENTFLOW_MODE", callback=_check_mode, help="Tag handling: documentation or generic"),
    wrap_lists: bool = typer.Option(False, "--wrap-lists/--no-wrap-lists", help="Word-wrap overlong list items"),
    in_place: bool = typer.Option(False, "-i", "--in-place", help="Rewrite FILE instead of printing"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write the result to this path"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit"),
):
    setup_logger(log_level)
    cfg = RunConfig(
        file=file,
        line=line,
        end_line=end_line,
        output=output,
        in_place=in_place,
        language=language,
        width=width,
        mode=mode,
        wrap_lists=wrap_lists,
        log_level=log_level,
    )
    run(cfg)


def entrypoint():
    # settings such as COMMENTFLOW_WIDTH may come from a local .env
    load_dotenv()
    app()

if __name__ == "__main__":
    entrypoint()
