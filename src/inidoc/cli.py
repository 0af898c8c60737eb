# -*- encoding: utf-8 -*-
# @File   : cli.py
# @Time   : 2024/11/03 16:47:09
# @Author : Kariko Lin

import logging
import warnings
from enum import Enum
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .errors import IniError
from .export import to_json, to_yaml
from .ini import Document, IniParser


class OutputFormat(str, Enum):
    INI = 'ini'
    JSON = 'json'
    YAML = 'yaml'


app = typer.Typer(
    name="inidoc",
    help="Parse an INI file and print what it contains.",
    add_completion=False,
)

err_console = Console(stderr=True, soft_wrap=True)


def _warn(msg: str) -> None:
    err_console.print(f"[bold yellow]Warning: {escape(msg)}[/bold yellow]")


def _fail(msg: str) -> NoReturn:
    err_console.print(f"[bold red]Error: {escape(msg)}[/bold red]")
    raise typer.Exit(1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"inidoc {__version__}")
        raise typer.Exit(0)


def _render(doc: Document, fmt: OutputFormat) -> str:
    if fmt is OutputFormat.JSON:
        return to_json(doc) + '\n'
    if fmt is OutputFormat.YAML:
        return to_yaml(doc)
    return doc.dumps(blank_lines=1)


@app.command()
def main(
    filename: Path = typer.Argument(..., help="The .ini file to parse."),
    section: Optional[str] = typer.Option(
        None, "--section", "-s", help="Only print this section."
    ),
    key: Optional[str] = typer.Option(
        None, "--key", "-k", help="Only print this key (needs --section)."
    ),
    list_sections: bool = typer.Option(
        False, "--list", "-l", help="Only print section names."
    ),
    fmt: OutputFormat = typer.Option(
        OutputFormat.INI, "--format", "-f", help="Output format."
    ),
    encoding: Optional[str] = typer.Option(
        None, "--encoding", "-e", help="File encoding (guessed if omitted)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logs."),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.",
        callback=_version_callback, is_eager=True
    ),
) -> None:
    if verbose:
        logging.getLogger('inidoc').setLevel(logging.DEBUG)
    if key is not None and section is None:
        raise typer.BadParameter("--key needs --section.", param_hint="--key")

    doc, err = None, None
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always')
        try:
            doc = IniParser(filename, encoding).read()
        except IniError as e:
            err = str(e)
    for w in caught:
        _warn(str(w.message))
    if err is not None:
        _fail(err)

    if list_sections:
        for name in doc:
            typer.echo(name)
        return
    if section is not None:
        data = doc.section(section)
        if key is None:
            typer.echo(_render(Document({section: data}), fmt), nl=False)
            return
        if key not in data:
            _fail(f'"{key}" not found in [{section}].')
        typer.echo(data[key])
        return
    typer.echo(_render(doc, fmt), nl=False)


if __name__ == '__main__':
    app()
