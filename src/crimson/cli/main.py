# src/crimson/cli/main.py
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..config import config, configure_logging
from ..lexer import tokenize
from ..runner import (
    SOURCE_EXTENSION, EXIT_ERROR, SourceFileError, has_source_extension, read_source,
    run_source, check_source,
)

console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def _load(file):
    """Read a source file, exiting with status 1 on a bad extension or read error."""
    if not has_source_extension(file):
        err_console.print(f"[bold red]Error:[/bold red] File must have {SOURCE_EXTENSION} extension")
        sys.exit(EXIT_ERROR)
    try:
        return read_source(file)
    except SourceFileError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(EXIT_ERROR)


@click.group()
@click.version_option(version=__version__, prog_name="Crimson")
def cli():
    """Crimson Programming Language - run .crm programs"""
    configure_logging()


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--debug', is_flag=True, help="Log lexer and executor activity to stderr.")
def run(file, debug):
    """Run a Crimson program"""
    if debug:
        config.enable_debug()
        config.locked = True
        configure_logging()

    source_code = _load(file)
    sys.exit(run_source(source_code, file))


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def check(file):
    """Check the structure of a Crimson file without running it"""
    source_code = _load(file)
    status = check_source(source_code, file)
    if status == 0:
        console.print("[bold green]Structure is valid[/bold green]")
    sys.exit(status)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def tokens(file):
    """Show tokens of a Crimson file"""
    source_code = _load(file)

    table = Table(title="Tokens")
    table.add_column("Kind", style="cyan")
    table.add_column("Text", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")

    for token in tokenize(source_code, file):
        table.add_row(token.kind, escape(token.text), str(token.line), str(token.column))

    console.print(table)


_MAIN_TEMPLATE = '''// {name}
#include <crimson>

void main() {{
    string greeting = "Hello from {name}";
    crym(greeting);

    int answer = 42;
    if (answer > 40) {{
        crym("The answer is big enough");
    }} else {{
        crym("The answer is too small");
    }}
}}
'''


@cli.command()
@click.argument('name', required=False)
def init(name):
    """Create a new Crimson project"""
    project_name = name or click.prompt("Project name", default="my-crimson-app")
    project_path = Path(project_name)
    if project_path.exists() and any(project_path.iterdir()):
        err_console.print(f"[bold red]Error:[/bold red] {project_name} already exists and is not empty")
        sys.exit(EXIT_ERROR)

    project_path.mkdir(parents=True, exist_ok=True)
    main_file = project_path / f"main{SOURCE_EXTENSION}"
    main_file.write_text(_MAIN_TEMPLATE.format(name=project_path.name), encoding="utf-8")

    console.print(f"[bold green]Project '{project_name}' created![/bold green]")
    console.print(f"cd {project_name}")
    console.print(f"crm run main{SOURCE_EXTENSION}")


if __name__ == "__main__":
    cli()
