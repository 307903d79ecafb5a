"""
strap — CLI entrypoint.

Usage:
    strap Button
    strap --class forms/TextInput
    strap --init
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn

import click

from strap import __version__
from strap.core.errors import StrapError
from strap.core.observability.logging_config import setup_cli_logging


def _fail(message: str, label: str = "Error", as_json: bool = False) -> NoReturn:
    """Report a fatal error and exit with status 1."""
    if as_json:
        click.echo(json.dumps({"error": message}, indent=2))
    else:
        color = "yellow" if label == "Warning" else "red"
        click.secho(f"{label}", fg=color, err=True, nl=False)
        click.echo(f": {message}", err=True)
    sys.exit(1)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="strap")
@click.argument("name", required=False)
@click.option("--init", is_flag=True, help="Generate config file.")
@click.option("--func", "-f", is_flag=True, help="Generate functional template.")
@click.option("--class", "-c", "class_", is_flag=True, help="Generate class template.")
@click.option("--verbose", "-v", is_flag=True, help="Print verbose output.")
@click.option("--typescript", "-t", is_flag=True, help="Generate typescript files.")
@click.option("--force", is_flag=True, help="Overwrite existing component.")
@click.option(
    "--template-ext",
    is_flag=True,
    help="Take file extensions from directory template file names.",
)
@click.option("--dry-run", is_flag=True, help="Show the files that would be written.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
def cli(
    name: str | None,
    init: bool,
    func: bool,
    class_: bool,
    verbose: bool,
    typescript: bool,
    force: bool,
    template_ext: bool,
    dry_run: bool,
    as_json: bool,
    debug: bool,
) -> None:
    """Bootstrap react component template.

    Examples:

        strap Button

        strap --class --typescript forms/TextInput
    """
    setup_cli_logging(debug=debug, verbose=verbose)

    from strap.adapters.filesystem import LocalFilesystem

    fs = LocalFilesystem(Path.cwd())

    if init:
        from strap.core.use_cases.init_config import write_default_config

        try:
            path = write_default_config(fs)
        except StrapError as e:
            _fail(str(e), e.label, as_json)
        if as_json:
            click.echo(json.dumps({"config": path}, indent=2))
        else:
            click.echo(f'🚀 Generated "{path}"')
        return

    if not name:
        raise click.UsageError("Missing argument 'NAME'.")
    if func and class_:
        raise click.UsageError("--func and --class are mutually exclusive.")

    from strap.core.config.loader import load_config, resolve_config
    from strap.core.use_cases.generate import generate_component

    try:
        config = resolve_config(
            load_config(fs),
            func=func,
            cls=class_,
            verbose=verbose,
            typescript=typescript,
            force=force,
        )
        result = generate_component(
            fs,
            name,
            config,
            use_template_extension=template_ext,
            dry_run=dry_run,
        )
    except StrapError as e:
        _fail(str(e), e.label, as_json)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if config.verbose:
        click.echo(f'Base Path: "{config.base_path or "."}"')
        if result.template.found:
            click.echo(f'Template Path: "{result.template.path}"')
        else:
            click.echo("Templates: Not found (Using default templates)")
        click.echo(f"Component Type: {result.request.kind.label}")
        click.echo()

    if dry_run:
        click.secho(f"[dry-run] {result.request.name}", fg="cyan", bold=True)
        for item in result.plan:
            click.echo(f"   • {result.component_dir / item.path}")
        return

    click.echo("🚀 Generated ", nl=False)
    click.secho(result.request.name, fg="cyan", nl=False)
    click.echo(" in ", nl=False)
    click.secho(f'"{result.display_path}"', fg="green")


if __name__ == "__main__":
    cli()
