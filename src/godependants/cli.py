import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from pydantic import ValidationError

from godependants._version import __version__
from godependants.config import load_config
from godependants.core import analyze_module, resolve_dependants
from godependants.package_loader import ModuleLoadError, PackageLoadErrors
from godependants.reporting import make_reporter


@click.command(context_settings={"help_option_names": ["-h", "-help", "--help"]})
@click.argument("packages", nargs=-1, type=str)
@click.option(
    "-dir", "--dir", "directory",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory to run godependants in (default: working directory)",
)
@click.option(
    "-direct", "--direct", is_flag=True,
    help="Only list direct dependants (no transitive dependants)",
)
@click.option("-quiet", "--quiet", is_flag=True, help="Disable stderr output")
@click.option("--verbose", "-v", is_flag=True, help="Verbose diagnostics")
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with a [tool.godependants] table",
)
@click.version_option(__version__)
def cli(
    packages: Tuple[str, ...],
    directory: Optional[str],
    direct: bool,
    quiet: bool,
    verbose: bool,
    config_path: Optional[Path],
) -> None:
    """List the packages of a Go module that depend on PACKAGES.

    PACKAGES may be import paths or paths relative to the module root
    (./sub/pkg). Without arguments the package in the directory is used.
    """
    try:
        config = load_config(config_path)
    except ValidationError as e:
        raise click.UsageError(f"invalid config {config_path}: {e}")

    log = make_reporter(quiet=quiet or config.quiet, verbose=verbose)

    try:
        analysis = analyze_module(directory, config, log)
    except ModuleLoadError as e:
        click.echo(f"godependants: {e}", err=True)
        sys.exit(1)
    except PackageLoadErrors as e:
        for err in e.errors:
            click.echo(str(err), err=True)
        sys.exit(1)

    for name in resolve_dependants(analysis, packages, direct or config.direct, log):
        click.echo(name)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
