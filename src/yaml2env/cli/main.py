"""yaml2env CLI."""

import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from yaml2env import __version__
from yaml2env.errors import Yaml2EnvError
from yaml2env.models.configs import ConversionConfig

SUCCESS_MESSAGE = "Env file created successfully."


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING)


def _convert(config: ConversionConfig) -> None:
    """Run the pipeline and turn conversion errors into a single CLI error."""
    from yaml2env.pipeline import run_pipeline

    try:
        run_pipeline(config)
    except Yaml2EnvError as e:
        raise click.ClickException(e.message) from e
    print(SUCCESS_MESSAGE)


@click.group()
@click.version_option(__version__, prog_name="yaml2env")
def cli():
    """The yaml2env CLI.

    Use this to merge line-oriented yaml key-value files into a single env file.
    """
    pass


@cli.command()
@click.option(
    "-c",
    "--config",
    "manifest_path",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="The path to the input file with the paths to the yaml files.",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="The path to the output env file.",
)
@click.option(
    "--extension",
    type=str,
    default=".yaml",
    show_default=True,
    help="The extension every path in the input file must have.",
)
@click.option(
    "--sort-keys",
    is_flag=True,
    help="Write the env entries sorted by key.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
def convert(
    manifest_path: Path,
    output_path: Path,
    extension: str = ".yaml",
    sort_keys: bool = False,
    verbose: bool = False,
):
    """Write the values of the yaml files listed in the input file to an env file."""
    _configure_logging(verbose)
    try:
        config = ConversionConfig(
            manifest_path=manifest_path,
            output_path=output_path,
            source_extension=extension,
            sort_keys=sort_keys,
        )
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="--extension") from e
    _convert(config)


@cli.command()
@click.option(
    "--settings",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="The path to the yaml settings file describing the conversion.",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
    help="Override the output path listed in the settings file.",
)
@click.option(
    "--sort-keys",
    is_flag=True,
    help="Override the settings file and sort the env entries by key.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
def run(
    settings: Path,
    output_path: Path | None = None,
    sort_keys: bool = False,
    verbose: bool = False,
):
    """Run a conversion described by a yaml settings file."""
    _configure_logging(verbose)
    try:
        config = ConversionConfig.from_manifest(settings)
    except (OSError, ValueError, yaml.YAMLError) as e:
        msg = f"Could not load settings file {settings}: {e}"
        raise click.ClickException(msg) from e

    if output_path:
        config.output_path = output_path

    if sort_keys:
        config.sort_keys = True

    _convert(config)


if __name__ == "__main__":
    cli()
