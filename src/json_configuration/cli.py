"""Command-line interface for JSON Configuration."""

import logging
import sys
import click
from pathlib import Path
from . import __version__
from .error_handler import ErrorHandler
from .json_configuration import JsonConfiguration
from .section import MemorySection
from .types import ConfigurationError, JSONSyntaxError


def _fail(error: ConfigurationError) -> None:
    response = ErrorHandler().handle_configuration_error(error)
    click.echo(f"❌ Error: {error}", err=True)
    click.echo(f"   • {response.suggested_action}", err=True)
    sys.exit(1)


def _load(input_file: Path) -> JsonConfiguration:
    try:
        return JsonConfiguration.load_configuration(input_file)
    except ConfigurationError as e:
        _fail(e)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(verbose: bool):
    """JSON Configuration - Inspect and edit JSON configuration files."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def show(input_file: Path):
    """Print a configuration file as it would be saved."""
    config = _load(input_file)
    click.echo(config.save_to_string(), nl=False)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('path')
def get(input_file: Path, path: str):
    """Print the value stored at PATH as JSON."""
    config = _load(input_file)
    if not config.contains(path):
        click.echo(f"❌ No value at {path}", err=True)
        sys.exit(1)

    value = config.get(path)
    if isinstance(value, MemorySection):
        value = value.get_values(False)
    click.echo(config.parser.to_text(config.encoder.object_as_json_value(value)), nl=False)


@main.command(name='set')
@click.argument('input_file', type=click.Path(dir_okay=False, path_type=Path))
@click.argument('path')
@click.argument('value')
def set_value(input_file: Path, path: str, value: str):
    """Set PATH to VALUE, parsed as JSON or kept as a plain string."""
    config = _load(input_file) if input_file.exists() else JsonConfiguration()

    try:
        parsed = config.decoder.json_value_as_object(config.parser.parse(value))
    except JSONSyntaxError:
        parsed = value

    # objects become sections, null removes the key
    config.set(path, parsed)

    try:
        config.save(input_file)
    except ConfigurationError as e:
        _fail(e)
    click.echo(f"✅ Set {path} in {input_file}")


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--deep', '-d', is_flag=True, help='Include keys of nested sections')
def keys(input_file: Path, deep: bool):
    """List the keys of a configuration file."""
    config = _load(input_file)
    for key in config.get_keys(deep):
        click.echo(key)


if __name__ == '__main__':
    main()
