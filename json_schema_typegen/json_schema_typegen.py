import json
import logging
from pathlib import Path

import click

from .codegen import CSharpCodeGenerator
from .config import CSharpGeneratorSettings, OutputMode
from .exceptions import CodeGenerationError
from .writer import AtomicWriter


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Name of the root type (defaults to the schema title)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--namespace", default=None, type=str, help="Namespace of the generated types")
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log resolution details")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def json_schema_typegen(name, config, namespace, force, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        with open(path) as f:
            schema = json.load(f)

        if config is not None:
            with open(config) as f:
                settings = CSharpGeneratorSettings.from_dict(json.load(f))
        else:
            settings = CSharpGeneratorSettings()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    # CLI flags override the config file
    if namespace is not None:
        settings.namespace = namespace
    if force:
        settings.output.mode = OutputMode.FORCE

    try:
        out = CSharpCodeGenerator(schema, settings).generate_file(name)

        writer = AtomicWriter()
        output_path = Path(output)
        validate = settings.output.validate_before_write
        if settings.output.mode == OutputMode.FORCE:
            writer.write(output_path, out, validate)
        else:
            writer.write_if_not_exists(output_path, out, validate)
    except (CodeGenerationError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e
