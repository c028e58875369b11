import json
from pathlib import Path

import click

from .log_config import get_logger, setup_logging
from .pipeline import CodeGeneratorConfig, OutputMode, PipelineGenerator, StrEnumError

logger = get_logger(__name__)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--serde", is_flag=True, default=False, help="Emit serialize/deserialize hooks for dataclasses_json")
@click.option("--reflect", is_flag=True, default=False, help="Emit variant enumeration and reflection helpers")
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each pipeline phase")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def str_enum(config, serde, reflect, force, verbose, path, output):
    """Generate a Python module from the enum declarations in PATH."""
    setup_logging("DEBUG" if verbose else None)

    with open(path, encoding="utf-8") as f:
        declaration = f.read()

    if config is not None:
        with open(config) as f:
            config = json.load(f)
            config = CodeGeneratorConfig.from_dict(config)
    else:
        config = CodeGeneratorConfig()

    # CLI flags switch capabilities on, never off
    if serde:
        config.serde = True
    if reflect:
        config.reflect = True
    if force:
        config.output.mode = OutputMode.FORCE

    codegen = PipelineGenerator(declaration, config)

    try:
        codegen.write(Path(output))
    except (StrEnumError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e

    logger.info("Generated %s from %s", output, path)
