import json
import logging
from pathlib import Path

import click

from .pipeline import CodeGeneratorConfig, LootTableError, OutputMode, PipelineGenerator

DEFAULT_SOURCE_DIR = "src/main/resources/loot/v1_16/"
DEFAULT_OUTPUT = "loot_tables_output.txt"
PROGRAM_NAME = "loot_table_to_code"

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def reconstruct_command_line(command: click.Command) -> str:
    """Rebuild a readable command line for the generation comment.

    Arguments come first, then the options that differ from their defaults.
    Existing paths are shortened to their last component. Outside a click
    invocation only the program name is returned.
    """
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return PROGRAM_NAME

    parts = [PROGRAM_NAME]
    options = []
    for param in command.params:
        value = ctx.params.get(param.name)
        if not value:
            continue
        if isinstance(param, click.Option):
            if value == param.default:
                continue
            if param.is_flag:
                options.append(param.opts[0])
            else:
                options.extend([param.opts[0], _display_value(value)])
        else:
            parts.append(_display_value(value))

    return " ".join(parts + options)


def _display_value(value) -> str:
    path = Path(str(value))
    return path.name if path.exists() else str(value)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--class-name", "-n", default=None, type=str, help="Wrap the tables in a Java class with this name")
@click.option("--package", "-p", default=None, type=str, help="Java package declaration for the wrapping class")
@click.option(
    "--generation-comment",
    is_flag=True,
    default=False,
    help="Add a comment with the generating command line at the top of the file",
)
@click.option("--no-overwrite", is_flag=True, default=False, help="Fail if the output file already exists")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", default=DEFAULT_SOURCE_DIR, type=click.Path(exists=True, file_okay=False, resolve_path=True))
@click.argument("output", default=DEFAULT_OUTPUT, type=click.Path(dir_okay=False, resolve_path=True))
def loot_table_to_code(config, class_name, package, generation_comment, no_overwrite, verbose, path, output):
    setup_logging(verbose)

    if config is not None:
        with open(config) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if class_name is not None:
        config.java_class_name = class_name
    if package is not None:
        config.java_package = package
    if generation_comment:
        config.add_generation_comment = True
    if no_overwrite:
        config.output.mode = OutputMode.ERROR_IF_EXISTS

    codegen = PipelineGenerator(path, config)
    try:
        codegen.write(output)
    except LootTableError as e:
        logger.debug("Generation failed", exc_info=True)
        raise click.ClickException(str(e)) from e
