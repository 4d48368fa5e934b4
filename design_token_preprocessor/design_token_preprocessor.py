import json
import sys

import click
import structlog

from .config import PreprocessorConfig, SchemaType
from .errors import PreprocessorError
from .logging_config import configure_logging
from .pipeline import apply_preprocessors
from .structural import load_schemas, validate_against_schema

log = structlog.get_logger(__name__)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--schema-type",
    "-t",
    default=None,
    type=click.Choice([t.value for t in SchemaType]),
    help="Document shape (overrides config file)",
)
@click.option("--skip-references", is_flag=True, default=False, help="Do not resolve aliases, $ref or $extends")
@click.option("--skip-types", is_flag=True, default=False, help="Do not stamp inherited $type onto tokens")
@click.option(
    "--schema",
    default=None,
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="JSON Schema to validate the preprocessed document against",
)
@click.option(
    "--schema-dir",
    default=None,
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Directory of schemas referenced by --schema",
)
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.option("--log-json", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", default=None, required=False, type=click.Path(resolve_path=True))
def design_token_preprocessor(
    config, schema_type, skip_references, skip_types, schema, schema_dir, verbose, log_json, path, output
):
    configure_logging(verbose=verbose, log_json=log_json)

    with open(path, encoding="utf-8") as f:
        document = json.load(f)

    if config is not None:
        with open(config, encoding="utf-8") as f:
            config = PreprocessorConfig.from_dict(json.load(f))
    else:
        config = PreprocessorConfig()

    # CLI flags override the config file
    if schema_type is not None:
        config.schema_type = SchemaType(schema_type)
    if skip_references:
        config.resolve_references = False
    if skip_types:
        config.inherit_types = False

    try:
        result = apply_preprocessors(document, config)
    except PreprocessorError as e:
        log.debug("preprocessing failed", path=path, error=str(e))
        raise click.ClickException(str(e)) from e

    if schema is not None:
        with open(schema, encoding="utf-8") as f:
            main_schema = json.load(f)
        extra_schemas = load_schemas(schema_dir) if schema_dir else []
        validation = validate_against_schema(result, main_schema, extra_schemas)
        if not validation.valid:
            raise click.ClickException("Schema validation failed:\n" + "\n".join(validation.errors))

    indent = config.output.indent if config.output.indent > 0 else None
    out = json.dumps(result, indent=indent, sort_keys=config.output.sort_keys, ensure_ascii=False)

    if output is None:
        click.echo(out)
    else:
        with open(output, "w", encoding="utf-8") as f:
            f.write(out + "\n")
        log.info("wrote preprocessed document", output=output)


if __name__ == "__main__":
    sys.exit(design_token_preprocessor())
