"""CLI entry point for jdcloud-spec."""

from pathlib import Path

import click

from jdcloud_spec.errors import SpecError
from jdcloud_spec.pipeline import TransformOptions, run_pipeline
from jdcloud_spec.spec.loader import load_spec
from jdcloud_spec.spec.models import Swagger
from jdcloud_spec.spec.scanner import DEFAULT_SCANNER, scan_application
from jdcloud_spec.transform.partitioner import SAVE_FILE_TAG
from jdcloud_spec.writer import write_documents


def _split_and_write(swagger: Swagger, output: Path, options: TransformOptions) -> None:
    """Transform a loaded spec and write its service and model files."""
    documents = run_pipeline(swagger, options)
    click.echo(f"Split into {len(documents.services)} services and {len(documents.models)} models.")
    if documents.unresolved:
        click.echo(f"{len(documents.unresolved)} response references left unresolved.", err=True)

    written = write_documents(documents, output, pretty=options.pretty)
    for path in written:
        click.echo(f"  Created {path}")
    click.echo(f"Generated {len(written)} files in {output}")


def _common_options(func):
    func = click.option("--file-tag", default=SAVE_FILE_TAG, show_default=True, help="Path extension naming the service file.")(func)
    func = click.option("--compact", is_flag=True, help="Write flow-style YAML instead of block style.")(func)
    func = click.option("-o", "--output", default=".", type=click.Path(file_okay=False, path_type=Path), help="Root directory for service/ and model/.")(func)
    func = click.option("-j", "--XJdcloudModule", "module", default="", envvar="JDCLOUD_MODULE", help="Value for x-jdcloud-module on every model.")(func)
    return func


@click.group()
def main():
    """jdcloud-spec: rewrite go-swagger specs into split vendor documents."""
    pass


@main.command()
@click.option("-b", "--base-path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path), help="Go source tree to scan.")
@click.option("-t", "--tags", "build_tags", default="", help="Build tags passed to the scanner.")
@click.option("-m", "--scan-models", is_flag=True, help="Include models annotated with 'swagger:model'.")
@click.option("-i", "--input", "input_path", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Seed spec file.")
@click.option("--scanner", default=DEFAULT_SCANNER, show_default=True, help="go-swagger executable.")
@_common_options
def generate(base_path: Path, build_tags: str, scan_models: bool, input_path: Path | None, scanner: str,
             module: str, output: Path, compact: bool, file_tag: str):
    """Scan Go sources and write split service and model specs."""
    options = TransformOptions(module=module, file_tag=file_tag, pretty=not compact)
    try:
        if input_path is not None:
            click.echo(f"Loading seed spec {input_path}...")
            load_spec(input_path)

        click.echo(f"Scanning {base_path}...")
        swagger = scan_application(base_path, input_path, build_tags, scan_models, scanner)
        _split_and_write(swagger, output, options)
    except SpecError as e:
        raise click.ClickException(str(e)) from e


@main.command()
@click.argument("spec_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_common_options
def split(spec_path: Path, module: str, output: Path, compact: bool, file_tag: str):
    """Split an already generated spec into service and model specs."""
    options = TransformOptions(module=module, file_tag=file_tag, pretty=not compact)
    try:
        click.echo(f"Loading {spec_path}...")
        swagger = load_spec(spec_path)
        click.echo(f"Found {len(swagger.paths or {})} paths and {len(swagger.definitions or {})} definitions.")
        _split_and_write(swagger, output, options)
    except SpecError as e:
        raise click.ClickException(str(e)) from e
