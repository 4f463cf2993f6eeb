"""Build command for Lambda Builder."""

from pathlib import Path

import click

from ...core.constants import PORT_UNSET
from ...core.exceptions import LambdaBuilderError
from ...core.pipeline import run_build
from ...models.config import InvocationOptions, generate_identifier
from ..helpers import report_build_error


@click.command()
@click.option('--working-directory', '-w', default='.',
              type=click.Path(exists=True, file_okay=False, path_type=Path),
              help='Directory containing the application to build')
@click.option('--identifier', default=None, help='Unique build identifier used to name the build container')
@click.option('--builder', default=None, help='Builder to use instead of detecting one')
@click.option('--build-image', default=None, help='Image used to run the build script')
@click.option('--run-image', default=None, help='Base image for the generated run image')
@click.option('--generate-image', is_flag=True, help='Build a run image from the build output')
@click.option('--handler', default='', help='Handler to use instead of detecting one')
@click.option('--build-env', multiple=True, help='KEY=VALUE environment variable for the build container')
@click.option('--image-env', multiple=True, help='KEY=VALUE environment variable for the run image')
@click.option('--label', 'labels', multiple=True, help='KEY=VALUE label for the run image')
@click.option('--tag', default='', help='Tag for the run image (default: lambda-builder/<app>:latest)')
@click.option('--port', default=PORT_UNSET, type=int, show_default=True,
              help='Port the run image listens on (-1 to leave unset)')
@click.option('--quiet', is_flag=True, help='Do not stream build container output')
@click.option('--write-procfile', is_flag=True, help='Write a Procfile from the detected handler')
def build(working_directory, identifier, builder, build_image, run_image, generate_image,
          handler, build_env, image_env, labels, tag, port, quiet, write_procfile):
    """Build a lambda function archive and optionally a run image"""
    options = InvocationOptions(
        working_directory=working_directory.resolve(),
        identifier=identifier or generate_identifier(),
        builder=builder,
        build_image=build_image,
        run_image=run_image,
        generate_run_image=generate_image,
        handler=handler,
        build_env=list(build_env),
        image_env=list(image_env),
        image_labels=list(labels),
        image_tag=tag,
        port=port,
        run_quiet=quiet,
        write_procfile=write_procfile,
    )

    try:
        result = run_build(options)
    except LambdaBuilderError as e:
        report_build_error(e)

    click.echo(f"=====> Build complete: {result.archive_path}")
    if result.handler:
        click.echo(f"       Handler: {result.handler}")
    if result.image_tag:
        click.echo(f"       Image: {result.image_tag}")
