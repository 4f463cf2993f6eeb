"""List the available builders."""

from pathlib import Path

import click

from ...core.builders import BUILDERS
from ..helpers import print_table


@click.command()
@click.option('--working-directory', '-w', default=None,
              type=click.Path(exists=True, file_okay=False, path_type=Path),
              help='Mark the builders whose marker files are present here')
def builders(working_directory):
    """List supported builders and their default images"""
    headers = ["Builder", "Markers", "Build image", "Run image"]
    if working_directory:
        headers.append("Detected")

    rows = []
    for builder in BUILDERS:
        row = [
            builder.name.value,
            ", ".join(builder.markers),
            builder.default_build_image,
            builder.default_run_image,
        ]
        if working_directory:
            row.append("yes" if builder.detect(working_directory) else "")
        rows.append(row)

    print_table(headers, rows)
