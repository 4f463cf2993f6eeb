import io
import zipfile
from pathlib import Path

import pytest
from click.testing import CliRunner

from lambda_builder.core.builders import BUILDERS
from lambda_builder.core.detector import get_builder
from lambda_builder.models.config import BuildConfig
from lambda_builder.services.command_runner import CommandResult
from lambda_builder.services.exceptions import CommandNotFoundError


def make_zip(files: dict) -> bytes:
    """Build an in-memory zip archive from a {name: content} mapping."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in files.items():
            archive.writestr(name, content)
    return buffer.getvalue()


class FakeCommandRunner:
    """Stands in for the container runtime.

    ``container run`` writes archive_files into the working directory as
    lambda.zip (unless archive_files is None) and exits with build_exit_code.
    ``image build`` records the Dockerfile it was given and exits with
    image_exit_code.
    """

    def __init__(self, archive_files=None, build_exit_code=0, image_exit_code=0,
                 launch_error=False, output=""):
        self.archive_files = archive_files
        self.build_exit_code = build_exit_code
        self.image_exit_code = image_exit_code
        self.launch_error = launch_error
        self.output = output
        self.calls = []
        self.dockerfiles = []

    def run(self, args, cwd=None, stream=True):
        self.calls.append({"args": list(args), "cwd": cwd, "stream": stream})
        if self.launch_error:
            raise CommandNotFoundError(f"Failed to launch '{args[0]}'")

        if args[1:3] == ["container", "run"]:
            if self.archive_files is not None and self.build_exit_code == 0:
                (Path(cwd) / "lambda.zip").write_bytes(make_zip(self.archive_files))
            return CommandResult(args=list(args), exit_code=self.build_exit_code, output=self.output)

        if args[1:3] == ["image", "build"]:
            dockerfile = Path(args[args.index("--file") + 1])
            self.dockerfiles.append(dockerfile.read_text())
            return CommandResult(args=list(args), exit_code=self.image_exit_code, output=self.output)

        return CommandResult(args=list(args), exit_code=0)

    def calls_for(self, *subcommand):
        return [call for call in self.calls if call["args"][1:1 + len(subcommand)] == list(subcommand)]


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path):
    """Creates an empty application directory."""
    project_path = tmp_path / "my-app"
    project_path.mkdir()
    return project_path


@pytest.fixture
def fake_runner():
    """Factory for FakeCommandRunner instances."""
    def _make(**kwargs):
        return FakeCommandRunner(**kwargs)
    return _make


@pytest.fixture
def make_config(project_dir):
    """Factory for resolved build configurations."""
    def _make(builder="go", **overrides):
        selected = get_builder(builder)
        values = {
            "working_directory": project_dir,
            "identifier": "test123",
            "builder": builder,
            "build_image": selected.default_build_image,
            "run_image": selected.default_run_image,
            "handler_map": {b.name.value: dict(b.default_handlers) for b in BUILDERS},
        }
        values.update(overrides)
        return BuildConfig(**values)
    return _make


@pytest.fixture
def write_zip():
    """Writes a zip archive with the given files to a path."""
    def _write(path: Path, files: dict) -> Path:
        path.write_bytes(make_zip(files))
        return path
    return _write
