from pathlib import Path

import pytest

from lambda_builder.core.exceptions import ImageBuildError
from lambda_builder.core.image_builder import ImageBuilder


class TestImageBuilder:
    """Tests for run image builds."""

    @pytest.fixture
    def dockerfile(self, tmp_path):
        path = tmp_path / "Dockerfile"
        path.write_text("FROM scratch\n")
        return path

    def test_build_args_default_tag(self, make_config, tmp_path):
        config = make_config(image_labels=["a=1", "b=2"])
        args = ImageBuilder(config).build_args(Path("/ctx"), Path("/tmp/Dockerfile"))

        assert args == [
            "docker", "image", "build",
            "--file", "/tmp/Dockerfile",
            "--progress", "plain",
            "--tag", "lambda-builder/my-app:latest",
            "--label", "a=1",
            "--label", "b=2",
            "/ctx",
        ]

    def test_build_args_explicit_tag(self, make_config):
        config = make_config(image_tag="registry.example.com/app:v2")
        args = ImageBuilder(config).build_args(Path("/ctx"), Path("/df"))
        assert args[args.index("--tag") + 1] == "registry.example.com/app:v2"

    def test_build_returns_tag(self, make_config, fake_runner, dockerfile, tmp_path):
        runner = fake_runner()
        tag = ImageBuilder(make_config(), runner).build(tmp_path, dockerfile)
        assert tag == "lambda-builder/my-app:latest"
        assert runner.dockerfiles == ["FROM scratch\n"]

    def test_non_zero_exit(self, make_config, fake_runner, dockerfile, tmp_path):
        runner = fake_runner(image_exit_code=3)
        with pytest.raises(ImageBuildError, match="exit code 3") as exc_info:
            ImageBuilder(make_config(), runner).build(tmp_path, dockerfile)
        assert exc_info.value.exit_code == 3

    def test_launch_failure(self, make_config, fake_runner, dockerfile, tmp_path):
        runner = fake_runner(launch_error=True)
        with pytest.raises(ImageBuildError, match="error building image"):
            ImageBuilder(make_config(), runner).build(tmp_path, dockerfile)
