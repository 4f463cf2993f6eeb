"""Dockerfile generation logic."""

from ..models.config import BuildConfig
from .dockerfile_template import DockerfileContext, generate_dockerfile


class DockerfileGenerator:
    """Generates the Dockerfile for a build's run image."""

    def __init__(self, config: BuildConfig):
        """Initialize generator."""
        self.config = config

    def context(self, handler: str) -> DockerfileContext:
        """Collect the template values for handler."""
        config = self.config
        return DockerfileContext(
            run_image=config.run_image,
            port=config.port if config.port_configured else None,
            env=tuple(config.image_env),
            command=handler,
        )

    def render(self, handler: str) -> str:
        """Render the Dockerfile text; identical inputs give identical output."""
        return generate_dockerfile(self.context(handler))
