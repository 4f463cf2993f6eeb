"""Exceptions raised by the build pipeline.

Every error carries the name of the stage that failed so the CLI can tell
the operator where the build stopped. The underlying cause is chained with
``raise ... from``.
"""

from typing import Optional


class LambdaBuilderError(Exception):
    """Base exception for all pipeline errors."""

    stage = "build"


class ConfigError(LambdaBuilderError):
    """Raised when configuration cannot be resolved or lambda.yml is malformed."""

    stage = "configuration"


class UnknownBuilderError(LambdaBuilderError):
    """Raised when an explicitly requested builder is not registered."""

    stage = "builder detection"

    def __init__(self, name: str, available: Optional[list[str]] = None):
        self.name = name
        self.available = available or []
        message = f"Unknown builder '{name}'"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class NoBuilderDetectedError(LambdaBuilderError):
    """Raised when no builder's marker files are present."""

    stage = "builder detection"


class BuildExecutionError(LambdaBuilderError):
    """Raised when the build container cannot be launched."""

    stage = "build execution"


class BuildFailedError(BuildExecutionError):
    """Raised when the build container exits non-zero."""

    def __init__(self, exit_code: int):
        self.exit_code = exit_code
        super().__init__(f"error executing builder, exit code {exit_code}")


class ExtractionError(LambdaBuilderError):
    """Raised when the build archive is missing, unreadable or corrupt."""

    stage = "archive extraction"


class WriteError(LambdaBuilderError):
    """Raised when a Procfile cannot be written."""

    stage = "Procfile generation"


class ImageBuildError(LambdaBuilderError):
    """Raised when the run image build cannot be launched or fails."""

    stage = "image build"

    def __init__(self, message: str, exit_code: Optional[int] = None):
        self.exit_code = exit_code
        super().__init__(message)
