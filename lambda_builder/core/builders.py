"""Language builders.

The set of builders is closed: each ``BuilderName`` has exactly one
``Builder`` descriptor in ``BUILDERS``, listed in detection priority order.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Callable, Dict, Optional, Tuple

from . import build_scripts

logger = logging.getLogger(__name__)

HandlerStrategy = Callable[[Path, Dict[str, str]], str]


class BuilderName(str, Enum):
    """Supported language ecosystems."""
    DOTNET = "dotnet"
    GO = "go"
    NODEJS = "nodejs"
    PYTHON = "python"
    RUBY = "ruby"


def detect_file_handler(build_dir: Path, handlers: Dict[str, str]) -> str:
    """Return the handler of the first conventional file found in build_dir."""
    for filename, handler in handlers.items():
        if (build_dir / filename).is_file():
            return handler
    return ""


def detect_nodejs_handler(build_dir: Path, handlers: Dict[str, str]) -> str:
    """Use package.json's "main" entry, then the conventional filenames."""
    manifest = build_dir / "package.json"
    if manifest.is_file():
        try:
            main = json.loads(manifest.read_text()).get("main")
        except (OSError, ValueError, AttributeError) as e:
            logger.debug(f"Ignoring unreadable package.json: {e}")
            main = None
        if isinstance(main, str) and main and (build_dir / main).is_file():
            module = PurePosixPath(main).with_suffix("")
            return f"{module}.handler"
    return detect_file_handler(build_dir, handlers)


def detect_dotnet_handler(build_dir: Path, handlers: Dict[str, str]) -> str:
    """Use a custom runtime bootstrap, then the published assembly name."""
    handler = detect_file_handler(build_dir, handlers)
    if handler:
        return handler

    suffix = ".runtimeconfig.json"
    for config in sorted(build_dir.glob(f"*{suffix}")):
        assembly = config.name[:-len(suffix)]
        return f"{assembly}::{assembly}.Function::FunctionHandler"
    return ""


@dataclass(frozen=True)
class Builder:
    """Describes how to detect, build and run one language ecosystem."""

    name: BuilderName
    markers: Tuple[str, ...]
    default_build_image: str
    default_run_image: str
    build_script: str
    default_handlers: Dict[str, str] = field(default_factory=dict)
    handler_strategy: HandlerStrategy = detect_file_handler

    def detect(self, working_directory: Path) -> bool:
        """Check whether any marker file is present in working_directory."""
        for pattern in self.markers:
            if any(path.is_file() for path in working_directory.glob(pattern)):
                return True
        return False

    def detect_handler(self, build_dir: Path, handlers: Optional[Dict[str, str]] = None) -> str:
        """Guess the handler from the extracted build output."""
        if handlers is None:
            handlers = self.default_handlers
        return self.handler_strategy(build_dir, handlers)


BUILDERS: Tuple[Builder, ...] = (
    Builder(
        name=BuilderName.DOTNET,
        markers=("*.csproj",),
        default_build_image="mlupin/docker-lambda:dotnetcore3.1-build",
        default_run_image="mlupin/docker-lambda:dotnetcore3.1",
        build_script=build_scripts.DOTNET_BUILD_SCRIPT,
        default_handlers={"bootstrap": "bootstrap"},
        handler_strategy=detect_dotnet_handler,
    ),
    Builder(
        name=BuilderName.GO,
        markers=("go.mod",),
        default_build_image="lambci/lambda:build-go1.x",
        default_run_image="lambci/lambda:go1.x",
        build_script=build_scripts.GO_BUILD_SCRIPT,
        default_handlers={"bootstrap": "bootstrap", "main": "main"},
    ),
    Builder(
        name=BuilderName.NODEJS,
        markers=("package.json",),
        default_build_image="mlupin/docker-lambda:nodejs14.x-build",
        default_run_image="mlupin/docker-lambda:nodejs14.x",
        build_script=build_scripts.NODEJS_BUILD_SCRIPT,
        default_handlers={"index.js": "index.handler", "app.js": "app.handler"},
        handler_strategy=detect_nodejs_handler,
    ),
    Builder(
        name=BuilderName.PYTHON,
        markers=("requirements.txt", "Pipfile", "poetry.lock", "pyproject.toml"),
        default_build_image="mlupin/docker-lambda:python3.9-build",
        default_run_image="mlupin/docker-lambda:python3.9",
        build_script=build_scripts.PYTHON_BUILD_SCRIPT,
        default_handlers={
            "lambda_function.py": "lambda_function.lambda_handler",
            "function.py": "function.handler",
            "app.py": "app.handler",
            "main.py": "main.handler",
        },
    ),
    Builder(
        name=BuilderName.RUBY,
        markers=("Gemfile",),
        default_build_image="mlupin/docker-lambda:ruby2.7-build",
        default_run_image="mlupin/docker-lambda:ruby2.7",
        build_script=build_scripts.RUBY_BUILD_SCRIPT,
        default_handlers={
            "lambda_function.rb": "lambda_function.lambda_handler",
            "function.rb": "function.handler",
            "app.rb": "app.handler",
        },
    ),
)


def builder_names(registry: Tuple[Builder, ...] = BUILDERS) -> list[str]:
    """Names of registered builders in priority order."""
    return [builder.name.value for builder in registry]
