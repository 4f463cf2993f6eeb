"""Build configuration models."""

import re
import uuid
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.constants import IMAGE_TAG_TEMPLATE, PORT_UNSET

IDENTIFIER_PATTERN = re.compile(r"[a-zA-Z0-9][a-zA-Z0-9_.-]*")


def generate_identifier() -> str:
    """Generate a short random build identifier."""
    return uuid.uuid4().hex[:12]


def _empty_path_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ProjectOverride(BaseModel):
    """Per-project overrides read from lambda.yml."""
    model_config = ConfigDict(extra="ignore")

    builder: Optional[str] = None
    build_image: Optional[str] = None
    run_image: Optional[str] = None


class InvocationOptions(BaseModel):
    """Options supplied explicitly for a single build invocation.

    ``None`` for builder, build_image and run_image means "not given", so
    lambda.yml and then the builder defaults apply.
    ``working_directory`` is None when an empty path was given; resolution
    rejects it rather than falling back to the current directory.
    """
    working_directory: Optional[Path]
    identifier: str = Field(default_factory=generate_identifier)
    builder: Optional[str] = None
    build_image: Optional[str] = None
    run_image: Optional[str] = None
    generate_run_image: bool = False
    handler: str = ""
    handler_map: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    build_env: List[str] = Field(default_factory=list)
    image_env: List[str] = Field(default_factory=list)
    image_labels: List[str] = Field(default_factory=list)
    image_tag: str = ""
    port: int = PORT_UNSET
    run_quiet: bool = False
    write_procfile: bool = False

    @field_validator("working_directory", mode="before")
    @classmethod
    def _empty_working_directory(cls, value):
        return _empty_path_to_none(value)


class BuildConfig(BaseModel):
    """Fully resolved configuration for one build."""
    working_directory: Path
    identifier: str
    builder: str
    build_image: str
    run_image: str
    generate_run_image: bool = False
    handler: str = ""
    handler_map: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    build_env: List[str] = Field(default_factory=list)
    image_env: List[str] = Field(default_factory=list)
    image_labels: List[str] = Field(default_factory=list)
    image_tag: str = ""
    port: int = PORT_UNSET
    run_quiet: bool = False
    write_procfile: bool = False

    @field_validator("working_directory", mode="before")
    @classmethod
    def _working_directory_not_empty(cls, value):
        if _empty_path_to_none(value) is None:
            raise ValueError("working directory must not be empty")
        return value

    @field_validator("working_directory")
    @classmethod
    def _working_directory_exists(cls, value: Path) -> Path:
        if not value.is_dir():
            raise ValueError(f"working directory '{value}' does not exist")
        return value

    @field_validator("identifier")
    @classmethod
    def _identifier_valid(cls, value: str) -> str:
        if not value:
            raise ValueError("identifier must not be empty")
        if not IDENTIFIER_PATTERN.fullmatch(value):
            raise ValueError(
                f"identifier '{value}' must match {IDENTIFIER_PATTERN.pattern} "
                "to be usable in a container name"
            )
        return value

    @property
    def resolved_image_tag(self) -> str:
        """Image tag, defaulting to lambda-builder/<app>:latest."""
        if self.image_tag:
            return self.image_tag
        return IMAGE_TAG_TEMPLATE.format(app_name=self.working_directory.name)

    @property
    def port_configured(self) -> bool:
        return self.port != PORT_UNSET

    def handlers_for(self, builder_name: str) -> Optional[Dict[str, str]]:
        """Filename to handler convention for a builder, if configured."""
        return self.handler_map.get(builder_name)
