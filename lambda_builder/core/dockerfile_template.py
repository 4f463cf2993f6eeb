"""Dockerfile template for run images."""

import json
from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import API_PORT_ENV, RUN_IMAGE_TASK_DIR, RUNTIME_PORT_ENV

RUN_IMAGE_DOCKERFILE = """FROM {run_image}
{port_env}{env_vars}{command}COPY . {task_dir}
"""


@dataclass(frozen=True)
class DockerfileContext:
    """Values substituted into the run image Dockerfile."""

    run_image: str
    port: Optional[int] = None
    env: Tuple[str, ...] = ()
    command: str = ""


def _lines(lines) -> str:
    return "".join(f"{line}\n" for line in lines)


def _env_line(entry: str) -> str:
    """ENV instruction for a KEY=VALUE entry with the value double-quoted."""
    key, sep, value = entry.partition("=")
    if not sep:
        return f"ENV {entry}"
    return f"ENV {key}={json.dumps(value, ensure_ascii=False)}"


def generate_dockerfile(context: DockerfileContext) -> str:
    """Render the run image Dockerfile for context."""
    port_env = []
    if context.port is not None:
        port_env = [
            f"ENV {API_PORT_ENV}={context.port}",
            f"ENV {RUNTIME_PORT_ENV}={context.port}",
        ]

    command = []
    if context.command:
        command = [f"CMD {json.dumps([context.command])}"]

    return RUN_IMAGE_DOCKERFILE.format(
        run_image=context.run_image,
        port_env=_lines(port_env),
        env_vars=_lines(_env_line(entry) for entry in context.env),
        command=_lines(command),
        task_dir=RUN_IMAGE_TASK_DIR,
    )
