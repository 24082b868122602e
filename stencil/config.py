"""Stencil configuration.

Typed configuration for the scaffolder. Settings use a Pydantic v2 model so
they are validated at construction time. The command line takes nothing but
the project name, so overrides come from environment variables only.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "template"
DEFAULT_INSTALL_COMMAND = "npm install"


class Config(BaseModel):
    """Global Stencil configuration.

    Created once by the CLI entry point and handed to ``ProjectGenerator``.
    """

    template_dir: Path = Field(
        default=DEFAULT_TEMPLATE_DIR,
        description="Directory tree copied into every new project",
    )
    install_command: str = Field(
        default=DEFAULT_INSTALL_COMMAND,
        description="Command run inside the new project to install dependencies",
    )

    @field_validator("install_command")
    @classmethod
    def _install_command_not_blank(cls, value: str) -> str:
        if not shlex.split(value):
            raise ValueError("install_command must not be empty")
        return value

    @property
    def install_argv(self) -> list[str]:
        """The install command split into an argument list."""
        return shlex.split(self.install_command)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            STENCIL_TEMPLATE_DIR, STENCIL_INSTALL_COMMAND.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("STENCIL_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["STENCIL_TEMPLATE_DIR"])
        if os.environ.get("STENCIL_INSTALL_COMMAND"):
            kwargs["install_command"] = os.environ["STENCIL_INSTALL_COMMAND"]
        return cls(**kwargs)
