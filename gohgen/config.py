"""Generator settings.

Read from the environment, overridden by command-line flags:
  GOH_PACKAGE          package clause of generated files (default: template)
  GOH_DESTINATION      output directory (default: current directory)
  GOH_FORMAT_COMMAND   command run on each written file, e.g. "gofmt -w"
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from .naming import DEFAULT_PACKAGE_NAME, resolve_package_name


@dataclass(frozen=True)
class GeneratorConfig:
    package_name: str = DEFAULT_PACKAGE_NAME
    destination: Path = field(default_factory=Path)
    format_command: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GeneratorConfig:
        env = os.environ if environ is None else environ
        return cls(
            package_name=resolve_package_name(env.get("GOH_PACKAGE")),
            destination=Path(env.get("GOH_DESTINATION") or "."),
            format_command=env.get("GOH_FORMAT_COMMAND") or None,
        )

    def override(
        self,
        package_name: str | None = None,
        destination: Path | str | None = None,
        format_command: str | None = None,
    ) -> GeneratorConfig:
        """Return a copy with every non-None argument applied."""
        changes: dict[str, object] = {}
        if package_name is not None:
            changes["package_name"] = resolve_package_name(package_name)
        if destination is not None:
            changes["destination"] = Path(destination)
        if format_command is not None:
            changes["format_command"] = format_command or None
        return replace(self, **changes)
