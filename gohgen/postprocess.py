"""Run an external formatter (e.g. ``gofmt -w``) over generated files."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def run_format_command(command: str, path: Path) -> bool:
    """Run ``command <path>``. Failures are logged, never raised."""
    argv = shlex.split(command)
    if not argv:
        return True
    argv.append(str(path))
    try:
        result = subprocess.run(argv, check=False)
    except OSError as exc:
        logger.warning("could not run %r: %s", argv[0], exc)
        return False
    if result.returncode != 0:
        logger.warning("%s exited with status %d on %s", argv[0], result.returncode, path)
        return False
    return True
