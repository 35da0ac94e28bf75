"""Best-effort author identity from the local git configuration."""

from __future__ import annotations

import logging
import subprocess
from typing import NamedTuple

logger = logging.getLogger(__name__)


class Identity(NamedTuple):
    """Author name and email; either may be empty."""

    name: str = ""
    email: str = ""


def git_config_value(key: str, timeout: float = 2.0) -> str:
    """Return ``git config --get <key>`` or ``""`` on any failure."""
    try:
        result = subprocess.run(
            ["git", "config", "--get", key],
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git config %s unavailable: %s", key, exc)
        return ""

    if result.returncode != 0:
        logger.debug("git config %s exited with %d", key, result.returncode)
        return ""
    return result.stdout.strip()


def git_identity(timeout: float = 2.0) -> Identity:
    """Look up ``user.name`` and ``user.email``; never raises."""
    return Identity(
        name=git_config_value("user.name", timeout),
        email=git_config_value("user.email", timeout),
    )
