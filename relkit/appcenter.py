"""Querying CodePush deployment history through the AppCenter command line tool."""

from __future__ import annotations

import json
import os
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if os.name == "nt":
    _BIN_PATH = "appcenter.cmd"
    _NPM_PATH = "node_modules/.bin/appcenter.cmd"
else:
    _BIN_PATH = "appcenter"
    _NPM_PATH = "node_modules/.bin/appcenter"

_NOT_FOUND = (
    "AppCenter CLI not found\n\n"
    "Install with `npm install -g appcenter-cli` and make sure it is on the PATH."
)

_ANSI_RE = re.compile(
    r"[\x1b\x9b][\[()#;?]*(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-ORZcf-nqry=><]"
)


class AppCenterError(Exception):
    """Raised when AppCenter information cannot be obtained."""


@dataclass(frozen=True)
class AppCenterPackage:
    """A package in the history of an AppCenter CodePush deployment."""

    label: str

    @classmethod
    def from_history_entry(cls, entry: Any) -> AppCenterPackage:
        """Build a package from a history row, whose first element is the label."""
        if not isinstance(entry, list):
            raise ValueError("a deployment history entry must be a list")
        if not entry:
            raise ValueError("missing package label")
        label = entry[0]
        if not isinstance(label, str):
            raise ValueError("package label must be a string")
        return cls(label=label)


def get_appcenter_error(stdout: bytes) -> AppCenterError:
    """Build an error from the standard output of the AppCenter CLI."""
    try:
        message = stdout.decode("utf-8")
    except UnicodeDecodeError:
        message = "Unknown AppCenter error"
    stripped = _ANSI_RE.sub("", message)
    if stripped.startswith("Error: "):
        stripped = stripped[len("Error: "):]
    return AppCenterError(stripped)


def get_appcenter_deployment_history(app: str, deployment: str) -> list[AppCenterPackage]:
    """Return the packages in the history of a deployment, oldest first."""
    appcenter_bin = _NPM_PATH if Path(_NPM_PATH).exists() else _BIN_PATH
    try:
        output = subprocess.run(
            [
                appcenter_bin, "codepush", "deployment", "history", deployment,
                "--app", app, "--output", "json",
            ],
            capture_output=True,
            check=False,
        )
    except FileNotFoundError:
        raise AppCenterError(_NOT_FOUND) from None
    except OSError as err:
        raise AppCenterError("Failed to run AppCenter CLI") from err

    if output.returncode != 0:
        cause = get_appcenter_error(output.stdout)
        raise AppCenterError("Failed to load AppCenter deployment history") from cause

    try:
        data = json.loads(output.stdout)
        if not isinstance(data, list):
            raise ValueError("expected a list of history entries")
        return [AppCenterPackage.from_history_entry(entry) for entry in data]
    except ValueError as err:
        raise AppCenterError(
            f"Command `{appcenter_bin} codepush deployment history {deployment} "
            f"--app {app} --output json` failed to produce a valid JSON output."
        ) from err


def get_appcenter_package(app: str, deployment: str) -> AppCenterPackage:
    """Return the latest package of a deployment."""
    history = get_appcenter_deployment_history(app, deployment)
    if not history:
        raise AppCenterError(f"Could not find deployment {deployment} for {app}")
    return history[-1]