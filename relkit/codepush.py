"""Querying CodePush deployments through the ``code-push`` command line tool."""

from __future__ import annotations

import json
import os
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if os.name == "nt":
    _BIN_PATH = "code-push.cmd"
    _NPM_PATH = "node_modules/.bin/code-push.cmd"
else:
    _BIN_PATH = "code-push"
    _NPM_PATH = "node_modules/.bin/code-push"

_ANSI_RE = re.compile(
    r"[\x1b\x9b][\[()#;?]*(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-ORZcf-nqry=><]"
)


class CodePushError(Exception):
    """Raised when CodePush information cannot be obtained."""


@dataclass(frozen=True)
class CodePushPackage:
    """A package released to a CodePush deployment."""

    label: str


@dataclass(frozen=True)
class CodePushDeployment:
    """A CodePush deployment and its current package, if any."""

    name: str
    package: CodePushPackage | None = None


def _strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def _deployment_from_json(data: Any) -> CodePushDeployment:
    if not isinstance(data, dict):
        raise ValueError("deployment must be an object")
    name = data["name"]
    if not isinstance(name, str):
        raise ValueError("deployment name must be a string")
    package_data = data.get("package")
    package = None
    if package_data is not None:
        if not isinstance(package_data, dict) or not isinstance(
            package_data.get("label"), str
        ):
            raise ValueError("package must carry a string label")
        package = CodePushPackage(label=package_data["label"])
    return CodePushDeployment(name=name, package=package)


def get_codepush_error(stderr: bytes) -> CodePushError:
    """Build an error from the standard error output of ``code-push``."""
    try:
        message = stderr.decode("utf-8")
    except UnicodeDecodeError:
        return CodePushError("Unknown Error")
    stripped = _strip_ansi(message)
    for prefix in ("[Error]  ", "[Error] "):
        if stripped.startswith(prefix):
            stripped = stripped[len(prefix):]
            break
    return CodePushError(stripped)


def _codepush_bin() -> str:
    return _NPM_PATH if Path(_NPM_PATH).exists() else _BIN_PATH


def get_codepush_deployments(app: str) -> list[CodePushDeployment]:
    """Return the deployments of ``app`` as listed by ``code-push``."""
    codepush_bin = _codepush_bin()
    try:
        output = subprocess.run(
            [codepush_bin, "deployment", "ls", app, "--format", "json"],
            capture_output=True,
            check=False,
        )
    except FileNotFoundError:
        raise CodePushError(
            "Codepush not found. Is it installed and configured on the PATH?"
        ) from None
    except OSError as err:
        raise CodePushError("Failed to run codepush") from err

    if output.returncode != 0:
        cause = get_codepush_error(output.stderr)
        raise CodePushError("Failed to get codepush deployments") from cause

    try:
        data = json.loads(output.stdout)
        if not isinstance(data, list):
            raise ValueError("expected a list of deployments")
        return [_deployment_from_json(entry) for entry in data]
    except (ValueError, KeyError, TypeError) as err:
        raise CodePushError(
            f"Command `{codepush_bin} deployment ls {app} --format json` "
            "failed to produce a valid JSON output."
        ) from err


def get_codepush_package(app: str, deployment: str) -> CodePushPackage:
    """Return the current package of the named deployment of ``app``."""
    for dep in get_codepush_deployments(app):
        if dep.name == deployment and dep.package is not None:
            return dep.package
    raise CodePushError(f"Could not find deployment {deployment} for {app}")