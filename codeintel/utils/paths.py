# -*- coding: utf-8 -*-
"""Expand user paths and resolve data files from env vars and fallbacks."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Callable, NamedTuple, Optional, Sequence, Union

_BRACED_VAR = re.compile(r"\$\{([^}]+)\}")
_BARE_VAR = re.compile(r"\$([A-Za-z_][A-Za-z0-9_]*)")


class EnvCandidate(NamedTuple):
    """Env var whose value is a directory holding ``filename``."""

    name: str
    filename: str


EnvSpec = Union[str, EnvCandidate]


def _home() -> str:
    return str(Path.home())


def expand_path(path: str) -> str:
    """Expand ``~``, ``$HOME``, ``${VAR}`` and ``$VAR`` in *path*.

    Unset variables expand to an empty string. The substitution is
    purely textual; the result is not normalized or checked.
    """
    if not path:
        return path

    expanded = path
    if expanded.startswith("~/"):
        expanded = os.path.join(_home(), expanded[2:])
    elif expanded == "~":
        expanded = _home()

    if "$HOME" in expanded:
        expanded = expanded.replace("$HOME", _home())

    expanded = _BRACED_VAR.sub(
        lambda m: os.environ.get(m.group(1), ""),
        expanded,
    )
    expanded = _BARE_VAR.sub(
        lambda m: os.environ.get(m.group(1), ""),
        expanded,
    )
    return expanded


def _env_path(spec: EnvSpec) -> tuple[str, Optional[str]]:
    if isinstance(spec, EnvCandidate):
        value = os.environ.get(spec.name)
        if not value:
            return spec.name, None
        return spec.name, os.path.join(expand_path(value), spec.filename)
    value = os.environ.get(spec)
    if not value:
        return spec, None
    return spec, expand_path(value)


def resolve_config_path(
    env_vars: Union[EnvSpec, Sequence[EnvSpec]],
    fallback_paths: Sequence[Union[str, Path]],
    debug: Optional[Callable[[str], None]] = None,
) -> Optional[str]:
    """Return the first existing file among env vars, then fallbacks.

    Env vars are tried in the given order; unset ones are skipped. When
    none of them points at an existing file the fallback paths are tried
    in order. Returns ``None`` when every candidate is missing.
    """
    if isinstance(env_vars, (str, EnvCandidate)):
        env_vars = [env_vars]

    for spec in env_vars:
        name, candidate = _env_path(spec)
        if candidate is None:
            continue
        if os.path.isfile(candidate):
            if debug:
                debug(f"Found config via env {name}: {candidate}")
            return candidate
        if debug:
            debug(f"Path from env {name} does not exist: {candidate}")

    for path in fallback_paths:
        candidate = expand_path(str(path))
        if os.path.isfile(candidate):
            if debug:
                debug(f"Found config file: {candidate}")
            return candidate
        if debug:
            debug(f"Config not found: {candidate}")

    return None


def data_file_candidates(
    file_env: str,
    legacy_file_env: str,
    filename: str,
    data_dir_env: str,
    legacy_data_dir_env: str,
) -> list[EnvSpec]:
    """Env candidates for one data file, highest priority first."""
    return [
        file_env,
        EnvCandidate(data_dir_env, filename),
        legacy_file_env,
        EnvCandidate(legacy_data_dir_env, filename),
    ]


def default_fallbacks(filename: str, package_data_dir: Path) -> list[str]:
    """Cwd-relative then install-relative default locations."""
    return [
        os.path.join(os.getcwd(), "data", filename),
        str(package_data_dir / filename),
    ]
