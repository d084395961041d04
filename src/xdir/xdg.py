"""
XDG base directory resolution.

Every location is platform-agnostic: the same suffix under the user's home
is used on Linux, macOS and Windows alike.

- An override variable (XDG_CONFIG_HOME, ...) wins when set and non-empty
- Otherwise the location is <home>/<suffix>
- If home cannot be determined the result is None, never an exception
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

log = logging.getLogger(__name__)

# kind -> (override variable, suffix under home); read-only
KINDS: Mapping[str, tuple[str, str | None]] = MappingProxyType({
    "config": ("XDG_CONFIG_HOME", ".config"),
    "data": ("XDG_DATA_HOME", ".local/share"),
    "cache": ("XDG_CACHE_HOME", ".cache"),
    "state": ("XDG_STATE_HOME", ".local/state"),
    "bin": ("XDG_BIN_HOME", ".local/bin"),
    "runtime": ("XDG_RUNTIME_DIR", None),
})


def _environ(env: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if env is None else env


def _windows() -> bool:
    return os.name == "nt"


def _account_home() -> Path | None:
    # pwd only exists on POSIX
    try:
        import pwd
    except ImportError:
        return None
    try:
        entry = pwd.getpwuid(os.getuid())
    except KeyError:
        return None
    return Path(entry.pw_dir) if entry.pw_dir else None


def home(env: Mapping[str, str] | None = None) -> Path | None:
    """
    Return the user's home directory.

    Lookup order:
      1) $HOME (if non-empty)
      2) %USERPROFILE% on Windows (if non-empty)
      3) the account database entry for the current user
    """
    env = _environ(env)

    value = env.get("HOME")
    if value:
        return Path(value)

    if _windows():
        value = env.get("USERPROFILE")
        if value:
            return Path(value)

    found = _account_home()
    if found is None:
        log.debug("home directory could not be determined")
    return found


def _lookup(kind: str, env: Mapping[str, str] | None) -> Path | None:
    env = _environ(env)
    var, suffix = KINDS[kind]

    value = env.get(var)
    if value:
        log.debug("%s: using $%s=%s", kind, var, value)
        return Path(value)

    if suffix is None:
        log.debug("%s: $%s unset and no default exists", kind, var)
        return None

    base = home(env)
    if base is None:
        return None
    return base / suffix


def config(env: Mapping[str, str] | None = None) -> Path | None:
    return _lookup("config", env)


def data(env: Mapping[str, str] | None = None) -> Path | None:
    return _lookup("data", env)


def cache(env: Mapping[str, str] | None = None) -> Path | None:
    return _lookup("cache", env)


def state(env: Mapping[str, str] | None = None) -> Path | None:
    return _lookup("state", env)


def bin(env: Mapping[str, str] | None = None) -> Path | None:  # noqa: A001
    """Executable directory ($XDG_BIN_HOME or ~/.local/bin)."""
    return _lookup("bin", env)


def runtime(env: Mapping[str, str] | None = None) -> Path | None:
    """$XDG_RUNTIME_DIR; there is no safe default so unset means None."""
    return _lookup("runtime", env)


def kind_names() -> list[str]:
    return ["home", *KINDS]


def resolve(kind: str, env: Mapping[str, str] | None = None) -> Path | None:
    """Resolve a directory kind by name ("home", "config", "data", ...)."""
    if kind == "home":
        return home(env)
    if kind not in KINDS:
        raise ValueError(f"Unknown directory kind '{kind}'. Known: {kind_names()}")
    return _lookup(kind, env)


def resolve_all(env: Mapping[str, str] | None = None) -> dict[str, Path | None]:
    env = _environ(env)
    return {kind: resolve(kind, env) for kind in kind_names()}


def check_app_name(app: str) -> str:
    """Reject names that are blank or would leave the base directory."""
    if not app.strip():
        raise ValueError("app name must not be empty")
    name = Path(app)
    if name.is_absolute() or ".." in name.parts:
        raise ValueError(f"app name must stay inside the base directory: '{app}'")
    return app


def app_dir(kind: str, app: str, env: Mapping[str, str] | None = None) -> Path | None:
    """
    Per-application subdirectory, e.g. app_dir("config", "myapp") -> ~/.config/myapp.

    Only joins paths; the directory is not created.
    """
    check_app_name(app)
    base = resolve(kind, env)
    if base is None:
        return None
    return base / app
