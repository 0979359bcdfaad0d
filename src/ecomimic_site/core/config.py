from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from ecomimic_site.utils.log import DEFAULT_LOG_PATH

API_KEY_VAR = "COZE_API_KEY"
HOST_VAR = "ECOMIMIC_HOST"
PORT_VAR = "ECOMIMIC_PORT"
CORS_VAR = "ECOMIMIC_CORS_ORIGINS"
STATIC_DIR_VAR = "ECOMIMIC_STATIC_DIR"
LOG_PATH_VAR = "ECOMIMIC_LOG_PATH"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3001


class ConfigError(ValueError):
    """Raised when the site cannot start with the supplied configuration."""


@dataclass(frozen=True)
class SiteConfig:
    """Process-wide settings, resolved once at startup and passed down explicitly."""

    api_key: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cors_origins: tuple[str, ...] = ("*",)
    static_dir: Optional[Path] = None
    log_path: Path = field(default=DEFAULT_LOG_PATH)

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def cors_resource(self) -> str | list[str]:
        if self.cors_origins == ("*",):
            return "*"
        return list(self.cors_origins)


def _parse_port(raw: Any) -> int:
    try:
        port = int(str(raw).strip())
    except (TypeError, ValueError):
        raise ConfigError(f"{PORT_VAR} must be an integer, got {raw!r}.") from None
    if not 0 < port < 65536:
        raise ConfigError(f"{PORT_VAR} must be between 1 and 65535, got {port}.")
    return port


def _parse_origins(raw: Optional[str]) -> tuple[str, ...]:
    parts = [p.strip() for p in str(raw or "").split(",") if p.strip()]
    if not parts or "*" in parts:
        return ("*",)
    return tuple(parts)


def _parse_static_dir(raw: Optional[str]) -> Optional[Path]:
    text = str(raw or "").strip()
    if not text:
        return None
    path = Path(text).expanduser().resolve()
    if not path.is_dir():
        raise ConfigError(f"{STATIC_DIR_VAR} is not a directory: {path}")
    return path


def _parse_log_path(raw: Optional[str]) -> Path:
    text = str(raw or "").strip()
    return Path(text).expanduser() if text else DEFAULT_LOG_PATH


def load_env_file(env_file: Optional[str | os.PathLike[str]] = None) -> Optional[Path]:
    """Load ``env_file`` (or the nearest ``.env`` above the working directory) into ``os.environ``.

    Variables already set in the environment are kept. An explicit file that
    does not exist is a ConfigError; finding no ``.env`` on the search is not.
    """
    if env_file:
        path = Path(env_file).expanduser()
        if not path.is_file():
            raise ConfigError(f"Env file not found: {path}")
    else:
        found = find_dotenv(usecwd=True)
        if not found:
            return None
        path = Path(found)
    load_dotenv(path, override=False)
    return path


def log_path_from_env(environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Log file named by the environment, usable before the full config validates.

    Returns None when the variable is unset so callers keep their current log file.
    """
    env = os.environ if environ is None else environ
    if not str(env.get(LOG_PATH_VAR) or "").strip():
        return None
    return _parse_log_path(env.get(LOG_PATH_VAR))


def load_config(
    env_file: Optional[str | os.PathLike[str]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> SiteConfig:
    """Resolve the site configuration from ``.env``, the environment and CLI overrides.

    Values already present in the process environment win over the ``.env``
    file. ``overrides`` (from the command line) win over both; ``None`` entries
    in it are ignored. Raises ConfigError when the API key is missing or an
    explicit ``env_file`` does not exist.
    """
    if environ is None:
        load_env_file(env_file)
        environ = os.environ
    opts = {k: v for k, v in dict(overrides or {}).items() if v is not None}

    api_key = str(environ.get(API_KEY_VAR, "") or "").strip()
    if not api_key:
        raise ConfigError(f"Set {API_KEY_VAR} in the environment or .env file before starting the site.")

    host = str(opts.get("host") or environ.get(HOST_VAR) or DEFAULT_HOST).strip()
    port = _parse_port(opts.get("port", environ.get(PORT_VAR, DEFAULT_PORT)))
    cors_origins = _parse_origins(opts.get("cors_origins", environ.get(CORS_VAR)))
    static_dir = _parse_static_dir(opts.get("static_dir", environ.get(STATIC_DIR_VAR)))
    log_path = _parse_log_path(opts.get("log_path") or environ.get(LOG_PATH_VAR))

    return SiteConfig(
        api_key=api_key,
        host=host,
        port=port,
        cors_origins=cors_origins,
        static_dir=static_dir,
        log_path=log_path,
    )

