"""Runtime configuration model for BoostBox.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping

from core.constants import (
    DEFAULT_ENV,
    DEFAULT_PORT,
    DEFAULT_ROOT_PATH,
    DEFAULT_STORAGE_KIND,
    SUPPORTED_ENVS,
    SUPPORTED_STORAGE_KINDS,
)
from core.errors import BoostBoxConfigError


@dataclass(frozen=True)
class S3Settings:
    """Connection settings for the object-store backend."""

    endpoint: str
    region: str
    access_key: str
    secret_key: str
    bucket: str


@dataclass(frozen=True)
class BoostBoxConfig:
    """Validated runtime configuration.

    Attributes:
        env: Deployment environment, one of DEV, STAGING or PROD.
        storage: Storage backend kind, FS or S3.
        root_path: Local root directory for the filesystem backend.
        port: Listening port of the HTTP layer, used for the default base URL.
        base_url: Public base URL that document links are built from.
        s3: Object-store settings, present only when storage is S3.
    """

    env: str
    storage: str
    root_path: Path
    port: int
    base_url: str
    s3: S3Settings | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "BoostBoxConfig":
        """Build config from process environment variables.

        Args:
            environ: Optional mapping used instead of ``os.environ``.

        Returns:
            A validated config object.

        Raises:
            BoostBoxConfigError: If environment values are invalid or missing.
        """
        source = os.environ if environ is None else environ
        env = _read_choice(source, "BB_ENV", DEFAULT_ENV, SUPPORTED_ENVS)
        storage = _read_choice(source, "BB_STORAGE", DEFAULT_STORAGE_KIND, SUPPORTED_STORAGE_KINDS)
        port = _parse_port(_read(source, "BB_PORT", str(DEFAULT_PORT)))
        base_url = _read(source, "BB_BASE_URL", f"http://localhost:{port}").rstrip("/")
        root_path = Path(_read(source, "BB_FS_ROOT_PATH", str(DEFAULT_ROOT_PATH)))
        s3 = _read_s3_settings(source) if storage == "S3" else None
        return cls(
            env=env,
            storage=storage,
            root_path=root_path.expanduser().resolve(),
            port=port,
            base_url=base_url,
            s3=s3,
        )

    @property
    def is_dev(self) -> bool:
        return self.env == "DEV"


def _read(source: Mapping[str, str], key: str, default: str | None = None) -> str:
    """Read one variable, treating empty strings as unset.

    Raises:
        BoostBoxConfigError: If the variable is unset and has no default.
    """
    value = source.get(key)
    if value:
        return value
    if default is not None:
        return default
    raise BoostBoxConfigError(f"Missing {key}: set the {key} environment variable.")


def _read_choice(
    source: Mapping[str, str],
    key: str,
    default: str,
    choices: tuple[str, ...],
) -> str:
    value = _read(source, key, default)
    if value not in choices:
        raise BoostBoxConfigError(
            f"Invalid {key} value '{value}': expected one of {', '.join(choices)}."
        )
    return value


def _read_s3_settings(source: Mapping[str, str]) -> S3Settings:
    return S3Settings(
        endpoint=_read(source, "BB_S3_ENDPOINT"),
        region=_read(source, "BB_S3_REGION"),
        access_key=_read(source, "BB_S3_ACCESS_KEY"),
        secret_key=_read(source, "BB_S3_SECRET_KEY"),
        bucket=_read(source, "BB_S3_BUCKET"),
    )


def _parse_port(raw_value: str) -> int:
    """Parse the port environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed port number.

    Raises:
        BoostBoxConfigError: If value is not an integer in the TCP port range.
    """
    try:
        port = int(raw_value)
    except ValueError as error:
        raise BoostBoxConfigError(
            "Invalid BB_PORT value: "
            f"expected integer, got '{raw_value}'. "
            "Set BB_PORT to a numeric value."
        ) from error
    if not 0 < port < 65536:
        raise BoostBoxConfigError(f"Invalid BB_PORT value {port}: expected 1-65535.")
    return port
