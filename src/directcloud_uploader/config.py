"""
Configuration management for the uploader.
Loads environment variables and validates required settings.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from directcloud_uploader._internal.api import DEFAULT_ENDPOINT
from directcloud_uploader.exceptions import ConfigurationError
from directcloud_uploader.models import Credentials

ENV_PREFIX = "DIRECTCLOUDBOX_"

CREDENTIAL_KEYS = ["SERVICE", "SERVICE_KEY", "CODE", "ID", "PASSWORD"]
REQUIRED_KEYS = CREDENTIAL_KEYS + ["NODE", "FILE_PATH"]
REQUIRED_ENVS = [ENV_PREFIX + key for key in REQUIRED_KEYS]

ENV_ENDPOINT = ENV_PREFIX + "ENDPOINT"


@dataclass(frozen=True)
class Settings:
    """Validated settings for one run."""

    credentials: Credentials
    node: str
    file_path: Path
    endpoint: str = DEFAULT_ENDPOINT


def _missing(environ: Mapping[str, str], names: list[str]) -> list[str]:
    return [name for name in names if not environ.get(name)]


def load_credentials(environ: Mapping[str, str] | None = None) -> Credentials:
    """
    Read only the credential variables.
    Raises ConfigurationError listing every missing name.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    missing = _missing(environ, [ENV_PREFIX + key for key in CREDENTIAL_KEYS])
    if missing:
        raise ConfigurationError(missing)

    return Credentials(
        service=environ[ENV_PREFIX + "SERVICE"],
        service_key=environ[ENV_PREFIX + "SERVICE_KEY"],
        code=environ[ENV_PREFIX + "CODE"],
        id=environ[ENV_PREFIX + "ID"],
        password=environ[ENV_PREFIX + "PASSWORD"],
    )


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Load and validate configuration from environment variables.
    A .env file in the working directory is read first when no mapping is given.
    Raises ConfigurationError if required variables are missing.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    missing = _missing(environ, REQUIRED_ENVS)
    if missing:
        raise ConfigurationError(missing)

    return Settings(
        credentials=load_credentials(environ),
        node=environ[ENV_PREFIX + "NODE"],
        file_path=Path(environ[ENV_PREFIX + "FILE_PATH"]),
        endpoint=environ.get(ENV_ENDPOINT) or DEFAULT_ENDPOINT,
    )
