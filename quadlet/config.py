"""Configuration loading from .quadlet.yml and quadlet description files."""

import os
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_yaml import parse_yaml_file_as

from quadlet.container import Container
from quadlet.global_options import Globals
from quadlet.image import Image
from quadlet.kube import Kube
from quadlet.network import Network
from quadlet.pod import Pod
from quadlet.systemd import Install, Service, Unit
from quadlet.version import PodmanVersion
from quadlet.volume import Volume

_config_cache: dict | None = None

CONFIG_FILE = ".quadlet.yml"
DEFAULT_OUTPUT_DIR = "."

_ENV_VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing."""
    global _config_cache
    _config_cache = None


def expand_env_vars(value: str | None) -> str | None:
    """Expand ${VAR} references in a string value.

    Returns None if the value is None or any referenced env var is undefined.
    """
    if not value:
        return value

    missing = False

    def replace(match: re.Match) -> str:
        nonlocal missing
        env_value = os.environ.get(match.group(1))
        if env_value is None:
            missing = True
            return ""
        return env_value

    result = _ENV_VAR_PATTERN.sub(replace, value)
    return None if missing else result


def load_config() -> dict:
    """Load .quadlet.yml from current directory.

    Returns empty dict if file doesn't exist or is empty.
    Result is cached for the duration of the process.
    """
    global _config_cache

    if _config_cache is not None:
        return _config_cache

    config_path = Path.cwd() / CONFIG_FILE

    if not config_path.exists():
        _config_cache = {}
        return _config_cache

    _config_cache = yaml.safe_load(config_path.read_text()) or {}
    return _config_cache


def get_podman_version() -> PodmanVersion:
    """Podman version to generate quadlet files for.

    Raises ValueError if the configured version is not supported.
    """
    value = load_config().get("podman_version")
    expanded = expand_env_vars(str(value)) if value is not None else None

    if not expanded:
        return PodmanVersion.default()

    return PodmanVersion.parse(expanded)


def get_output_dir() -> Path:
    """Directory generated quadlet files are written to."""
    value = expand_env_vars(load_config().get("output_dir"))
    return Path(value or DEFAULT_OUTPUT_DIR)


def get_absolute_host_paths() -> bool:
    """Whether relative host paths should be made absolute."""
    return bool(load_config().get("absolute_host_paths", False))


class FileConfig(BaseModel):
    """Root configuration of a quadlet description file"""
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    unit: Unit | None = None
    container: Container | None = None
    pod: Pod | None = None
    kube: Kube | None = None
    network: Network | None = None
    volume: Volume | None = None
    image: Image | None = None
    globals: Globals = Field(default_factory=Globals)
    service: Service | None = None
    install: Install | None = None

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("name must not be empty")
        return value

    @model_validator(mode="after")
    def exactly_one_resource(self) -> "FileConfig":
        present = [key for key in RESOURCE_KEYS if getattr(self, key) is not None]
        if len(present) != 1:
            raise ValueError(
                f"exactly one of {', '.join(RESOURCE_KEYS)} is required, got {len(present)}"
            )
        return self

    @property
    def resource_key(self) -> str:
        return next(key for key in RESOURCE_KEYS if getattr(self, key) is not None)


RESOURCE_KEYS = ("container", "pod", "kube", "network", "volume", "image")


class ConfigLoader:
    """Loads and validates quadlet description files"""

    @staticmethod
    def load(path: Path) -> FileConfig:
        """Load and validate a description file"""
        return parse_yaml_file_as(FileConfig, path)
