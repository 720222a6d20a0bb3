"""Defines the configuration store used to resolve package-wide defaults."""

import copy
import json
from pathlib import Path
from typing import Any, Optional, Protocol, runtime_checkable

from loguru import logger
from pydantic import Field, StrictInt, ValidationError
from typing_extensions import Annotated

from spatial_types.exceptions import SpatialConfigError, SpatialFileExists
from spatial_types.models import SpatialBaseModel

CONFIG_NAMESPACE = "spatial"
DEFAULT_SRID_KEY = f"{CONFIG_NAMESPACE}.default_srid"
UNSET_SRID = 0


def _default_values() -> dict[str, Any]:
    return {CONFIG_NAMESPACE: {"default_srid": None}}


@runtime_checkable
class ConfigProvider(Protocol):
    """Anything that can look up a configuration value by dotted key."""

    def get(self, key: str, default: Any = None) -> Any:
        ...


class ConfigRepository:
    """Stores nested configuration values addressed by dotted keys, such as
    ``"spatial.default_srid"``.
    """

    def __init__(self, items: Optional[dict[str, Any]] = None) -> None:
        self._items: dict[str, Any] = copy.deepcopy(items) if items else {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items!r})"

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for key or default if any segment of the key is missing."""
        node: Any = self._items
        for segment in key.split("."):
            if not isinstance(node, dict) or segment not in node:
                return default
            node = node[segment]
        return node

    def has(self, key: str) -> bool:
        """Return True if the key is present, even if its value is None."""
        sentinel = object()
        return self.get(key, sentinel) is not sentinel

    def set(self, key: str, value: Any) -> None:
        """Set the value for key, creating intermediate sections as needed."""
        *parents, leaf = key.split(".")
        node = self._items
        for segment in parents:
            child = node.get(segment)
            if not isinstance(child, dict):
                child = {}
                node[segment] = child
            node = child
        node[leaf] = value
        logger.debug("Set config {}={!r}", key, value)

    def forget(self, key: str) -> bool:
        """Remove the key. Returns True if it was present."""
        *parents, leaf = key.split(".")
        node: Any = self._items
        for segment in parents:
            node = node.get(segment) if isinstance(node, dict) else None
        if isinstance(node, dict) and leaf in node:
            del node[leaf]
            logger.debug("Removed config {}", key)
            return True
        return False

    def merge(self, data: dict[str, Any], prefix: str = "") -> None:
        """Recursively merge data into the store. Nested dictionaries are merged, other values
        replace existing ones.
        """
        for name, value in data.items():
            key = f"{prefix}.{name}" if prefix else name
            if isinstance(value, dict) and isinstance(self.get(key), dict):
                self.merge(value, prefix=key)
            else:
                self.set(key, copy.deepcopy(value))

    def all(self) -> dict[str, Any]:
        """Return a copy of all stored values."""
        return copy.deepcopy(self._items)

    def to_json(self, filename: Path | str, overwrite=False, indent=None) -> None:
        """Write the configuration to a JSON file.

        Parameters
        ----------
        filename : Path | str
            Filename to write. If the parent directory does not exist, it will be created.
        overwrite : bool
            Set to True to overwrite the file if it already exists.
        indent : int | None
            Indentation level in the JSON file. Defaults to no indentation.

        Examples
        --------
        >>> config.to_json("settings/spatial.json")
        INFO: Wrote configuration to settings/spatial.json
        """
        if isinstance(filename, str):
            filename = Path(filename)
        if filename.exists() and not overwrite:
            msg = f"{filename=} already exists. Choose a different path or set overwrite=True."
            raise SpatialFileExists(msg)

        if not filename.parent.exists():
            filename.parent.mkdir(parents=True)

        with open(filename, "w", encoding="utf-8") as f_out:
            json.dump(self._items, f_out, indent=indent)
            logger.info("Wrote configuration to {}", filename)

    @classmethod
    def from_json(cls, filename: Path | str) -> "ConfigRepository":
        """Read a configuration from a JSON file. Values missing from the file keep the package
        defaults.

        Examples
        --------
        >>> config = ConfigRepository.from_json("settings/spatial.json")
        """
        with open(filename, encoding="utf-8") as f_in:
            data = json.load(f_in)
        if not isinstance(data, dict):
            msg = f"{filename} must contain a JSON object, not {type(data).__name__}"
            raise SpatialConfigError(msg)
        repo = cls(_default_values())
        repo.merge(data)
        logger.debug("Loaded configuration from {}", filename)
        return repo


class SpatialSettings(SpatialBaseModel):
    """Settings stored in the ``spatial`` configuration namespace."""

    default_srid: Annotated[
        Optional[StrictInt],
        Field(ge=0, description="SRID assigned to points constructed without one"),
    ] = None

    @classmethod
    def from_config(cls, config: Optional[ConfigProvider] = None) -> "SpatialSettings":
        """Validate the settings in the namespace of config, the global config by default.

        Raises
        ------
        SpatialConfigError
            Raised if a stored value is invalid.
        """
        provider = get_config() if config is None else config
        data = provider.get(CONFIG_NAMESPACE) or {}
        if not isinstance(data, dict):
            msg = f"Config section {CONFIG_NAMESPACE!r} must be a mapping: {data!r}"
            raise SpatialConfigError(msg)
        return cls.from_values({k: v for k, v in data.items() if k in cls.model_fields})

    @classmethod
    def from_values(cls, values: dict[str, Any]) -> "SpatialSettings":
        """Validate settings given as field values.

        Raises
        ------
        SpatialConfigError
            Raised if a value is invalid.
        """
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            msg = f"Invalid {CONFIG_NAMESPACE!r} configuration: {e}"
            raise SpatialConfigError(msg) from e


_config = ConfigRepository(_default_values())


def get_config() -> ConfigRepository:
    """Return the process-wide configuration."""
    return _config


def set_config(config: ConfigRepository) -> None:
    """Replace the process-wide configuration."""
    global _config
    _config = config
    logger.debug("Replaced global configuration")


def reset_config() -> None:
    """Restore the process-wide configuration to the package defaults."""
    set_config(ConfigRepository(_default_values()))


def resolve_default_srid(config: Optional[ConfigProvider] = None) -> int:
    """Return the SRID to assign to a point constructed without one.

    The configured ``spatial.default_srid`` is used when it is set, otherwise 0. The value is
    read on every call so that configuration changes apply to the next point.

    Raises
    ------
    SpatialConfigError
        Raised if the configured value is not a non-negative integer.
    """
    provider = get_config() if config is None else config
    value = provider.get(DEFAULT_SRID_KEY)
    srid = SpatialSettings.from_values({"default_srid": value}).default_srid
    if srid is None:
        return UNSET_SRID

    logger.debug("Resolved default SRID {} from {}", srid, DEFAULT_SRID_KEY)
    return srid
