import importlib.metadata as metadata

from loguru import logger

logger.disable("spatial_types")

__version__ = metadata.metadata("spatial-types")["Version"]

from .config import (
    ConfigProvider,
    ConfigRepository,
    SpatialSettings,
    get_config,
    reset_config,
    resolve_default_srid,
    set_config,
)
from .point import Point, PointFactory

__all__ = (
    "ConfigProvider",
    "ConfigRepository",
    "Point",
    "PointFactory",
    "SpatialSettings",
    "get_config",
    "reset_config",
    "resolve_default_srid",
    "set_config",
)
