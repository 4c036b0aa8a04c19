"""
Registration tables loaded from YAML config files.

A table maps element names to service object types. Each entry names the type and whether items of that type
can be built from an item attachment:

    CalendarItem:
      type: APPOINTMENT
      attachment: true

Tables are loaded via load_registry(name). Configs live in the package configs/ directory.
"""

import logging
from importlib import resources
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from ..objects.enums import ServiceObjectType
from ..objects.service_objects import OBJECT_CLASS_REGISTRY, Item
from .registry import ServiceObjectRegistry, ServiceObjectRegistryError

logger = logging.getLogger(__name__)


class RegistryConfigError(Exception):
    """Raised when a registration table YAML config is invalid or incomplete."""


class RegistrationSpec(BaseModel):
    """Schema for a single registration in YAML config."""

    type: str = Field(..., min_length=1)
    attachment: bool = False

    model_config = {"extra": "forbid"}


def _resolve_type(type_name: str, xml_element_name: str) -> ServiceObjectType:
    """Resolve 'APPOINTMENT' (member name) or 'Appointment' (value) to ServiceObjectType.APPOINTMENT."""
    if type_name in ServiceObjectType.__members__:
        return ServiceObjectType[type_name]
    try:
        return ServiceObjectType(type_name)
    except ValueError:
        raise RegistryConfigError(
            f"Unknown service object type {type_name!r} for element {xml_element_name!r}. "
            f"Known: {[t.name for t in ServiceObjectType]}."
        ) from None


def _register_entry(registry: ServiceObjectRegistry, xml_element_name: str, raw: dict[str, Any]) -> None:
    """Validate one raw YAML entry and register it."""
    spec = RegistrationSpec.model_validate(raw)
    object_type = _resolve_type(spec.type, xml_element_name)
    cls = OBJECT_CLASS_REGISTRY[object_type]

    attachment_constructor = None
    if spec.attachment:
        if not issubclass(cls, Item):
            raise RegistryConfigError(
                f"{object_type.value} for element {xml_element_name!r} "
                f"cannot be created from an item attachment."
            )
        attachment_constructor = cls.from_attachment

    registry.register(xml_element_name, object_type, cls, attachment_constructor)


def _config_text(name: str, config_dir: Optional[Path]) -> str:
    """Read <name>.yaml from config_dir, or from the package configs/ directory."""
    if config_dir is None:
        source = resources.files("ews_registry") / "configs"
    else:
        source = config_dir
    try:
        return (source / f"{name}.yaml").read_text()
    except FileNotFoundError as e:
        logger.error("Config %s not found in %s", name, source)
        raise RegistryConfigError(f"Config {name!r} not found in {source}.") from e


def _read_table(name: str, config_dir: Optional[Path]) -> dict[Any, Any]:
    """Parse a registration table and check that its root is a non-empty mapping."""
    try:
        table = yaml.safe_load(_config_text(name, config_dir))
    except yaml.YAMLError as e:
        logger.error("Invalid YAML in config %s: %s", name, e)
        raise RegistryConfigError(f"Invalid YAML in config {name!r}: {e}.") from e

    if not isinstance(table, dict):
        raise RegistryConfigError(
            f"Config {name!r} root must be a mapping, got {type(table).__name__}."
        )
    if not table:
        raise RegistryConfigError(f"Config {name!r} is empty.")
    return table


def load_registry(
    name: str,
    config_dir: Optional[Path] = None,
) -> ServiceObjectRegistry:
    """Load a service object registry from YAML config by name.

    Args:
        name: Config file name without extension (e.g. 'ews_standard').
        config_dir: Optional directory for config files (used in tests). If None, loads from package configs/.

    Returns:
        ServiceObjectRegistry populated only with the config's registrations.

    Raises:
        RegistryConfigError: If config is invalid, incomplete, or not found.
    """
    registry = ServiceObjectRegistry(populate=False)
    for xml_element_name, entry_raw in _read_table(name, config_dir).items():
        if not isinstance(entry_raw, dict):
            raise RegistryConfigError(
                f"Element {xml_element_name!r} must be a mapping, got {type(entry_raw).__name__}."
            )
        try:
            _register_entry(registry, str(xml_element_name), entry_raw)
        except (ValueError, ServiceObjectRegistryError) as e:
            logger.error("Invalid registration for element %s in config %s: %s", xml_element_name, name, e)
            raise RegistryConfigError(
                f"Invalid registration for element {xml_element_name!r}: {e}"
            ) from e

    logger.debug("Loaded %d registrations from config %s", len(registry), name)
    return registry
