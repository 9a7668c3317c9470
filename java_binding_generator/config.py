"""
XML configuration file parsing for the Java bindings generator
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .constants import (
    DEFAULT_EXPORT_MARKER,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_RUNTIME_CRATE,
    DEFAULT_SYMBOL_PREFIX,
)


@dataclass
class BindingConfig:
    """Configuration for Java bindings generation"""
    source: str = "."
    library: str | None = None
    output: str = DEFAULT_OUTPUT_DIR
    entities: list[str] = field(default_factory=list)
    symbol_prefix: str = DEFAULT_SYMBOL_PREFIX
    runtime_crate: str = DEFAULT_RUNTIME_CRATE
    export_marker: str = DEFAULT_EXPORT_MARKER
    package: str | None = None


def _attribute(element, name: str, default=None):
    value = element.get(name)
    if value is None:
        return default
    value = value.strip()
    if not value:
        raise ValueError(f"Attribute '{name}' on <{element.tag}> must not be empty")
    return value


def parse_config_file(config_path) -> BindingConfig:
    """Parse XML configuration file and return BindingConfig object"""
    try:
        tree = ET.parse(config_path)
        root = tree.getroot()

        if root.tag != "bindings":
            raise ValueError(f"Expected root element 'bindings', got '{root.tag}'")

        config = BindingConfig()
        config.source = _attribute(root, "source", config.source)
        config.library = _attribute(root, "library")
        config.output = _attribute(root, "output", config.output)
        config.symbol_prefix = _attribute(root, "prefix", config.symbol_prefix)
        config.runtime_crate = _attribute(root, "runtime", config.runtime_crate)
        config.export_marker = _attribute(root, "marker", config.export_marker)
        config.package = _attribute(root, "package")

        for entity in root.findall("entity"):
            name = entity.get("name")
            if not name or not name.strip():
                raise ValueError("Entity element missing 'name' attribute")
            config.entities.append(name.strip())

        return config

    except ET.ParseError as e:
        raise ValueError(f"XML parsing error: {e}")
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
