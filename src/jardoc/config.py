"""Configuration management for jardoc extraction."""

from dataclasses import dataclass
from pathlib import Path

import yaml

from jardoc.parsers.typescript_parser import DEFAULT_COMPONENT_DECORATOR, DEFAULT_MODULE_DECORATOR

CONFIG_FILE_NAME = ".jardoc"

DEFAULT_INCLUDE_PATTERNS = (r"\.ts$",)
DEFAULT_EXCLUDE_PATTERNS = (r"\.spec\.ts$", r"\.test\.ts$", r"\.d\.ts$")


@dataclass
class JardocConfig:
    """Settings for source discovery, parsing and inheritance merging.

    Attributes:
        include_patterns: Regular expressions a root-relative file path must
            match (any of) to be analyzed.
        exclude_patterns: Regular expressions that drop a matching file path.
        component_decorator: Decorator name registering a view component.
        module_decorator: Decorator name registering a module.
        member_merge: How ancestor members are merged into a subclass API,
            "concatenate" or "override".
        url_prefix: Prefix added to navigation link paths.
    """
    include_patterns: tuple[str, ...] = DEFAULT_INCLUDE_PATTERNS
    exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS
    component_decorator: str = DEFAULT_COMPONENT_DECORATOR
    module_decorator: str = DEFAULT_MODULE_DECORATOR
    member_merge: str = "concatenate"
    url_prefix: str = ""


def _section(data: dict, name: str) -> dict:
    section = data.get(name, {})
    return section if isinstance(section, dict) else {}


def _patterns(value, default: tuple[str, ...]) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    return default


def load_config(project_root: Path | None = None) -> JardocConfig:
    """Load extraction configuration from a .jardoc file in the project root.

    Args:
        project_root: Path to the project root. If None, uses current directory.

    Returns:
        JardocConfig object with loaded or default values.

    Notes:
        If the .jardoc file doesn't exist or can't be parsed, returns the
        default config. Expected YAML structure:

        ```yaml
        sources:
          include: ['\\.ts$']
          exclude: ['\\.spec\\.ts$', '\\.test\\.ts$']
        parser:
          component_decorator: Component
          module_decorator: NgModule
        inheritance:
          member_merge: concatenate
        navigation:
          url_prefix: ''
        ```
    """
    if project_root is None:
        project_root = Path.cwd()

    config_path = project_root / CONFIG_FILE_NAME

    if not config_path.exists():
        return JardocConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            return JardocConfig()

        sources = _section(data, "sources")
        parser = _section(data, "parser")
        inheritance = _section(data, "inheritance")
        navigation = _section(data, "navigation")

        return JardocConfig(
            include_patterns=_patterns(sources.get("include"), DEFAULT_INCLUDE_PATTERNS),
            exclude_patterns=_patterns(sources.get("exclude"), DEFAULT_EXCLUDE_PATTERNS),
            component_decorator=str(parser.get("component_decorator", JardocConfig.component_decorator)),
            module_decorator=str(parser.get("module_decorator", JardocConfig.module_decorator)),
            member_merge=str(inheritance.get("member_merge", JardocConfig.member_merge)),
            url_prefix=str(navigation.get("url_prefix") or JardocConfig.url_prefix),
        )
    except (yaml.YAMLError, OSError, KeyError, TypeError, ValueError):
        # Return default config on any parsing errors
        return JardocConfig()
