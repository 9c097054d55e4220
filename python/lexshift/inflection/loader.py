"""
Load extra inflection rules from YAML.

Format (every section optional):

    plurals:
      - {pattern: "(quiz)$", replacement: "\\1zes"}
    singulars:
      - {pattern: "(quiz)zes$", replacement: "\\1"}
    irregulars:
      - {singular: person, plural: people}
    uncountables:
      - sheep
      - {word: equipment}
    acronyms:
      - HTML
      - {key: phd, value: PhD}
    humans:
      - {pattern: "_cnt$", replacement: "_count"}
    clear: [plurals]          # scopes to empty before loading

Entries are registered in file order, so later entries take priority.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from ..errors import ConfigurationError
from .constants import SCOPES
from .engine import InflectionEngine
from .tables import Inflections

logger = logging.getLogger(__name__)

SECTIONS = ("clear", "plurals", "singulars", "irregulars", "uncountables", "acronyms", "humans")


def _entries(data: Mapping[str, Any], section: str) -> list:
    entries = data.get(section) or []
    if not isinstance(entries, list):
        raise ConfigurationError(f"'{section}' must be a list, got {type(entries).__name__}")
    return entries


def _fields(entry: Any, section: str, *names: str, optional: tuple[str, ...] = ()) -> list:
    if not isinstance(entry, Mapping):
        raise ConfigurationError(f"Entries in '{section}' must be mappings, got {entry!r}")
    missing = [name for name in names if name not in entry]
    if missing:
        raise ConfigurationError(f"Entry {dict(entry)!r} in '{section}' is missing {', '.join(missing)}")
    unknown = set(entry) - set(names) - set(optional)
    if unknown:
        raise ConfigurationError(f"Entry {dict(entry)!r} in '{section}' has unknown keys {', '.join(sorted(unknown))}")
    return [entry[name] for name in names] + [entry.get(name) for name in optional]


def _word(entry: Any, section: str, field_name: str) -> str:
    if isinstance(entry, str):
        return entry
    (word,) = _fields(entry, section, field_name)
    if not isinstance(word, str):
        raise ConfigurationError(f"'{field_name}' in '{section}' must be a string, got {word!r}")
    return word


def apply_config(inflect: Inflections, data: Mapping[str, Any]) -> None:
    """
    Register every entry of a parsed config mapping on a builder.

    Raises:
        ConfigurationError: If the mapping has unknown sections or malformed entries
        InvalidRuleError: If a rule or word is rejected by the builder
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Inflection config must be a mapping, got {type(data).__name__}")

    unknown = set(data) - set(SECTIONS)
    if unknown:
        raise ConfigurationError(
            f"Unknown inflection config sections: {', '.join(sorted(map(str, unknown)))}"
        )

    for scope in _entries(data, "clear"):
        if scope != "all" and scope not in SCOPES:
            raise ConfigurationError(f"Unknown scope {scope!r} in 'clear'")
        inflect.clear(scope)

    for entry in _entries(data, "plurals"):
        inflect.plural(*_fields(entry, "plurals", "pattern", "replacement"))
    for entry in _entries(data, "singulars"):
        inflect.singular(*_fields(entry, "singulars", "pattern", "replacement"))
    for entry in _entries(data, "irregulars"):
        inflect.irregular(*_fields(entry, "irregulars", "singular", "plural"))
    for entry in _entries(data, "uncountables"):
        inflect.uncountable(_word(entry, "uncountables", "word"))
    for entry in _entries(data, "acronyms"):
        if isinstance(entry, str):
            inflect.acronym(entry)
        else:
            value, key = _fields(entry, "acronyms", "value", optional=("key",))
            inflect.acronym(value, key=key)
    for entry in _entries(data, "humans"):
        inflect.human(*_fields(entry, "humans", "pattern", "replacement"))


def load_inflections(
    path: Union[str, Path],
    engine: Optional[InflectionEngine] = None,
) -> InflectionEngine:
    """
    Load a YAML inflection config into an engine.

    The whole file is applied as one update: if any entry is invalid, the
    engine keeps its previous tables.

    Args:
        path: YAML file to read
        engine: Engine to update (default: the shared default engine)

    Returns:
        The updated engine

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or is malformed
        InvalidRuleError: If a rule pattern or word is invalid

    Examples:
        >>> engine = load_inflections("config/inflections.yaml")
        >>> engine.pluralize("octopus")
        'octopodes'
    """
    if engine is None:
        from . import default_engine

        engine = default_engine

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read inflection config {path}: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in inflection config {path}: {exc}") from exc

    if data is None:
        logger.info(f"Inflection config {path} is empty, nothing to load")
        return engine

    with engine.configure() as inflect:
        apply_config(inflect, data)

    logger.info(f"Loaded inflection config from {path}")
    return engine
