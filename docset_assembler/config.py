"""
config.py
=========
Configuration for a docset build.

A ``DocsetConfig`` is normally built by the command line front end, either
from flags or from a YAML file loaded with ``load_config``::

    documentation: build/html
    name: MyLib
    icon: icon.png
    entries:
      - {name: foo, type: Function, path: "api.html#foo"}

Relative paths inside the file are resolved against the file's directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from .errors import ConfigurationError

log = logging.getLogger(__name__)

DEFAULT_INDEX = "index.html"

# Keys accepted in config files under their camelCase spelling.
_KEY_ALIASES = {
    "enableJavascript": "enable_javascript",
    "platformFamily": "platform_family",
    "fallbackUrl": "fallback_url",
    "indexPages": "index_pages",
}
_PATH_KEYS = ("documentation", "destination", "icon")


@dataclass(frozen=True)
class SearchEntry:
    """One row of the search index."""

    name: str
    type: str
    path: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SearchEntry":
        try:
            return cls(str(data["name"]), str(data["type"]), str(data["path"]))
        except KeyError as exc:
            raise ConfigurationError(
                f"Search entry {dict(data)!r} is missing the {exc.args[0]!r} key"
            ) from exc
        except TypeError as exc:
            raise ConfigurationError(f"Search entry must be a mapping, got {data!r}") from exc


def coerce_entries(items: Iterable[Any]) -> list[SearchEntry]:
    """Turn mappings and ``(name, type, path)`` tuples into ``SearchEntry`` objects."""
    entries: list[SearchEntry] = []
    for item in items:
        if isinstance(item, SearchEntry):
            entries.append(item)
        elif isinstance(item, Mapping):
            entries.append(SearchEntry.from_mapping(item))
        elif isinstance(item, (tuple, list)) and len(item) == 3:
            entries.append(SearchEntry(*(str(part) for part in item)))
        else:
            raise ConfigurationError(f"Cannot interpret {item!r} as a search entry")
    return entries


@dataclass
class DocsetConfig:
    """
    Everything needed to build one docset.

    Default rules
    -------------
    - ``destination`` defaults to ``documentation``: the bundle is created
      next to the documentation's own contents (the original tree ends up
      inside the bundle's Documents folder).
    - ``identifier`` and ``platform_family`` default to ``name``.
    """

    documentation: str | Path
    name: str
    destination: str | Path | None = None
    identifier: str | None = None
    index: str = DEFAULT_INDEX
    enable_javascript: bool = False
    platform_family: str | None = None
    icon: str | Path | None = None
    entries: list[SearchEntry] = field(default_factory=list)
    verbose: bool = False
    fallback_url: str | None = None
    keyword: str | None = None
    index_pages: bool = False

    def __post_init__(self) -> None:
        if self.destination is None:
            self.destination = self.documentation
        if self.identifier is None:
            self.identifier = self.name
        if self.platform_family is None:
            self.platform_family = self.name
        self.entries = coerce_entries(self.entries or [])


def _normalise_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(DocsetConfig)}
    result: dict[str, Any] = {}
    for key, value in data.items():
        key = _KEY_ALIASES.get(key, key)
        if key not in known:
            raise ConfigurationError(f"Unknown configuration key: {key!r}")
        result[key] = value
    return result


def load_entries(path: str | Path) -> list[SearchEntry]:
    """Load a list of search entries from a YAML (or JSON) file."""
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Cannot read entries file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return []
    if not isinstance(data, list):
        raise ConfigurationError(f"{path} must contain a list of entries")
    return coerce_entries(data)


def load_config(path: str | Path, **overrides: Any) -> DocsetConfig:
    """
    Read a YAML config file and return a ``DocsetConfig``.

    Keyword arguments that are not ``None`` override the values from the file.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"{path} must contain a mapping at the top level")

    values = _normalise_keys(data)
    base_dir = path.parent.resolve()
    for key in _PATH_KEYS:
        if values.get(key) is None:
            continue
        if not str(values[key]).strip():
            raise ConfigurationError(f"{key!r} in {path} is blank")
        values[key] = base_dir / Path(values[key]).expanduser()

    values.update({k: v for k, v in _normalise_keys(overrides).items() if v is not None})
    log.debug("Loaded configuration from %s", path)

    if values.get("documentation") is None or values.get("name") is None:
        raise ConfigurationError(
            "Configuration needs both 'documentation' and 'name'"
        )
    return DocsetConfig(**values)
