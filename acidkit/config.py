"""Named, typed configuration variables loaded from YAML."""

from __future__ import annotations

import itertools
import logging
import os
import threading
from collections.abc import Callable, Iterator
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_VALID_NAME_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz0123456789._")
_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})
_SEQUENCE_TYPES = (list, tuple, set, frozenset)
_MISSING = object()

Listener = Callable[[Any, Any], None]


def _is_valid_name(name: str) -> bool:
    return all(ch in _VALID_NAME_CHARS for ch in name)


def _plain(value: Any) -> Any:
    """Turn a value into something yaml.safe_dump can write."""
    if isinstance(value, (set, frozenset)):
        return [_plain(item) for item in sorted(value)]
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _plain(item) for key, item in value.items()}
    return value


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, int):
        return str(value)
    return _dump(value)


def _dump(value: Any) -> str:
    return yaml.safe_dump(_plain(value), default_flow_style=False, sort_keys=True).rstrip("\n")


def _to_text(value: Any) -> str:
    if isinstance(value, (dict, *_SEQUENCE_TYPES)):
        return _dump(value)
    return _scalar_text(value)


def _parse_bool(text: str) -> bool:
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"cannot convert {text!r} to bool")


def _first(collection: Any) -> Any:
    return next(iter(collection), None)


def _convert(node: Any, template: Any) -> Any:
    """Convert a parsed YAML node to the type of ``template``."""
    if template is None:
        return node
    if isinstance(template, bool):
        if isinstance(node, bool):
            return node
        if isinstance(node, int) and node in (0, 1):
            return bool(node)
        if isinstance(node, str):
            return _parse_bool(node)
        raise ValueError(f"cannot convert {node!r} to bool")
    if isinstance(template, int):
        if isinstance(node, bool):
            raise ValueError(f"cannot convert {node!r} to int")
        if isinstance(node, int):
            return node
        if isinstance(node, str):
            return int(node)
        raise ValueError(f"cannot convert {node!r} to int")
    if isinstance(template, float):
        if isinstance(node, bool):
            raise ValueError(f"cannot convert {node!r} to float")
        if isinstance(node, (int, float, str)):
            return float(node)
        raise ValueError(f"cannot convert {node!r} to float")
    if isinstance(template, str):
        return "" if node is None else _to_text(node)
    if isinstance(template, _SEQUENCE_TYPES):
        if node is None:
            node = []
        if not isinstance(node, list):
            raise ValueError(f"expected a sequence, got {node!r}")
        element = _first(template)
        return type(template)(_convert(item, element) for item in node)
    if isinstance(template, dict):
        if node is None:
            node = {}
        if not isinstance(node, dict):
            raise ValueError(f"expected a mapping, got {node!r}")
        element = _first(template.values())
        return type(template)(
            (str(key), _convert(item, element)) for key, item in node.items()
        )
    return node


def _from_text(text: str, template: Any) -> Any:
    if isinstance(template, str):
        return text
    if isinstance(template, (bool, int, float)):
        return _convert(text, template)
    return _convert(yaml.safe_load(text), template)


class ConfigVar:
    """A named configuration value with change listeners."""

    _listener_ids = itertools.count(1)

    def __init__(self, name: str, value: Any, description: str = "") -> None:
        self.name = name
        self.description = description
        self._value = value
        self._listeners: dict[int, Listener] = {}
        self._lock = threading.RLock()

    @property
    def type_name(self) -> str:
        """Name of the held value's type."""
        return type(self._value).__name__

    def to_string(self) -> str:
        """Text form of the value, or an empty string if it cannot be written."""
        try:
            with self._lock:
                return _to_text(self._value)
        except (ValueError, TypeError, yaml.YAMLError) as exc:
            logger.error("ConfigVar.to_string() exception %s convert: %s to string",
                         exc, self.type_name)
        return ""

    def from_string(self, text: str) -> bool:
        """Set the value from text; return False (value unchanged) if it does not parse."""
        try:
            with self._lock:
                template = self._value
            self.value = _from_text(text, template)
            return True
        except (ValueError, TypeError, yaml.YAMLError) as exc:
            logger.error("ConfigVar.from_string() exception %s convert: string to %s",
                         exc, self.type_name)
        return False

    @property
    def value(self) -> Any:
        with self._lock:
            return self._value

    @value.setter
    def value(self, new: Any) -> None:
        with self._lock:
            if new == self._value:
                return
            for callback in list(self._listeners.values()):
                callback(self._value, new)
            self._value = new

    def add_listener(self, callback: Listener) -> int:
        """Register ``callback(old, new)`` and return its key."""
        with self._lock:
            key = next(ConfigVar._listener_ids)
            self._listeners[key] = callback
            return key

    def del_listener(self, key: int) -> None:
        with self._lock:
            self._listeners.pop(key, None)

    def clear_listener(self) -> None:
        with self._lock:
            self._listeners.clear()

    def get_listener(self, key: int) -> Listener | None:
        with self._lock:
            return self._listeners.get(key)

    def __repr__(self) -> str:
        return f"ConfigVar({self.name!r}, {self._value!r})"


class Config:
    """Registry of configuration variables by dotted lower-case name."""

    def __init__(self) -> None:
        self._vars: dict[str, ConfigVar] = {}
        self._lock = threading.RLock()

    def lookup(self, name: str, default: Any = _MISSING, description: str = "") -> ConfigVar | None:
        """Find a variable, creating it from ``default`` if given.

        Without ``default`` a missing name gives None. With it, an existing
        variable of a different type gives None. Names may hold only
        lower-case letters, digits, '.' and '_'; others raise ValueError.
        """
        with self._lock:
            existing = self._vars.get(name)
            if default is _MISSING:
                return existing
            if existing is not None:
                if type(existing.value) is type(default):
                    logger.info("lookup name=%s already exist", name)
                    return existing
                logger.error(
                    "lookup name=%s already exist but type not %s real type=%s value: %s",
                    name, type(default).__name__, existing.type_name, existing.to_string(),
                )
                return None
            if not _is_valid_name(name):
                logger.error("lookup invalid name %s", name)
                raise ValueError(name)
            var = ConfigVar(name, default, description)
            self._vars[name] = var
            return var

    def lookup_base(self, name: str) -> ConfigVar | None:
        with self._lock:
            return self._vars.get(name)

    def load_from_yaml(self, root: Any) -> None:
        """Apply a parsed YAML document to the variables already registered."""
        for key, node in self._members("", root):
            if not key:
                continue
            var = self.lookup_base(key.lower())
            if var is None:
                continue
            if isinstance(node, (dict, list)) or node is None:
                var.from_string(_dump(node))
            else:
                var.from_string(_scalar_text(node))

    def load_from_file(self, path: str | os.PathLike[str]) -> None:
        """Read a YAML file and apply it."""
        with open(path, encoding="utf-8") as fh:
            root = yaml.safe_load(fh)
        self.load_from_yaml(root)

    def visit(self, callback: Callable[[ConfigVar], None]) -> None:
        """Call ``callback`` on every variable, in name order."""
        with self._lock:
            variables = [self._vars[name] for name in sorted(self._vars)]
        for var in variables:
            callback(var)

    def _members(self, prefix: str, node: Any) -> Iterator[tuple[str, Any]]:
        if not _is_valid_name(prefix):
            logger.error("config invalid name : %s : %r", prefix, node)
            return
        yield prefix, node
        if isinstance(node, dict):
            for key, child in node.items():
                name = str(key) if not prefix else f"{prefix}.{key}"
                yield from self._members(name, child)