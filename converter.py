from __future__ import annotations

import datetime
import enum
import json
import math
import re
from typing import Any, BinaryIO, Dict, Iterable, Tuple

import yaml
from yaml.constructor import ConstructorError

from output import write_or_exit


class Style(enum.Enum):
    PRETTY = "pretty"
    COMPACT = "compact"

    @classmethod
    def from_pretty(cls, pretty: bool) -> "Style":
        return cls.PRETTY if pretty else cls.COMPACT


class ConversionError(Exception):
    """A single document could not be rendered as JSON."""


_CORE_BOOL = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")
_CORE_INT = re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$")
_CORE_FLOAT = re.compile(
    r"""^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?
    |[-+]?\.(?:inf|Inf|INF)
    |\.(?:nan|NaN|NAN))$""",
    re.X,
)
_REPLACED_TAGS = {
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
    "tag:yaml.org,2002:value",
}


class CoreSchemaLoader(yaml.SafeLoader):
    """Safe loader resolving plain scalars with the YAML 1.2 core schema.

    Only ``true``/``false`` are booleans, ``0o`` and ``0x`` prefix octal and
    hex integers, a leading zero is decimal, and unquoted dates stay strings.
    """


CoreSchemaLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _REPLACED_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
CoreSchemaLoader.add_implicit_resolver("tag:yaml.org,2002:bool", _CORE_BOOL, list("tTfF"))
CoreSchemaLoader.add_implicit_resolver("tag:yaml.org,2002:int", _CORE_INT, list("-+0123456789"))
CoreSchemaLoader.add_implicit_resolver("tag:yaml.org,2002:float", _CORE_FLOAT, list("-+0123456789."))


def _construct_core_int(loader: CoreSchemaLoader, node: yaml.ScalarNode) -> int:
    value = loader.construct_scalar(node)

    try:
        if value.startswith("0o"):
            return int(value[2:], 8)
        if value.startswith("0x"):
            return int(value[2:], 16)
        return int(value, 10)
    except ValueError as exc:
        raise ConstructorError(
            None, None, f"invalid integer {value!r}", node.start_mark
        ) from exc


CoreSchemaLoader.add_constructor("tag:yaml.org,2002:int", _construct_core_int)


def _json_key(key: Any) -> str:
    """Return the object key JSON would use for a YAML mapping key."""

    if isinstance(key, (datetime.date, datetime.datetime)):
        return key.isoformat()

    if isinstance(key, bool):
        return "true" if key else "false"

    if key is None:
        return "null"

    if isinstance(key, str):
        return key

    if isinstance(key, int):
        return str(key)

    if isinstance(key, float):
        if not math.isfinite(key):
            raise ConversionError(f"non-finite mapping key {key!r}")
        return repr(key)

    raise ConversionError(f"unsupported mapping key of type {type(key).__name__}: {key!r}")


def _normalize_mapping(items: Iterable[Tuple[Any, Any]]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, item in items:
        json_key = _json_key(key)
        if json_key in result:
            raise ConversionError(f"duplicate key {json_key!r} after converting mapping keys to strings")
        result[json_key] = item
    return result


def _normalize(value: Any) -> Any:
    """Map the values produced by the loader onto JSON types."""

    if isinstance(value, dict):
        return _normalize_mapping((key, _normalize(item)) for key, item in value.items())

    if isinstance(value, set):
        # sets are unordered; sort so repeated runs print identical output
        return dict(sorted(_normalize_mapping((key, None) for key in value).items()))

    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]

    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()

    if isinstance(value, bytes):
        raise ConversionError("binary values cannot be represented as JSON")

    return value


class Yaml2Json:
    """Convert single YAML documents into JSON text."""

    def __init__(self, style: Style = Style.COMPACT) -> None:
        self.style = style

    def _dump_kwargs(self) -> dict[str, Any]:
        if self.style is Style.PRETTY:
            return {"indent": 2}

        return {"separators": (",", ":")}

    def document_to_string(self, document: str) -> str:
        try:
            value = _normalize(yaml.load(document, Loader=CoreSchemaLoader))
            return json.dumps(value, ensure_ascii=False, allow_nan=False, **self._dump_kwargs())
        except ConversionError:
            raise
        except yaml.YAMLError as exc:
            raise ConversionError(str(exc)) from exc
        except (TypeError, ValueError) as exc:
            raise ConversionError(f"JSON conversion error: {exc}") from exc
        except RecursionError as exc:
            raise ConversionError("document is nested too deeply") from exc

    def document_to_writer(self, document: str, sink: BinaryIO) -> None:
        """Convert ``document`` and write the JSON text to ``sink``.

        The document is fully serialised before anything is written, so a
        failing document leaves ``sink`` untouched.
        """

        write_or_exit(sink, self.document_to_string(document))
