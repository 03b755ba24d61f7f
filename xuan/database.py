"""In-memory store of Unihan character records."""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .codes import unicode_to_rune

_REPLACEMENT = 0xFFFD


def _char_of(code_point: int) -> str:
    """Return the character for ``code_point``, or U+FFFD when it is invalid."""
    if 0 <= code_point <= 0x10FFFF and not 0xD800 <= code_point <= 0xDFFF:
        return chr(code_point)
    return chr(_REPLACEMENT)


def _sorted_map(mapping: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if mapping is None:
        return None
    return {key: mapping[key] for key in sorted(mapping)}


def _to_json(obj: Any) -> str:
    text = json.dumps(obj, indent=2, ensure_ascii=False)
    return (
        text.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


@dataclass
class Properties:
    """Property groups of a character; a group is None until it gets data."""

    irg_sources: Optional[Dict[str, List[str]]] = None
    other_mappings: Optional[Dict[str, List[str]]] = None
    dictionary_indices: Optional[Dict[str, List[str]]] = None
    readings: Optional[Dict[str, str]] = None
    dictionary_like_data: Optional[Dict[str, List[str]]] = None
    radical_stroke_counts: Optional[Dict[str, List[str]]] = None
    variants: Optional[Dict[str, List[str]]] = None
    numeric_values: Optional[Dict[str, List[str]]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the properties as a JSON-ready mapping."""
        return {
            "IRGSources": _sorted_map(self.irg_sources),
            "OtherMappings": _sorted_map(self.other_mappings),
            "DictionaryIndices": _sorted_map(self.dictionary_indices),
            "readings": _sorted_map(self.readings),
            "DictionaryLikeData": _sorted_map(self.dictionary_like_data),
            "RadicalStrokeCounts": _sorted_map(self.radical_stroke_counts),
            "variants": _sorted_map(self.variants),
            "numeric_values": _sorted_map(self.numeric_values),
        }


@dataclass
class Han:
    """A single Han character and its Unihan properties."""

    code_point: int
    unicode: str
    value: str = ""
    properties: Properties = field(default_factory=Properties)

    def __post_init__(self) -> None:
        if not self.value:
            self.value = _char_of(self.code_point)

    def to_dict(self) -> Dict[str, Any]:
        """Return the record as a JSON-ready mapping."""
        return {
            "code_point": self.code_point,
            "unicode": self.unicode,
            "value": self.value,
            "properties": self.properties.to_dict(),
        }

    def dump(self) -> str:
        """Return the record as indented JSON."""
        return _to_json(self.to_dict())


class HanDatabase:
    """Thread-safe mapping of code points to :class:`Han` records."""

    def __init__(self) -> None:
        self._records: Dict[int, Han] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def count(self) -> int:
        """Return the number of characters held."""
        return len(self)

    def dump(self) -> str:
        """Return the whole database as indented JSON keyed by code point."""
        with self._lock:
            items = sorted(self._records.items(), key=lambda item: str(item[0]))
            payload = {str(key): han.to_dict() for key, han in items}
        return _to_json(payload)

    def get_or_create(self, code_point: int, unicode: str) -> Han:
        """Return the record for ``code_point``, creating it if absent."""
        with self._lock:
            han = self._records.get(code_point)
            if han is None:
                han = Han(code_point=code_point, unicode=unicode)
                self._records[code_point] = han
            return han

    def get_by_unicode(self, unicode: str) -> Optional[Han]:
        """Look a character up by its ``U+XXXX`` notation."""
        with self._lock:
            return self._records.get(unicode_to_rune(unicode))

    def get_by_code_point(self, code_point: int) -> Optional[Han]:
        """Look a character up by its numeric code point."""
        if code_point <= 0:
            return None
        with self._lock:
            return self._records.get(code_point)

    def get_by_value(self, value: str) -> Optional[Han]:
        """Look a character up by the first character of ``value``.

        An empty string or a lone surrogate counts as U+FFFD.
        """
        code_point = ord(value[0]) if value else _REPLACEMENT
        if 0xD800 <= code_point <= 0xDFFF:
            code_point = _REPLACEMENT
        return self.get_by_code_point(code_point)

    def _iter_records(self) -> Iterator[Han]:
        with self._lock:
            records = list(self._records.values())
        return iter(records)