"""Reading of the Unihan text files into a :class:`HanDatabase`."""

from __future__ import annotations

import os
import re
from enum import Enum
from typing import Optional, Tuple, Union

from .codes import unicode_to_rune
from .database import HanDatabase

_LINE_RE = re.compile(r"(U\+.+?)\s+(k.+?)\s+(.+)", re.ASCII)

PathLike = Union[str, "os.PathLike[str]"]


class UnihanFile(Enum):
    """The Unihan data files, in the order they are loaded."""

    DICTIONARY_INDICES = ("Unihan_DictionaryIndices.txt", "dictionary_indices")
    DICTIONARY_LIKE_DATA = ("Unihan_DictionaryLikeData.txt", "dictionary_like_data")
    IRG_SOURCES = ("Unihan_IRGSources.txt", "irg_sources")
    NUMERIC_VALUES = ("Unihan_NumericValues.txt", "numeric_values")
    OTHER_MAPPINGS = ("Unihan_OtherMappings.txt", "other_mappings")
    RADICAL_STROKE_COUNTS = ("Unihan_RadicalStrokeCounts.txt", "radical_stroke_counts")
    READINGS = ("Unihan_Readings.txt", "readings")
    VARIANTS = ("Unihan_Variants.txt", "variants")

    def __init__(self, filename: str, attribute: str) -> None:
        self.filename = filename
        self.attribute = attribute

    @property
    def single_valued(self) -> bool:
        """True when a later entry replaces an earlier one instead of extending it."""
        return self is UnihanFile.READINGS


def parse_line(line: str) -> Optional[Tuple[str, str, str]]:
    """Split a data line into ``(unicode, key, value)``.

    Blank lines, comments and lines of any other shape give None.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    match = _LINE_RE.search(line)
    if match is None:
        return None
    return match.group(1), match.group(2), match.group(3)


def load_file(database: HanDatabase, path: PathLike, kind: UnihanFile) -> None:
    """Add the entries of one Unihan file of the given kind to ``database``."""
    with open(path, encoding="utf-8", errors="replace") as stream:
        for line in stream:
            parsed = parse_line(line)
            if parsed is None:
                continue
            unicode, key, value = parsed
            code_point = unicode_to_rune(unicode)
            if code_point <= 0:
                continue
            han = database.get_or_create(code_point, unicode)
            group = getattr(han.properties, kind.attribute)
            if group is None:
                group = {}
                setattr(han.properties, kind.attribute, group)
            if kind.single_valued:
                group[key] = value
            else:
                group.setdefault(key, []).extend(value.split())


def load(path: PathLike, database: Optional[HanDatabase] = None) -> HanDatabase:
    """Load every Unihan file from the directory ``path``.

    The entries go into ``database``, or into a new one when none is given;
    the database is returned.  A missing or unreadable file raises OSError.
    """
    if database is None:
        database = HanDatabase()
    directory = os.path.normpath(os.path.abspath(os.fspath(path)))
    for kind in UnihanFile:
        load_file(database, os.path.join(directory, kind.filename), kind)
    return database