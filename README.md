# xuan

Read the Unicode Han Database (Unihan) text files into memory. Then look up
CJK ideographs in three ways: by the character itself, by its numeric code
point, or by its `U+XXXX` notation.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Data

The package does not ship the Unihan data and does not download it. Get the
Unihan archive from the Unicode Consortium yourself and unpack it into a
directory. The directory must hold these eight files:

- `Unihan_DictionaryIndices.txt`
- `Unihan_DictionaryLikeData.txt`
- `Unihan_IRGSources.txt`
- `Unihan_NumericValues.txt`
- `Unihan_OtherMappings.txt`
- `Unihan_RadicalStrokeCounts.txt`
- `Unihan_Readings.txt`
- `Unihan_Variants.txt`

Loading skips blank lines and lines that start with `#`. It also skips any
line that does not have the shape `U+XXXX<whitespace>kKey<whitespace>value`.

Values are stored in two ways:

- In `Unihan_Readings.txt`, each value is kept as a single string. A later
  entry for the same key replaces the earlier one.
- In every other file, the value is split on whitespace. The parts are added
  to a list for that key.

If a file is missing or cannot be read, loading raises `OSError`.

## Command line

```
xuan
```

This command loads `./data/Unihan` and prints, in order:

1. the number of characters loaded;
2. the JSON record for 我;
3. the JSON record for code point 40643 (黄);
4. the JSON record for `U+5988` (妈).

If a character is not in the database, `null` is printed in place of its
record.

To load a different directory, pass it as the first argument:

```
xuan /path/to/Unihan
```

If loading fails, the error goes to standard error and the exit status is 1.

## Library

```python
from xuan.database import HanDatabase
from xuan.loader import load

db = HanDatabase()
load("./data/Unihan", db)     # or: db = load("./data/Unihan")

print(db.count())             # same as len(db)
han = db.get_by_value("我")
print(han.properties.readings["kMandarin"])
print(han.dump())

db.get_by_code_point(40643)
db.get_by_unicode("U+5988")
```

### `xuan.database`

`HanDatabase` is a thread-safe map from code points to `Han` records. It
provides:

- `get_by_value(text)`: looks up the first character of `text`.
- `get_by_code_point(n)`: looks up a numeric code point. Values of zero or
  below give `None`.
- `get_by_unicode("U+XXXX")`: looks up a character by its `U+` notation.
- `get_or_create(code_point, unicode)`: returns the record for
  `code_point`, adding it if it is absent.
- `count()` and `len()`: give the number of records.
- `dump()`: gives the whole database as indented JSON, keyed by code point.

Every lookup returns `None` when the character is not in the database.

A `Han` record has these fields:

- `code_point`
- `unicode`, the `U+` notation
- `value`, the character itself
- `properties`, a `Properties` object

`Properties` has one attribute per data file:

- `dictionary_indices`
- `dictionary_like_data`
- `irg_sources`
- `numeric_values`
- `other_mappings`
- `radical_stroke_counts`
- `readings`
- `variants`

Each attribute is a dictionary, or `None` if that file had no entry for the
character. `Han.to_dict()` returns a plain dictionary and `Han.dump()`
returns indented JSON.

### `xuan.loader`

- `load(path, database=None)` reads all eight files from a directory and
  returns the database.
- `load_file(database, path, kind)` reads a single file. The `kind`
  argument is a member of the `UnihanFile` enum.
- `parse_line(line)` splits one data line into `(unicode, key, value)`. It
  returns `None` for lines it skips.

### `xuan.codes`

`unicode_to_rune("U+5988")` turns `U+` notation into an integer code point.
It returns 0 for anything it cannot parse, and also for any value that is
not positive.