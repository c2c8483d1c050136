# enctools

A small library of helpers for working with S-57 electronic navigational
chart (ENC) datasets and the tools that process them.

## Modules

- `enctools.dataset`: `DatasetItem` groups a base cell (`NAME.000`) with
  its update cells (`NAME.001` to `NAME.999`). The update numbers are kept
  in ascending order. `insert_update_cell` raises `ValueError` for a file
  without an extension, for a number outside 1..999 and for a duplicate.
  `dispatch_update_cells` hands loose update files to their datasets and
  returns the files that no dataset accepted. `split_dataset_path` splits a
  path into its directory and family name.
- `enctools.config`: INI-style configuration built from `Config` and
  `ConfigGroup`. A file has `[group]` headers, `key=value` lines and `#`
  comments. Keys, values and group names are whitespace-simplified.
  `get_int`, `get_uint` and `get_float` return the caller's default when a
  key is missing or its value does not parse. `ConfigGroup.from_string` and
  `to_string` use the `name:key=value:...` form. Used as a context manager,
  `Config` saves pending changes when it is closed.
- `enctools.textconv`: `simplified`, `split`, and strict integer parsing
  with C 32-bit and 16-bit limits: `to_long`, `to_ulong`, `to_short` and
  `to_ushort`, in bases 2 to 36. It also has `to_double`, `number` for
  rendering an integer in a base, and `format_float` for printf-style float
  formatting. Bad input raises `ValueError`.
- `enctools.ucs2`: `encode_utf8` / `decode_utf8` and `encode_ucs2` /
  `decode_ucs2` for text made of 16-bit code units. Characters outside the
  Basic Multilingual Plane raise `ValueError`.
- `enctools.log`: tagged logging through `d`, `w` and `e`. The default
  `StdoutLogger` writes `D/tag: msg` lines. `set_logger` installs another
  `Logger` and returns the previous one.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Grouping update cells with their base cell:

```python
from enctools.dataset import DatasetItem, dispatch_update_cells

ds = DatasetItem("/charts/US5MA1AM")
left_over = dispatch_update_cells(
    [ds], ["/charts/US5MA1AM.002", "/charts/US5MA1AM.001", "/charts/OTHER.001"]
)
print(ds.ds_file())             # /charts/US5MA1AM.000
print(list(ds.update_files()))  # [(1, '/charts/US5MA1AM.001'), (2, '/charts/US5MA1AM.002')]
print(left_over)                # ['/charts/OTHER.001']
```

Reading and writing configuration:

```python
from enctools.config import Config

with Config("settings.ini") as cfg:
    cfg.set_group("display")
    cfg.set_value("scale", 50000)
    print(cfg.get_int("scale", 0))  # 50000
```

## What this package does not do

The package does not read or decode S-57 / ISO 8211 records. It does not
merge update cells into a dataset's records. It does not write binary
chart files or module index files. It has no command-line programs.
`enctools.dataset` only tracks which files make up a dataset. Reading those
files is left to the caller.