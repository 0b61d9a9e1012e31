# acrotools

Helper functions for the control software of device programmer test stations:
checksums, socket and BPU masks, test-site grid layout, path and file helpers,
and a small levelled logger. It uses only the standard library.

## Modules

- `acrotools.checksum`
  - `crc16_ccitt(data, crc=0)` is a table-driven CRC-16 with polynomial 0x1021,
    MSB first. It continues from `crc`, so you can feed data in pieces.
  - `crc32_reflected(data)` is a CRC-32 computed with the augmented
    direct-table method, using bit-reflected input bytes and a reflected
    result.
  - `Crc32Accumulator` computes the same CRC incrementally. Call `update(data)`
    as often as needed; `digest()` returns the CRC without changing the state.
  - `reflect_bits(value, width)` reverses the lowest `width` bits.
- `acrotools.logger`
  - `LogLevel`: `DEBUG`, `INFO`, `WARN`, `ERROR`, `FATAL`.
  - `Logger(sink=None, level=LogLevel.DEBUG)`. `format_message` builds
    `"W][sender][receiver]text"`, with `%`-style arguments applied to the
    format. `log` (and `debug`, `info`, `warn`, `error`, `fatal`) adds a
    `[YYYY/MM/DD hh:mm:ss.mmm-` timestamp, passes the line to the sink and
    returns it. A message below the threshold set with `set_level` returns
    `None` and is not passed on.
- `acrotools.tester`
  - `crc32_mpeg2(data)` computes CRC-32/MPEG-2: initial value 0xFFFFFFFF, no
    final inversion.
  - `site_height(available_height, site_count)` gives the height of one test
    site widget. It scales with the number of sites and is clamped to 60..240.
  - `site_layout(rows, cols, direction=0)` returns `SitePlacement(number, row, col)`
    entries in row order. Direction 0 numbers the sites upward from 1 and
    direction 1 numbers them downward. Any other direction gives an empty list.
  - `scroll_content_size(rows, cols)` gives the minimum grid size, based on
    200-pixel cells with 5-pixel gaps.
- `acrotools.text_utils`
  - Trimming and search: `trim_char`, `trim_left`, `trim_right`,
    `find_one_of`, `compare_no_case`.
  - Paths and files: `extract_file_path`, `extract_file_name`, `file_size`
    (0 for a missing file), `delete_file` (returns whether the file was
    removed).
  - `format_string(template, *args)` replaces `%1`, `%2`, and so on.
  - `smart_scale(spec, dpi)` scales a size in steps of 1, 1.25, 1.5, 1.75
    and 2.
- `acrotools.common_tools`
  - Algorithm ranges: `check_algo_range(algo, "10-1F,30")` and
    `parse_interval`. `parse_interval` raises `ValueError` for text without a
    `-`.
  - Masks: `bpu_enable`, `bpu_count` and `bpu_index` work on socket-enable
    masks. `soft_to_auto` and `auto_to_soft` remap up to 16 sockets and raise
    `ValueError` for more.
  - `calculate_percentage` returns for example `"12.50%"`, or
    `"Invalid operation"` when the whole is 0.
  - Other helpers: `byte_sum`, `to_hex_ascii`, `random_string`,
    `contains_chinese`, `log_source` (`B0`..`B7`, or `MU` for 8),
    `string_to_rect` (returns a `Rect`) and `hex_string_to_int`.
- `acrotools.file_tools`
  - File names: `file_extension`, `remove_extension`, and
    `switch_file_format`, which returns `None` when the name has no dot.
  - Paths relative to a file's directory: `full_to_relative_path` and
    `relative_to_full_path`.
  - `read_des_value(file_name, key)` reads `key: value` text files.
  - `driver_version(zip_path, ver_name)` reads a key from the `Version.txt`
    inside a zip archive.
  - `extract_archive(zip_path, dest_dir)` unpacks an archive and returns the
    paths it wrote. Entries that would escape `dest_dir` are skipped.
- `acrotools.paths`
  - `Language` and `ViewMode` enumerations.
  - `ensure_path_exists`, `ensure_file_exists` and `delete_directory`.
  - `PathResolver(app_dir, log_dir=None)` resolves paths under the
    application directory:
    - log and event files for the session, with `recreate_log_file`;
    - translation files and skin style sheets;
    - fonts, the settings file, database files, plugins, report temp data;
    - project and task folders, which are created if missing;
    - driver files and the temporary folder: `temp/` on Windows, `.temp/`
      elsewhere.

## Example

```python
from acrotools.checksum import Crc32Accumulator, crc32_reflected
from acrotools.common_tools import check_algo_range, bpu_enable
from acrotools.logger import Logger, LogLevel

data = b"123456789"
acc = Crc32Accumulator()
acc.update(data)
assert acc.digest() == crc32_reflected(data)

check_algo_range(0x12, "10-1F,30")   # True
bpu_enable(0b1100)                   # 0b10

lines = []
log = Logger(lines.append, LogLevel.INFO)
log.warn("CU", "--", "socket %d not ready", 3)
log.debug("CU", "--", "filtered")    # None, below the threshold
```

## What it does not do

This is a library of helpers only. It does not provide:

- a window or any user interface;
- a command-line program;
- a connection to a programmer or a JSON-RPC server;
- project-file reading or writing;
- chip-data XML parsing;
- report generation.

`Logger` writes nowhere by itself. It only passes lines to the sink you give it.

## Running the tests

```
pip install -e .[test]
pytest
```