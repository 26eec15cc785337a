# qrforge

qrforge builds QR code symbols as a matrix of modules. It picks the encoding
mode and the symbol version from the input and encodes the data. It then adds
Reed-Solomon error correction and places the function patterns and data bits.
Finally it tries all eight mask patterns and keeps the one with the lowest
penalty score.

The result is a `Matrix` of module values. To draw that matrix as an image, in
a terminal or anywhere else, you supply a `Writer`.

## Installation

```
pip install qrforge
```

The only runtime dependency is Pillow. It is used only to draw debug
snapshots.

## What the package does not do

* **It ships no version table.** Capacities and block layouts for versions 1
  to 40 are not bundled. You supply them as a sequence of
  `qrforge.version.Version` records (see below).
* **It draws no images.** Apart from the debug JPEG snapshots it has no image,
  file or terminal output. Output is the job of your own `Writer`.
* **It has no command-line program.**
* **It does not encode in Kanji mode.** `EncMode.JP` exists, but encoding with
  it raises `qrforge.encoder.EncodingError`.

## The version table

The table is a sequence of `Version` records from `qrforge.version`. It holds
160 entries: one for each version from 1 to 40 at each `ECLevel`. Entries are
ordered by version and then by level (`LOW`, `MEDIUM`, `QUART`, `HIGHEST`).
Each entry has these fields:

* `ver`
* `ec_level`
* `cap`, a `Capacity(numeric, alphanumeric, byte, jp)`
* `remainder_bits`
* `groups`, a tuple of `Group(num_blocks, num_data_codewords, ec_codewords_per_block)`

For example, this is the entry for version 1 at level H:

```python
from qrforge.version import Capacity, ECLevel, Group, Version

v1_h = Version(
    ver=1,
    ec_level=ECLevel.HIGHEST,
    cap=Capacity(numeric=17, alphanumeric=10, byte=7, jp=4),
    remainder_bits=0,
    groups=(Group(num_blocks=1, num_data_codewords=9, ec_codewords_per_block=17),),
)
```

`load_version(level, ec_level, versions)` looks up one entry.
`analyze_version(raw, ec_level, mode, versions)` returns the smallest entry
whose capacity holds the data. Both raise `VersionError` when nothing matches.

## Building a symbol

```python
from qrforge.qrcode import new, new_with
from qrforge.options import (
    with_encoding_mode,
    with_error_correction_level,
    with_minimum_version,
    with_version,
)
from qrforge.modes import EncMode
from qrforge.version import ECLevel

versions = ...  # your table of 160 Version records

qr = new("HELLO WORLD", versions)
print(qr.dimension)          # modules per side: version * 4 + 17
print(qr.version.ver)

# Fix the version outright ...
qr7 = new_with("1234567", versions,
               with_encoding_mode(EncMode.NUMERIC),
               with_error_correction_level(ECLevel.LOW),
               with_version(7))

# ... or only set a lower bound on the chosen version.
qr9 = new_with("Hello", versions, with_minimum_version(9))
```

The defaults come from `default_encoding_options()`:

* The mode is detected from the input. The order tried is numeric, then
  alphanumeric, then byte; see `qrforge.modes.analyze_encode_mode`.
* The error correction level is `ECLevel.QUART`.

The option helpers ignore out-of-range values and keep the default. The range
for versions is 1 to 40, and for levels `LOW` to `HIGHEST`. If you give both a
fixed version and a minimum version, the fixed version wins.

Some inputs raise an error:

* The data does not fit any version: `VersionError`.
* The data does not fit the fixed version you asked for: `EncodingError`.
* The data contains characters outside the mode you forced: `EncodingError`.

## Reading the result

`QRCode.matrix` is the final `Matrix`, and `QRCode.version` is the `Version`
used. The `Matrix` offers these views:

* `bitmap()` returns a list of rows of booleans. `True` means a dark module.
* `iterate(direction)` yields `(x, y, value)` row by row or column by column.
  The order depends on `IterDirection.ROW` or `IterDirection.COLUMN`.
* `row(y)` returns one row of `QRValue`s and `col(x)` returns one column.
* `at(x, y)` returns a single value. An index out of range raises
  `OutOfRangeOfWidth` or `OutOfRangeOfHeight`, both `IndexError`s.
* `render()` gives a text dump with one cell per module, such as `F1 ` or `d0 `.

Each `QRValue` knows two things:

* `qrtype()` gives the kind of module it belongs to, as a `QRType`: finder,
  splitter, timing, format, version, dark or data.
* `is_set()` tells whether the module is dark.

## Writing out

`QRCode.save(writer)` hands a copy of the matrix to `writer.write` and then
calls `writer.close()`, even if writing failed. An exception raised by `close`
is logged as a warning. If `writer` is `None` nothing is written.

```python
from qrforge.qrcode import Writer

class AsciiWriter(Writer):
    def write(self, mat):
        for row in mat.bitmap():
            print("".join("##" if dark else "  " for dark in row))

    def close(self):
        pass

qr.save(AsciiWriter())
```

## Lower-level pieces

* `qrforge.encoder.Encoder(mode, ec_level, version).encode(data)` returns the
  data codeword stream as `qrforge.bits.Bits`. The stream holds the mode
  indicator, character count, data, terminator and pad bytes.
* `qrforge.reedsolomon.rs_encode(data, ec_count)` returns error correction
  codewords over GF(256).
* `qrforge.mask.Mask` and `MaskPattern` provide the eight mask patterns.
* `qrforge.evaluation.evaluation(mat)` computes the penalty score. It sums
  `rule1` to `rule4`.
* `qrforge.patterns` places the function patterns, data bits, format
  information and version information.

## Debugging

There are two ways to turn debug mode on:

* Set the environment variable `QRCODE_DEBUG` to `1`, `true`, `TRUE`, `enabled`
  or `ENABLED`. It is read once.
* Call `qrforge.debug.set_debug_mode()`.

In debug mode the library logs its intermediate steps. The messages go to the
`qrforge` logger at DEBUG level, so configure `logging` to see them.
`debug_draw(filename, mat)` and `debug_draw_to(stream, mat)` write JPEG
snapshots of a matrix. While a code is being built, a snapshot of each masked
candidate goes to `draft/qrcode_mask_<n>.jpeg` if that directory exists.
Outside debug mode these functions do nothing and return `False`.

## Running the tests

```
pip install qrforge[test]
pytest
```