# voxutil

A small toolbox of helpers for voxel-world simulations. It has no
dependencies beyond the standard library.

## Modules

- `voxutil.fsutils`: `path_delim`, `path_join`, `read_all_bytes` (from a path
  or a binary stream) and `file_exists` (true only if the file can be opened).
- `voxutil.tinylog`: a compact levelled logger. `LogLevel` runs from `FATAL`
  to `DEBUG`; `set_log_level` / `get_log_level` set and read the threshold;
  `LogMessage` builds one line (also usable as a context manager) and `tlog`
  logs a message tagged with the caller's file, line and function. A `FATAL`
  message is written and then raises `FatalError`. `format_vector` renders a
  sequence as `[a, b, c]`.
- `voxutil.misc`: `sgn`, `sqr`, `rand_range`, `random_bool`, `frand`,
  `random_sample` (all taking a `random.Random`), `endian_swap`, `contains`,
  `memcpy_stride` and `triangular_number`.
- `voxutil.osutils`: `process_mem_usage` reads virtual and resident memory
  of the current process from `/proc/self/stat` into a `MemUsage`;
  `parse_proc_stat` does the parsing on given text.
- `voxutil.noise`: seeded `PerlinNoise` in 1, 2 and 3 dimensions, with
  `[0, 1]` variants, accumulated and normalized octave noise, and
  `serialize` / `deserialize` of the permutation table.
- `voxutil.voxels`: `VoxelGrid`, a sparse map from integer voxel coordinates
  to states, plus `to_voxel`, `manhattan_distance`, `voxel_hash`,
  `lround_vector`, `to_rgbf` and `degrees`.
- `voxutil.cli_values`: number parsing (`parse_integer`, `parse_float` with
  `CharsFormat`), `repr_value`, and token classification (`is_positional`,
  `is_optional`, `is_decimal_literal`).
- `voxutil.cli_args`: an `ArgumentParser` with positional and optional
  arguments, `nargs`, `remaining`, defaults, implicit values, repeatable
  options, typed `scan`, parent parsers and generated help. The built-in
  `-h/--help` and `-v/--version` options raise `HelpRequested` and
  `VersionRequested` (both `SystemExit` subclasses carrying `text`).

## Install

```
pip install .
```

## Examples

```python
from voxutil.noise import PerlinNoise
from voxutil.voxels import VoxelGrid

noise = PerlinNoise(seed=42)
height = noise.normalized_octave_noise2d_01(0.3, 0.7, 4)

grid = VoxelGrid(100, (0.0, 0.0, 0.0), 1.0)
grid.set((1, 2, 3), "stone")
assert grid.get_with_vector((1.5, 2.2, 3.9)) == "stone"
```

```python
from voxutil.tinylog import LogLevel, set_log_level, tlog

set_log_level(LogLevel.INFO)
tlog(LogLevel.INFO, "world generated")
tlog(LogLevel.DEBUG, "not shown")
```

```python
from voxutil.cli_args import ArgumentParser

parser = ArgumentParser("demo")
parser.add_argument("--count").default_value(1).scan("d", int)
parser.parse_args(["demo", "--count", "5"])
assert parser.get("--count", int) == 5
```

## What it does not do

voxutil is a library only: it installs no commands. The argument parser
works on a list of strings you hand it and does not read `sys.argv` or exit
the process by itself. There are no string-splitting helpers and no timer
or profiling facilities in this package.

## Tests

```
pip install .[test]
pytest
```