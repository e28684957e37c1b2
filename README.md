# cpudevices

A small toolkit for building simulated devices. It has three modules:

- `cpudevices.utils`: random helpers, rounding, bit counting, a 64-bit
  djb2 hash, and hash-checked storage of binary data in files.
- `cpudevices.folders`: creating nested directories, opening files while
  creating any missing parent folders, checking for and removing directories.
- `cpudevices.simple_cpu`: a minimal CPU device with a pluggable log function
  and a `tick()` step counter.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Random values and rounding

```python
from cpudevices.utils import (
    random_double, random_int, random_bit, gen_vector,
    round_to_precision, count_bits,
)

x = random_double(0.0, 1.0)     # rounded to 5 decimal places
n = random_int(10, 20)          # 10 <= n < 20; ValueError if max <= min
b = random_bit()                # 0 or 1
v = gen_vector(3, 2.5)          # list of 3 floats, length about 2.5
round_to_precision(3.14159, 2)  # 3.14 (halves round away from zero)
count_bits(0b1011)              # 3, counted over 64 bits
```

### Storing and restoring data

`store_data(data, filename)` writes bytes to a file behind a small header
holding their size and hash, creating any missing folders on the way.
`restore_data(filename)` reads them back. It raises `FileNotFoundError` if
the file is missing and `CorruptedDataError` (a `ValueError`) if the hash
does not match or fewer bytes were read than the header promises.

```python
from cpudevices.utils import store_data, restore_data, CorruptedDataError

store_data(b"state of the device", "backup/run1/state.bin")
try:
    data = restore_data("backup/run1/state.bin")
except CorruptedDataError:
    ...
```

`get_hash(data)` gives the hash used for that check.

### Folders

```python
from cpudevices.folders import (
    mkdir_recursive, fopen_no_matter_what, is_dir_exist, remove_directory,
)

mkdir_recursive("out/a/b")
with fopen_no_matter_what("out/logs/run.txt", "a") as f:
    f.write("started\n")
is_dir_exist("out/logs")   # True
remove_directory("out")    # prints each directory it removes
```

`remove_directory` raises `OSError` (for example `FileNotFoundError`) when
the directory cannot be opened or removed.

### Other helpers

`concat_strings(s1, s2)` joins two strings. `write_buf_to_file(buffer,
filename)` appends text to a file and, if the file cannot be written,
prints the buffer to standard output instead. `sleep_ms(ms)` and
`sleep_s(s)` pause after flushing standard output.

### The simple CPU

```python
from cpudevices import simple_cpu

simple_cpu.set_log_func(lambda log_file, message: print(log_file, message))
simple_cpu.mylog("cpu.log", "value is %d", 42)
simple_cpu.tick()   # returns the number of ticks so far
```

`mylog` formats its message printf-style, cuts it to 255 characters and
passes it to the installed function; it raises `RuntimeError` if none is set.

Running the command

```
simple-cpu
```

prints `Simple CPU main` and exits.

## What it does not do

The CPU device is a stub: `tick()` only counts steps. There is no
instruction set, no registers or memory, and nothing is executed.