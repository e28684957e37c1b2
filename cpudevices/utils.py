"""Random numbers, rounding, hashing and hash-checked data files."""

from __future__ import annotations

import math
import os
import random
import struct
import sys
import time
from typing import List, Union

from cpudevices.folders import fopen_no_matter_what

PathLike = Union[str, "os.PathLike[str]"]

_HASH_SEED = 5381
_HASH_MASK = (1 << 64) - 1
_SIZE_T_MASK = (1 << 64) - 1
# uint32 size, 4 bytes of alignment padding, uint64 hash
_HEADER = struct.Struct("<I4xQ")


class CorruptedDataError(ValueError):
    """A stored data file failed its hash or length check."""


def sleep_ms(ms: int) -> None:
    """Flush stdout, then sleep for ``ms`` milliseconds."""
    sys.stdout.flush()
    time.sleep(ms / 1000)


def sleep_s(s: int) -> None:
    """Sleep for ``s`` seconds."""
    sleep_ms(s * 1000)


def round_to_precision(value: float, precision: int) -> float:
    """Round ``value`` to ``precision`` decimal places, halves away from zero."""
    factor = 10.0 ** precision
    scaled = value * factor
    frac, whole = math.modf(scaled)
    if abs(frac) >= 0.5:
        whole += math.copysign(1.0, scaled)
    return whole / factor


def random_double(min_value: float, max_value: float) -> float:
    """Random float in ``[min_value, max_value]`` rounded to 5 decimal places."""
    span = max_value - min_value
    return round_to_precision(min_value + random.random() * span, 5)


def random_bit() -> int:
    """Return 0 or 1 at random."""
    return random.getrandbits(1)


def count_bits(value: int) -> int:
    """Number of set bits in ``value`` taken as a 64-bit unsigned integer."""
    return bin(value & _SIZE_T_MASK).count("1")


def random_int(min_value: int, max_value: int) -> int:
    """Random integer from ``min_value`` to ``max_value - 1``."""
    if max_value <= min_value:
        raise ValueError("max_value must be greater than min_value")
    return random.randrange(min_value, max_value)


def gen_vector(n: int, length: float) -> List[float]:
    """Random ``n``-dimensional vector of the given length, components rounded to 5 places."""
    if n <= 0:
        return []
    while True:
        components = [random.uniform(-1.0, 1.0) for _ in range(n)]
        norm = math.sqrt(sum(c * c for c in components))
        if norm > 0.0:
            break
    return [round_to_precision(c / norm * length, 5) for c in components]


def get_hash(data: bytes) -> int:
    """64-bit djb2 hash of ``data``."""
    result = _HASH_SEED
    for byte in data:
        result = ((result << 5) + result + byte) & _HASH_MASK
    return result


def store_data(data: bytes, filename: PathLike) -> None:
    """Write ``data`` behind a size-and-hash header, creating parent directories."""
    payload = bytes(data)
    header = _HEADER.pack(len(payload), get_hash(payload))
    with fopen_no_matter_what(filename, "wb") as handle:
        handle.write(header)
        handle.write(payload)


def restore_data(filename: PathLike) -> bytes:
    """Read data written by :func:`store_data`, checking its hash and length.

    Raises ``FileNotFoundError`` if the file is missing and
    :class:`CorruptedDataError` if the check fails.
    """
    with open(filename, "rb") as handle:
        raw_header = handle.read(_HEADER.size)
        if len(raw_header) < _HEADER.size:
            raw_header = raw_header.ljust(_HEADER.size, b"\0")
        size, expected_hash = _HEADER.unpack(raw_header)
        payload = handle.read(size)
    padded = payload.ljust(size, b"\0")
    if get_hash(padded) != expected_hash:
        raise CorruptedDataError(f"File {os.fspath(filename)} corrupted (hash check failed)")
    if len(payload) != size:
        raise CorruptedDataError(
            f"Failed reading file {os.fspath(filename)} "
            f"({len(payload)} of {size} bytes were read)"
        )
    return payload


def concat_strings(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def write_buf_to_file(buffer: str, filename: PathLike) -> None:
    """Append ``buffer`` to ``filename``; on failure print the buffer instead."""
    try:
        with open(filename, "a", encoding="utf-8") as handle:
            handle.write(buffer)
    except OSError:
        print(f"File write error, here are coeffs: {buffer}", end="")