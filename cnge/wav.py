"""Reading uncompressed PCM sound from WAV (RIFF) data."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Union

__all__ = ["WavError", "WavFormat", "Wav"]

_RIFF_ID = 0x46464952
_FMT_ID = 0x20746D66
_DATA_ID = 0x61746164

_HEADER = struct.Struct("<III")
_FORMAT_CHUNK = struct.Struct("<IIHHIIHH")
_SUB_CHUNK = struct.Struct("<II")


class WavError(ValueError):
    """Raised when WAV data is malformed or truncated."""


class WavFormat(IntEnum):
    """Sample layouts, numbered as audio buffer formats."""

    MONO8 = 0x1100
    MONO16 = 0x1101
    STEREO8 = 0x1102
    STEREO16 = 0x1103


class _Reader:
    def __init__(self, data: bytes):
        self._data = data
        self._offset = 0

    def read(self, count: int, what: str) -> bytes:
        end = self._offset + count
        if end > len(self._data):
            raise WavError(f"unexpected end of data reading {what}")
        chunk = self._data[self._offset:end]
        self._offset = end
        return chunk

    def skip(self, count: int) -> None:
        self._offset += count


@dataclass(frozen=True)
class Wav:
    """Decoded sample data with its format and sample rate."""

    format: WavFormat
    sample_rate: int
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Wav":
        """Parse the contents of a WAV file."""
        reader = _Reader(bytes(data))

        signature, _, _ = _HEADER.unpack(reader.read(_HEADER.size, "file header"))
        if signature != _RIFF_ID:
            raise WavError("not a RIFF file")

        (
            chunk_id,
            _size,
            _format,
            num_channels,
            sample_rate,
            _byte_rate,
            _block_align,
            bits_per_sample,
        ) = _FORMAT_CHUNK.unpack(reader.read(_FORMAT_CHUNK.size, "format chunk"))
        if chunk_id != _FMT_ID:
            raise WavError("missing format chunk")

        skip = 0
        while True:
            reader.skip(skip)
            sub_id, sub_size = _SUB_CHUNK.unpack(reader.read(_SUB_CHUNK.size, "chunk header"))
            if sub_id == _DATA_ID:
                break
            skip = sub_size

        samples = reader.read(sub_size, "sample data")

        eight_bit = bits_per_sample == 8
        if num_channels == 1:
            fmt = WavFormat.MONO8 if eight_bit else WavFormat.MONO16
        else:
            fmt = WavFormat.STEREO8 if eight_bit else WavFormat.STEREO16
        return cls(fmt, sample_rate, samples)

    @classmethod
    def from_file(cls, path: Union[str, "os.PathLike[str]"]) -> "Wav":
        """Read and parse a WAV file."""
        return cls.from_bytes(Path(path).read_bytes())