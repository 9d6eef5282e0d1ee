"""PSU header and timestamp structures.

PSU is the PS2 save export container written by EMS/uLaunchELF style
tools. Key characteristics:
- Little-endian throughout
- Every entry starts with a fixed 512-byte header
- File payloads are padded with zeros to a 1024-byte boundary
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum
from typing import Union

from ..utils.binary import BinaryWriter

# Header record size in bytes
HEADER_SIZE = 512

# File payloads are aligned to this boundary
BLOCK_SIZE = 1024

# Fixed-width name field
NAME_SIZE = 32

# Packed timestamp size
TIMESTAMP_SIZE = 8


class PSUType(IntEnum):
    """PSU entry type tags."""

    DIRECTORY = 0x8427
    FILE = 0x8497


@dataclass
class PSUTimestamp:
    """PSU timestamp (8 bytes, always UTC)."""

    seconds: int
    minutes: int
    hours: int
    day: int
    month: int
    year: int

    @classmethod
    def from_datetime(cls, dt: datetime) -> "PSUTimestamp":
        """Convert an instant to UTC and pick out its calendar fields.

        Naive datetimes are treated as local time.
        """
        dt = dt.astimezone(timezone.utc)
        return cls(
            seconds=dt.second,
            minutes=dt.minute,
            hours=dt.hour,
            day=dt.day,
            month=dt.month,
            year=dt.year,
        )

    @classmethod
    def from_timestamp(cls, ts: float) -> "PSUTimestamp":
        return cls.from_datetime(datetime.fromtimestamp(ts, tz=timezone.utc))

    def write(self, writer: BinaryWriter) -> None:
        # Fields are narrowed to their wire width, never validated
        writer.write_u8(0)
        writer.write_u8(self.seconds)
        writer.write_u8(self.minutes)
        writer.write_u8(self.hours)
        writer.write_u8(self.day)
        writer.write_u8(self.month)
        writer.write_u16(self.year)

    def to_bytes(self) -> bytes:
        writer = BinaryWriter()
        self.write(writer)
        return writer.getvalue()


@dataclass
class PSUHeader:
    """PSU entry header (512 bytes)."""

    type: PSUType
    size: int  # Entry count for a directory, byte length for a file
    created: PSUTimestamp
    modified: PSUTimestamp
    name: Union[str, bytes]

    @property
    def is_directory(self) -> bool:
        return self.type == PSUType.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.type == PSUType.FILE

    def write(self, writer: BinaryWriter) -> None:
        """Append the 512-byte header to the writer's pending record."""
        # 0x000: Type tag + 2 reserved bytes
        writer.write_u16(self.type)
        writer.skip(2)

        # 0x004: Size
        writer.write_u32(self.size)

        # 0x008: Created, then 8 bytes used by EMS only
        self.created.write(writer)
        writer.skip(8)

        # 0x018: Modified, then 32 bytes used by EMS only
        self.modified.write(writer)
        writer.skip(32)

        # 0x040: Name
        writer.write_bytes(clip_name(self.name))

        # 0x060: Reserved
        writer.skip(416)

    def to_bytes(self) -> bytes:
        writer = BinaryWriter()
        self.write(writer)
        return writer.getvalue()


def clip_name(name: Union[str, bytes]) -> bytes:
    """Encode a name into the fixed 32-byte field.

    Names longer than the field are cut at 32 bytes and carry no
    terminator; shorter names are null-padded on the right.
    """
    if isinstance(name, str):
        name = name.encode("utf-8")
    return name[:NAME_SIZE].ljust(NAME_SIZE, b"\x00")


def padding_size(length: int) -> int:
    """Number of zero bytes that follow a payload of ``length`` bytes."""
    return (BLOCK_SIZE - length % BLOCK_SIZE) % BLOCK_SIZE
