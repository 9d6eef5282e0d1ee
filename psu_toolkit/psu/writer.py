"""PSU archive writer."""

from dataclasses import dataclass
from datetime import datetime, timezone
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Iterable, Optional, Sequence, Union

from ..utils.binary import BinaryWriter, align_up
from .header import (
    BLOCK_SIZE,
    HEADER_SIZE,
    PSUHeader,
    PSUTimestamp,
    PSUType,
    padding_size,
)

# Read-only zero source for payload padding
_ZERO_BLOCK = bytes(BLOCK_SIZE)

# Root header plus the "." and ".." entries
FIXED_ENTRY_COUNT = 3


@dataclass
class PSUFile:
    """A file to embed in a PSU archive."""

    name: Union[str, bytes]
    created: datetime
    modified: datetime
    data: bytes

    @classmethod
    def from_path(cls, path: Union[str, Path], name: Optional[str] = None) -> "PSUFile":
        """Load a file from disk, keeping its ctime/mtime as timestamps."""
        path = Path(path)
        stat = path.stat()
        return cls(
            name=name if name is not None else path.name,
            created=datetime.fromtimestamp(stat.st_ctime, tz=timezone.utc),
            modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            data=path.read_bytes(),
        )

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def padding(self) -> int:
        return padding_size(len(self.data))


def write_file(sink: BinaryIO, file: PSUFile) -> None:
    """Write a file header followed by its payload and zero padding."""
    writer = BinaryWriter(sink)

    PSUHeader(
        type=PSUType.FILE,
        size=len(file.data),
        created=PSUTimestamp.from_datetime(file.created),
        modified=PSUTimestamp.from_datetime(file.modified),
        name=file.name,
    ).write(writer)
    writer.flush()

    writer.write(file.data)
    writer.write(_ZERO_BLOCK[: file.padding])


def build_psu(
    sink: BinaryIO,
    root_name: Union[str, bytes],
    files: Sequence[PSUFile],
    now: Optional[datetime] = None,
) -> None:
    """Write a PSU archive to ``sink``.

    Layout:
    - Root directory header (size = number of files + 3)
    - "." and ".." directory headers (size 0)
    - Per file: header, payload, zero padding to a 1024-byte boundary

    Args:
        sink: Any object with a ``write(bytes)`` method
        root_name: Save directory name, clipped to 32 bytes
        files: Files to embed, written in the given order
        now: Time stamped on the three directory headers (default: now)

    Errors raised by the sink propagate and stop all further writes.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    timestamp = PSUTimestamp.from_datetime(now)
    writer = BinaryWriter(sink)

    for name, size in (
        (root_name, len(files) + FIXED_ENTRY_COUNT),
        (".", 0),
        ("..", 0),
    ):
        PSUHeader(
            type=PSUType.DIRECTORY,
            size=size,
            created=timestamp,
            modified=timestamp,
            name=name,
        ).write(writer)
        writer.flush()

    for file in files:
        write_file(sink, file)


def build_psu_bytes(
    root_name: Union[str, bytes],
    files: Sequence[PSUFile],
    now: Optional[datetime] = None,
) -> bytes:
    """Build a PSU archive in memory and return its bytes."""
    buffer = BytesIO()
    build_psu(buffer, root_name, files, now=now)
    return buffer.getvalue()


def psu_size(files: Iterable[PSUFile]) -> int:
    """Exact length in bytes of the archive ``build_psu`` would write."""
    total = FIXED_ENTRY_COUNT * HEADER_SIZE
    for file in files:
        total += HEADER_SIZE + align_up(len(file.data), BLOCK_SIZE)
    return total
