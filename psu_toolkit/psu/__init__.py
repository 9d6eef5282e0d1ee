"""PS2 PSU save container support."""

from .header import (
    BLOCK_SIZE,
    HEADER_SIZE,
    NAME_SIZE,
    PSUHeader,
    PSUTimestamp,
    PSUType,
    clip_name,
    padding_size,
)
from .writer import PSUFile, build_psu, build_psu_bytes, psu_size, write_file

__all__ = [
    "BLOCK_SIZE",
    "HEADER_SIZE",
    "NAME_SIZE",
    "PSUHeader",
    "PSUTimestamp",
    "PSUType",
    "clip_name",
    "padding_size",
    "PSUFile",
    "build_psu",
    "build_psu_bytes",
    "psu_size",
    "write_file",
]
