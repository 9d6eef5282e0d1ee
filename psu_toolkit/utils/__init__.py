"""Shared helpers."""

from .binary import BinaryWriter

__all__ = ["BinaryWriter"]
