"""PSU Toolkit - build PS2 PSU save containers."""

__version__ = "0.1.0"

from .psu import PSUFile, build_psu, build_psu_bytes

__all__ = ["__version__", "PSUFile", "build_psu", "build_psu_bytes"]
