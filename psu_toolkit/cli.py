"""PSU Toolkit CLI."""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Tuple

import click

from . import __version__


@click.group()
@click.version_option(version=__version__)
def main():
    """PSU Toolkit - Build PS2 PSU save containers.

    A PSU file holds one save directory: a root entry, the "." and ".."
    entries, then every file padded to a 1024-byte boundary.
    """
    pass


@main.command()
@click.argument("outfile", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("dirname")
@click.argument(
    "inputs",
    metavar="INPUT...",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--timestamp",
    type=float,
    help="POSIX time for the directory entries (default: now)",
)
@click.option(
    "--list-only",
    is_flag=True,
    help="List files that would be packed without writing",
)
def pack(
    outfile: Path,
    dirname: str,
    inputs: Tuple[Path, ...],
    timestamp: Optional[float],
    list_only: bool,
):
    """Create a PSU file from files and directory contents.

    Directories contribute their regular files (not recursive), in name
    order. DIRNAME becomes the save directory name inside the PSU.
    """
    from .psu import PSUFile, build_psu, psu_size

    opened = False

    try:
        paths = collect_files(inputs)

        if list_only:
            click.echo(f"Files to pack ({len(paths)}):")
            for path in paths:
                click.echo(f"  {path.name}")
            return

        now = None
        if timestamp is not None:
            now = datetime.fromtimestamp(timestamp, tz=timezone.utc)

        click.echo(f"Output:    {outfile}")
        click.echo(f"Directory: {dirname}")
        click.echo()

        with click.progressbar(
            paths,
            label="Loading",
            item_show_func=lambda x: x.name if x else "",
        ) as items:
            files = [PSUFile.from_path(path) for path in items]

        with open(outfile, "wb") as f:
            opened = True
            build_psu(f, dirname, files, now=now)

        click.echo()
        click.echo(f"Packed:  {len(files)} files")
        click.echo(f"Size:    {psu_size(files)} bytes")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        # Partial archives are unusable
        if opened:
            outfile.unlink(missing_ok=True)
        sys.exit(1)


def collect_files(inputs: Tuple[Path, ...]) -> List[Path]:
    """Expand inputs into the list of files to pack, keeping input order."""
    paths = []
    for path in inputs:
        if path.is_dir():
            paths.extend(sorted(p for p in path.iterdir() if p.is_file()))
        else:
            paths.append(path)
    return paths


if __name__ == "__main__":
    main()
