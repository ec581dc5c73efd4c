"""Copy a slice of a regular file, showing progress as a percentage."""

from __future__ import annotations

import argparse
import os
import stat
import sys
from collections.abc import Sequence
from typing import BinaryIO

_CHUNK_SIZE = 512


class CopyError(Exception):
    """Raised when a file cannot be copied."""


class UnsupportedFileError(CopyError):
    """Raised when the source or destination is not a regular file."""

    def __init__(self, side: str = "file") -> None:
        super().__init__(f"{side}: unsupported file")


class OffsetExceedsFileSizeError(CopyError):
    """Raised when the offset is not inside the source file."""

    def __init__(self, side: str = "fromFile") -> None:
        super().__init__(f"{side}: offset exceeds file size")


def copy_file(
    from_path: str | os.PathLike[str],
    to_path: str | os.PathLike[str],
    offset: int = 0,
    limit: int = 0,
) -> None:
    """Copy ``limit`` bytes of ``from_path`` starting at ``offset`` into ``to_path``.

    A ``limit`` of zero or less copies everything up to the end of the file.
    """
    if offset < 0:
        raise ValueError("offset must not be negative")

    source_info = os.stat(from_path)
    if not stat.S_ISREG(source_info.st_mode):
        raise UnsupportedFileError("fromFile")
    size = source_info.st_size
    if offset >= size:
        raise OffsetExceedsFileSizeError("fromFile")

    with open(from_path, "rb") as source, open(to_path, "wb") as target:
        if not stat.S_ISREG(os.fstat(target.fileno()).st_mode):
            raise UnsupportedFileError("toFile")

        count = size - offset
        if 0 < limit < count:
            count = limit

        source.seek(offset)
        _copy(source, target, count)
        target.flush()
        os.fsync(target.fileno())


def _copy(source: BinaryIO, target: BinaryIO, count: int) -> None:
    copied = 0
    while copied < count:
        chunk = source.read(min(_CHUNK_SIZE, count - copied))
        if not chunk:
            raise CopyError("copyRW: unexpected end of file")
        target.write(chunk)
        copied += len(chunk)
        print(f"\r{100 * copied // count}%", end="", flush=True)
    print()


def main(argv: Sequence[str] | None = None) -> None:
    """Parse the command line and copy the file it names."""
    parser = argparse.ArgumentParser(description="Copy part of a file.")
    parser.add_argument("-from", "--from", dest="from_path", default="", help="file to read from")
    parser.add_argument("-to", "--to", dest="to_path", default="", help="file to write to")
    parser.add_argument("-limit", "--limit", type=int, default=0, help="limit of bytes to copy")
    parser.add_argument("-offset", "--offset", type=int, default=0, help="offset in input file")
    args = parser.parse_args(argv)

    try:
        copy_file(args.from_path, args.to_path, args.offset, args.limit)
    except (CopyError, OSError, ValueError) as error:
        print(error)


if __name__ == "__main__":
    main(sys.argv[1:])