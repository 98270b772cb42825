"""Command line entry point for splitting and joining files."""

from __future__ import annotations

import getopt
import os
import re
import sys

from fsplitter.blocks import BlockError
from fsplitter.splitter import (
    FsplitterError,
    JoinOptions,
    SplitOptions,
    join_files,
    split_file,
)

_SHIFTS = {"k": 10, "m": 20, "g": 30, "t": 40}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class _HelpRequested(Exception):
    pass


def parse_block_size(size: str) -> int:
    """Parse a size such as ``512``, ``4K`` or ``2m`` into bytes."""
    match = _LEADING_INT.match(size)
    value = int(match.group(1)) if match else 0
    if value <= 0:
        raise ValueError("Invalid block size")
    return value << _SHIFTS.get(size[-1].lower(), 0)


def help_text(prog: str) -> str:
    """Return the usage message."""
    return "\n".join(
        [
            f"Usage: ./{prog} [-h] [-c] [-b <block_size>] [-j] [-o <dir_name>] [-f: <FILE>]",
            "Split a file into multiple files.",
            "",
            "Flags:",
            "\t-h\t\tShow the help menu and exit",
            "\t-c\t\tCompress the output files (default: false)",
            "\t-b\t\tSpecify the block size. (default: 4KB)",
            "\t-o\t\tOutput directory where the split files will be saved (default: .)",
            "\t-f\t\tInput file to be split (required)",
            "\t-j\t\tMerge files instead of splitting them",
            "",
            "Block Flags:",
            "\tB\t\tBytes",
            "\tK\t\tKilobytes",
            "\tM\t\tMegabytes",
            "\tG\t\tGigabytes",
            "\tT\t\tTerabytes",
        ]
    )


def parse_arguments(argv: list[str]) -> SplitOptions | JoinOptions:
    """Turn command line arguments into split or join options."""
    opts, _ = getopt.gnu_getopt(argv, "jhcb:o:f:")
    split = SplitOptions()
    join = False
    for flag, value in opts:
        if flag == "-h":
            raise _HelpRequested()
        if flag == "-c":
            split.compress = True
        elif flag == "-b":
            split.block_size = parse_block_size(value)
        elif flag == "-o":
            split.output = value
        elif flag == "-f":
            split.filename = value
        elif flag == "-j":
            join = True
    if join:
        return JoinOptions(dirname=split.output, output=split.filename, compress=split.compress)
    return split


def _usage_failure(prog: str, message: str) -> int:
    print(help_text(prog))
    print(f"\n\n{message}")
    return 1


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the exit status."""
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "fsplitter"
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        options = parse_arguments(args)
    except _HelpRequested:
        print(help_text(prog))
        return 0
    except getopt.GetoptError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        if isinstance(options, SplitOptions):
            if options.filename is None:
                return _usage_failure(prog, "Missing file option (-f)")
            split_file(options)
        else:
            if options.output is None:
                return _usage_failure(prog, "Missing directory option (-o)")
            join_files(options)
    except (FsplitterError, BlockError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())