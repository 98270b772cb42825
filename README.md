# fsplitter

fsplitter cuts a file into a directory of numbered piece files named
`block_0.fsp`, `block_1.fsp` and so on, and joins such a directory back into
one file. The data in each piece can be compressed with zlib.

## Installation

```
pip install .
```

## Command line

Split `archive.tar` into pieces of about 1 MiB, compressed, in `parts/`:

```
fsplitter -c -b 1M -o parts -f archive.tar
```

Join the pieces in `parts/` back into `restored.tar`:

```
fsplitter -j -o parts -f restored.tar
```

Flags:

| Flag | Meaning |
|------|---------|
| `-h` | Show the help menu and exit |
| `-c` | Compress the data in the pieces (default: off). Has no effect when joining |
| `-b` | Piece size, such as `512`, `4K`, `8M`, `1G` or `1T` (default: 4096 bytes) |
| `-o` | Directory for the pieces (default: `.`), created if missing. When joining, the directory to read from |
| `-f` | File to split. When joining, the file to write; it is required |
| `-j` | Join pieces instead of splitting a file |

The size suffixes `K`, `M`, `G` and `T`, upper or lower case, stand for
powers of 1024. A number with no suffix, or with `B`, is a count of bytes.
A size that does not start with a positive whole number is rejected.

The command exits with status 0 on success (and after `-h`) and 1 on any
error, printing the reason on standard error. If a required `-f` is missing
it prints the help text followed by a short message.

## How pieces are made

The input is read 1024 bytes at a time. Each read becomes one record in the
current piece: a 17-byte header (stored size and original size as
little-endian unsigned 64-bit integers, then a one-byte compression flag)
followed by the stored bytes. Once the bytes stored in a piece reach the
chosen size, the next read starts a new piece, so a piece can run slightly
over the size. With `-c` the size counts compressed bytes. Every piece but
the last ends with an empty record.

Joining reads `block_0.fsp`, `block_1.fsp`, ... until the next number is
missing, decompressing records as needed, and overwrites the output file.

## Library use

```python
from fsplitter.splitter import SplitOptions, JoinOptions, split_file, join_files

pieces = split_file(
    SplitOptions(filename="archive.tar", output="parts", compress=True, block_size=1 << 20)
)
written = join_files(JoinOptions(dirname="parts", output="restored.tar"))
```

`split_file` returns the paths of the pieces in order; `join_files` returns
the number of bytes written. `block_path(directory, index)` gives the path of
one piece and `check_directory(dirname)` creates or checks an output
directory. Failures raise `fsplitter.splitter.FsplitterError`.

The record format is available on its own in `fsplitter.blocks`: the frozen
dataclass `Block` (with `Block.terminator()` and `Block.raw(data)`),
`compress_data`, `decompress_data`, `write_block` and `read_block`. These
raise `fsplitter.blocks.BlockError` on bad or truncated data.

`fsplitter.cli` offers `parse_block_size`, `parse_arguments`, `help_text` and
`main`.

## What it does not do

There are no checksums: a damaged piece is noticed only if its records cannot
be read or decompressed. Joining does not check that the pieces came from the
same split, and stray higher-numbered pieces left in the directory by an
earlier split are joined too.

## Tests

```
pip install .[test]
pytest
```