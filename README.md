# fortytools

A collection of small command-line tools and data-structure helpers,
written in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command             | What it does                                                           |
|---------------------|------------------------------------------------------------------------|
| `ft-tail`           | Prints the last ten lines of each file, with headers for several       |
| `tinycat`           | Copies each named file to standard output                              |
| `rbtree-demo`       | Builds a sample red-black tree, rotates it and prints it by level      |
| `taskmaster-client` | Interactive shell: `help` lists commands, `exit` quits, others are echoed |
| `taskmaster-server` | Parses the daemon's command-line options and exits                     |

### ft-tail

```
ft-tail FILE...
```

With several files, each one is preceded by a `==> name <==` header, and
every header after the first by a blank line. A file that cannot be read
gives `open() failed !`. With no file at all, standard input is read to its
end and nothing is printed.

### tinycat

```
tinycat FILE...
```

Files that cannot be opened are reported on standard error and skipped.
With no file, a usage line is printed and the status is 1.

### taskmaster-client

Options: `-c/--configuration`, `-i/--interactive`, `-s/--serverurl`,
`-u/--username`, `-p/--password`, `-r/--history-file`, `-?/--help`,
`-V/--version`. Bad options end the run with status 64. The shell returns 0
on `exit` and 1 at end of input.

### taskmaster-server

Accepts `-c`, `-n`, `-u`, `-m`, `-d`, `-l`, `-y`, `-z`, `-e`, `-j`, `-i`,
`-q`, `-k`, `-a`, `-t`, `-p`, `-o` with their long forms (see `--help`).

## Library modules

- `fortytools.ls_sort` – ordering rules for directory listings: `Options`,
  `Entry`, `compare`, `insert_entry`, `build_listing`, and `sort_operands`
  (missing paths first, then files, then directories).
- `fortytools.btree` – a binary search tree (`Node`, `insert_data`,
  `search_item`, `level_count`, `apply_prefix`, `apply_infix`,
  `apply_suffix`, `apply_by_level`).
- `fortytools.rbtree` – red-black tree nodes with rotation and recolouring
  (`RBNode`, `Color`, `rb_insert`, `rotate`, `recolor`, `apply_by_level`,
  `demo_tree`). Insertion does not rebalance the tree.
- `fortytools.linked_list` – a singly linked list (`LinkedList`,
  `from_params`).
- `fortytools.minitalk_codec` – the bit-level encoding used to pass numbers
  and text one signal at a time (`encode_number`, `encode_message`,
  `NumberDecoder`, `MessageDecoder`, `checksum`, `atoi`, `itoa`,
  `format_number`).
- `fortytools.tail`, `fortytools.tinycat` – the building blocks of the
  commands of the same names (`count_lines`, `file_length`, `tail_size`,
  `tail_bytes`, `header`; `cat`).
- `fortytools.taskmaster_client`, `fortytools.taskmaster_server`,
  `fortytools.wc_args` – command-line option handling
  (`ClientArguments`, `parse_client_args`, `build_prompt`, `run_shell`;
  `ServerArguments`, `parse_server_args`; `WcArguments`,
  `parse_arguments`).

### Example

```python
from fortytools.minitalk_codec import atoi, itoa, checksum

atoi("  -17abc")   # -17
itoa(-42)          # "-42"
checksum("ab")     # 4: set bits among the low six bits of each character
```

## What the package does not do

- There is no directory-listing command: `fortytools.ls_sort` only orders
  entries and operands; it neither reads directories nor prints listings.
- There is no command that writes a message to a given file descriptor.
- `fortytools.minitalk_codec` only encodes and decodes bits; it sends and
  receives no signals.
- `taskmaster-client` does not contact a daemon: commands are only echoed
  as `input to send: ...`. `taskmaster-server` starts and supervises no
  processes.
- `fortytools.wc_args` parses options only and counts nothing; of the
  counting options only `-c/--bytes` is accepted, and file operands are
  refused.