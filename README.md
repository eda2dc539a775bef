# vidd

Building blocks for a modal terminal text editor. Each module can be used on
its own; the package has no dependencies outside the standard library.

## Modules

- `vidd.line` – `Line`, a doubly linked chain of numbered lines behind a
  root node (`Line.create_chain()`). Lines can be inserted above or below,
  removed, split at a column, and looked up by number with `get`, `skip`,
  `first` and `last`. Numbers are kept consistent on every change.
- `vidd.input` – `Input`, which reads `\n` separated lines from a path or an
  open stream. `get_line()` returns `None` at the end, `limit_lines(count)`
  caps how many lines are read, and it can be iterated and used as a context
  manager. A path that does not exist reads as empty.
- `vidd.buffer` – `Buffer`, which loads an `Input` (or a path or stream) into
  a line chain, expanding tabs to four spaces and dropping carriage returns.
  An empty line always follows the last line read. `Buffer.lines()` yields
  every line from `head` to `tail`.
- `vidd.selection` – `Selection` between two `Position`s in `NORMAL`, `LINE`,
  `WORD` or `BLOCK` mode (`SelectionType`). `ordered()` puts the start before
  the end; iterating yields one `SelectionRange` per line, whose `text()` is
  the covered part of that line.
- `vidd.style` – `Style` (foreground and background RGB, `StyleFlag` format
  flags) with `string()` and `difference_string(other)` producing ANSI escape
  sequences, and `+` to layer one style over another.
- `vidd.framebuffer` – `FrameBuffer`, a grid of `Pixel`s addressed as
  `fb[x, y]`, with `resize`, `copy_from`, `merge`, `row`, `column`, `rows`,
  `sub_area` and `clear`.
- `vidd.draw` – `Painter`, which draws lines, boxes (plain or framed with
  `LineChars`), filled boxes, style overlays and clipped text onto a
  `FrameBuffer`. Shapes that do not fit are not drawn.
- `vidd.filesystem` – path helpers (`real_path`, `parent_directory`,
  `containing_directory`, `has_extension`, …), file classification as
  `FileType.DIRECTORY`, `TEXT`, `BINARY` or `SPECIAL` (binary is guessed from
  the first 128 bytes), and copy, remove, rename and create operations.
- `vidd.directoryviewer` – `DirectoryViewer`, a sorted listing of one
  directory with a selection pointer and a scroll offset of a given height,
  calling an `on_change` callback when the selection moves.
- `vidd.procstream` – `Process`, a shell command run through `/bin/bash -c`
  in its own session with piped stdin and stdout: non-blocking `read_lines()`,
  `read_all_lines()`, `write()`, `end_write()`, and `close()` (also on leaving
  a `with` block), which interrupts the process group and waits.
- `vidd.search` – `fuzzy_find` (keep items containing every search word),
  `split_at_spaces`, `FuzzySelector` (results with a cursor and scroll view),
  and `grep(query)`, which runs ripgrep (`rg`) in the working directory and
  parses its `file:line:column:text` output into `GrepResult`s.
- `vidd.arguments` – `Arguments`, which splits a command line into flags,
  files and valued options; everything after `--` is a file. With no files and
  no `-` flag, the file list holds `~/.local/share/vidd/default`.
- `vidd.charsets` – named `CharSet`s (`CHARACTERS`, `WHITESPACE`,
  `SPECIALS`, …) and `char_set_of(c)`.
- `vidd.parsestring` – `ParseString`, a window onto a string whose front and
  back can be popped, split and stripped.
- `vidd.xterm` – decoding of the xterm mouse event byte.
- `vidd.colortables` – the 16 and 256 colour terminal palettes;
  `color_from_table(index, size)` returns an RGB triple.
- `vidd.log` – an in-memory message log (`log`, `clear`, `get_logs`).

## Install

```
pip install .
```

`vidd.procstream` needs `/bin/bash`, and `vidd.search.grep` needs `rg` on the
`PATH`.

## Example

```python
from vidd.buffer import Buffer
from vidd.search import fuzzy_find, split_at_spaces

buf = Buffer("notes.txt")
for line in buf.lines():
    print(line.number, line.data)

print(fuzzy_find(split_at_spaces("py src"), ["src/a.py", "docs/b.md"]))
```

## What it does not do

This package is a library of parts. It has no editor command, no full-screen
interface, no keyboard or mouse input handling, no key bindings or editing
modes, no syntax highlighting and no colour themes. `FrameBuffer` and
`Painter` draw into memory only; nothing here writes a frame to a terminal.

## Tests

```
pip install .[test]
pytest
```