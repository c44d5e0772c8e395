# zedit

Building blocks for a text editor, with no runtime dependencies.

## Modules

- `zedit.summary`: `Summary`, the base for additive summaries, plus `Count`
  (a single `value`) and `TextSummary` (`len` and `lines`). Calling a summary
  class with no arguments gives its zero value; `add_summary` and `+` combine
  two summaries of the same type.
- `zedit.sum_tree`: `SumTree`, a tree of items that each report a
  `summary()`. `SumTree.from_items(items, summary_type)` builds a balanced tree
  with at most 8 children per node. `push` appends a single item, `summary()`
  gives the total, and iterating yields the items in order. `Cursor` records a
  position in a tree, starting at 0.
- `zedit.chunk`: `Chunk`, an immutable piece of text with cached newline byte
  offsets, and `TextMetrics`, its summary (byte length and newline count).
- `zedit.rope`: `Rope`, text held as chunks of about 1024 bytes in a
  `SumTree`. All offsets are UTF-8 byte offsets.
  - `len(rope)` gives the length and `line_count()` the number of newlines.
  - Lookups: `line`, `line_to_byte`, `byte_to_line_col` (columns counted in
    characters), `line_byte_range` and `slice_bytes`.
  - Edits: `insert`, `push_str` and `delete`. An offset that is out of range
    raises `IndexError`. An offset inside a multi-byte character raises
    `ValueError`.
  - `chunks()` yields the text of each chunk, and `str(rope)` gives the whole
    text.
- `zedit.history`: `Transaction` holds an edit (`Insert`, `Delete` or
  `Replace`) with the cursor positions before and after it. `History` keeps
  the `current` buffer (any value) with undo and redo stacks of snapshots. Its
  methods are `push`, `update_current`, `undo`, `redo`, `can_undo` and
  `can_redo`.
- `zedit.fileio`: `read_file` and `write_file` handle whole UTF-8 files.
  `read_file_chunked(path, max_size)` reads line by line and appends a
  truncation notice once `max_size` bytes would be exceeded.
  `write_file_from_rope` writes a rope chunk by chunk.
- `zedit.mmap_reader`: `MmapReader.open(path)` memory-maps a file. It offers
  `chunk`, `chunk_as_str` and `as_str`, and works as a context manager.
  `ChunkIterator(reader, chunk_size)` yields the file's bytes in pieces.
- `zedit.streaming`: `StreamingLoader` reads a file in chunks (64 KiB by
  default). It passes each chunk, decoded leniently, to a callback and reports
  progress as a fraction and a message. `load_complete` returns the whole
  text. `is_text_file` treats a file as text if under 1% of its first 512
  bytes are NUL. `FileInfo.from_path` gives the size, the text flag and a
  line-count estimate taken from the first 10 KiB. `should_stream()` is true
  over 5 MiB and `should_mmap()` over 10 MiB.
- `zedit.theme`: `Color` (RGBA) and `SyntaxTheme` with `dark()` and `light()`
  palettes. `get_color(capture_name)` returns the colour for a capture name,
  falling back to the default colour for unknown names.
- `zedit.instant_highlighter`: `InstantHighlighter` highlights a byte range of
  text with regular expressions for Python, JavaScript, Rust, or generic text.
  It returns `HighlightedRange`s sorted by start. `detect_language(path)`
  maps file extensions to a language name. Each `Highlight` kind has a colour
  from `to_color()`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from zedit.rope import Rope
from zedit.fileio import write_file_from_rope

rope = Rope.from_text("Hello World")
rope.insert(5, "\n")
assert str(rope) == "Hello\n World"
assert rope.line_count() == 1
assert rope.line(1) == " World"

write_file_from_rope("out.txt", rope)
```

Highlighting a region of text:

```python
from zedit.instant_highlighter import InstantHighlighter

hl = InstantHighlighter()
language = InstantHighlighter.detect_language("script.py")  # "python"
ranges = hl.highlight_visible_region("def f(): return 42", 0, 18, language)
```

Undo and redo:

```python
from zedit.history import History, Transaction

history = History("")
history.push("Hello", Transaction.insert("Hello", (0, 0), (0, 5)))
history.undo()
assert history.current == ""
history.redo()
assert history.current == "Hello"
```

## What it does not do

This is a library only. It has no editor object tying a cursor to a buffer,
no command to start, and no terminal or graphical screen. Highlighting is done
with regular expressions only, not with full parsing. There is no automatic
indentation.