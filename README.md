# xmlemit

`xmlemit` writes a stream of XML events to any binary file-like object. The
events are start tags, end tags, empty elements, text, comments, CDATA
sections, declarations, processing instructions, doctypes and end-of-file.
It can also indent nested elements for you.

## Installation

```
pip install xmlemit
```

## Usage

Everything lives in `xmlemit.writer`. `Writer` wraps any object that has a
`write(bytes)` method, for example `io.BytesIO`. Each `Event` has an
`EventKind` and the bytes that go between the event's delimiters. The
easiest way to build events is with the class methods on `Event`:

```python
import io
from xmlemit.writer import Event, Writer

writer = Writer(io.BytesIO())
writer.write_event(Event.start("root", {"id": "1"}))
writer.write_event(Event.text("a < b"))
writer.write_event(Event.end("root"))
print(writer.into_inner().getvalue())
# b'<root id="1">a &lt; b</root>'
```

Arguments may be `str`, which is encoded as UTF-8, or `bytes`.

### Event constructors

- `Event.start(name, attributes=())` and `Event.empty(name, attributes=())`
  build an opening tag or a self-closing tag. `attributes` is a mapping or
  an iterable of `(key, value)` pairs, and the values are escaped.
- `Event.end(name)` builds a closing tag.
- `Event.text(plain)` escapes `&`, `<`, `>`, `'` and `"`.
  `Event.escaped_text(escaped)` takes text that is already escaped.
- `Event.comment(content)` and `Event.cdata(content)` build a comment and a
  CDATA section.
- `Event.decl(version, encoding=None, standalone=None)` builds
  `<?xml version="..." ...?>`. It leaves out the parts that are `None`.
- `Event.pi(content)` builds a processing instruction, `<?content?>`.
- `Event.doctype(content)` writes `<!DOCTYPE` followed by `content`
  verbatim, then `>`.
- `Event.eof()` writes nothing.

You can also build an event directly, for example
`Event(EventKind.COMMENT, b"note")`.

`Writer.write_event` raises `TypeError` when it is given anything other
than an `Event`.

### Indentation

Pass an indent character, as one byte, a one-character string or an int,
together with an indent size. The writer then starts every tag-like event
on a new line, indented by `indent_size` copies of the character for each
open element. The first event does not get a line break. An event that
directly follows text or CDATA stays on the same line.

```python
writer = Writer(io.BytesIO(), b" ", 4)
writer.write_event(Event.start("paired"))
writer.write_event(Event.empty("inner"))
writer.write_event(Event.end("paired"))
print(writer.into_inner().getvalue())
# b'<paired>\n    <inner/>\n</paired>'
```

The writer raises `ValueError` when the indent character is not exactly one
byte or when the size is negative.

This rule does not always give the layout you want, for example when a
start tag directly follows text. In that case call `Writer.write_indent()`
yourself. It writes a newline and the current indentation. Without
indentation it does nothing.

### Raw output

`Writer.write(value)` writes bytes to the underlying stream as they are.
A `str` value is encoded as UTF-8 first. `Writer.into_inner()` and the
`Writer.inner` property return the underlying stream.

## What it does not do

`xmlemit` only writes XML. It does not parse XML, check that tags are well
formed or balanced, or resolve namespaces.

## Running the tests

```
pip install -e ".[test]"
pytest
```