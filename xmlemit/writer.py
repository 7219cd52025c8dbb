"""Streaming XML writer that emits events to a binary stream, with optional indentation."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import BinaryIO, Union

BytesLike = Union[str, bytes, bytearray]

_ESCAPES = (
    (b"&", b"&amp;"),
    (b"<", b"&lt;"),
    (b">", b"&gt;"),
    (b"'", b"&apos;"),
    (b'"', b"&quot;"),
)


def _to_bytes(value: BytesLike) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")


def _escape(value: BytesLike) -> bytes:
    data = _to_bytes(value)
    for raw, entity in _ESCAPES:
        data = data.replace(raw, entity)
    return data


class EventKind(enum.Enum):
    """The kinds of XML events a writer can emit."""

    START = "start"
    END = "end"
    EMPTY = "empty"
    TEXT = "text"
    COMMENT = "comment"
    CDATA = "cdata"
    DECL = "decl"
    PI = "pi"
    DOCTYPE = "doctype"
    EOF = "eof"


@dataclass(frozen=True)
class Event:
    """An XML event holding the bytes that go between its delimiters.

    For tags the content is the name followed by serialized attributes; for
    text it is the already-escaped character data.
    """

    kind: EventKind
    content: bytes = b""

    @staticmethod
    def _tag_content(
        name: BytesLike,
        attributes: Mapping[BytesLike, BytesLike] | Iterable[tuple[BytesLike, BytesLike]],
    ) -> bytes:
        parts = [_to_bytes(name)]
        pairs = attributes.items() if isinstance(attributes, Mapping) else attributes
        for key, value in pairs:
            parts.append(b" " + _to_bytes(key) + b'="' + _escape(value) + b'"')
        return b"".join(parts)

    @classmethod
    def start(cls, name: BytesLike, attributes=()) -> "Event":
        """An opening tag with optional attributes (values are escaped)."""
        return cls(EventKind.START, cls._tag_content(name, attributes))

    @classmethod
    def empty(cls, name: BytesLike, attributes=()) -> "Event":
        """A self-closing tag with optional attributes (values are escaped)."""
        return cls(EventKind.EMPTY, cls._tag_content(name, attributes))

    @classmethod
    def end(cls, name: BytesLike) -> "Event":
        """A closing tag."""
        return cls(EventKind.END, _to_bytes(name))

    @classmethod
    def text(cls, plain: BytesLike) -> "Event":
        """Character data given unescaped; it is escaped on construction."""
        return cls(EventKind.TEXT, _escape(plain))

    @classmethod
    def escaped_text(cls, escaped: BytesLike) -> "Event":
        """Character data that is already escaped."""
        return cls(EventKind.TEXT, _to_bytes(escaped))

    @classmethod
    def comment(cls, content: BytesLike) -> "Event":
        return cls(EventKind.COMMENT, _to_bytes(content))

    @classmethod
    def cdata(cls, content: BytesLike) -> "Event":
        return cls(EventKind.CDATA, _to_bytes(content))

    @classmethod
    def decl(
        cls,
        version: BytesLike,
        encoding: BytesLike | None = None,
        standalone: BytesLike | None = None,
    ) -> "Event":
        """An XML declaration such as ``<?xml version="1.0"?>``."""
        content = b'xml version="' + _to_bytes(version) + b'"'
        if encoding is not None:
            content += b' encoding="' + _to_bytes(encoding) + b'"'
        if standalone is not None:
            content += b' standalone="' + _to_bytes(standalone) + b'"'
        return cls(EventKind.DECL, content)

    @classmethod
    def pi(cls, content: BytesLike) -> "Event":
        """A processing instruction."""
        return cls(EventKind.PI, _to_bytes(content))

    @classmethod
    def doctype(cls, content: BytesLike) -> "Event":
        """A document type declaration; content follows ``<!DOCTYPE`` verbatim."""
        return cls(EventKind.DOCTYPE, _to_bytes(content))

    @classmethod
    def eof(cls) -> "Event":
        return cls(EventKind.EOF)


_WRAPPERS: dict[EventKind, tuple[bytes, bytes]] = {
    EventKind.START: (b"<", b">"),
    EventKind.END: (b"</", b">"),
    EventKind.EMPTY: (b"<", b"/>"),
    EventKind.COMMENT: (b"<!--", b"-->"),
    EventKind.DECL: (b"<?", b"?>"),
    EventKind.PI: (b"<?", b"?>"),
    EventKind.DOCTYPE: (b"<!DOCTYPE", b">"),
}


@dataclass
class _Indentation:
    char: bytes
    size: int
    level: int = 0
    should_line_break: bool = False

    @property
    def indent(self) -> bytes:
        return self.char * self.level

    def grow(self) -> None:
        self.level += self.size

    def shrink(self) -> None:
        self.level = max(0, self.level - self.size)


class Writer:
    """Writes XML events to a binary stream.

    When ``indent_char`` is given, tags are placed on new lines and indented by
    ``indent_size`` copies of that character per nesting level. Text and CDATA
    suppress the line break before the tag that follows them.
    """

    def __init__(
        self,
        inner: BinaryIO,
        indent_char: BytesLike | int | None = None,
        indent_size: int = 0,
    ) -> None:
        self._inner = inner
        self._indent: _Indentation | None = None
        if indent_char is not None:
            if isinstance(indent_char, int):
                char = bytes([indent_char])
            else:
                char = _to_bytes(indent_char)
            if len(char) != 1:
                raise ValueError("indent_char must be a single byte")
            if indent_size < 0:
                raise ValueError("indent_size must not be negative")
            self._indent = _Indentation(char, indent_size)

    def into_inner(self) -> BinaryIO:
        """Return the underlying stream."""
        return self._inner

    @property
    def inner(self) -> BinaryIO:
        return self._inner

    def write_event(self, event: Event) -> None:
        """Write one event to the underlying stream."""
        if not isinstance(event, Event):
            raise TypeError(f"expected Event, got {type(event).__name__}")
        kind = event.kind
        next_should_line_break = True
        try:
            if kind is EventKind.START:
                self._write_wrapped(event.content, *_WRAPPERS[kind])
                if self._indent is not None:
                    self._indent.grow()
            elif kind is EventKind.END:
                if self._indent is not None:
                    self._indent.shrink()
                self._write_wrapped(event.content, *_WRAPPERS[kind])
            elif kind is EventKind.TEXT:
                next_should_line_break = False
                self.write(event.content)
            elif kind is EventKind.CDATA:
                next_should_line_break = False
                self.write(b"<![CDATA[")
                self.write(event.content)
                self.write(b"]]>")
            elif kind is EventKind.EOF:
                pass
            else:
                self._write_wrapped(event.content, *_WRAPPERS[kind])
        finally:
            if self._indent is not None:
                self._indent.should_line_break = next_should_line_break

    def write(self, value: BytesLike) -> None:
        """Write raw bytes to the underlying stream."""
        self._inner.write(_to_bytes(value))

    def _write_wrapped(self, value: bytes, before: bytes, after: bytes) -> None:
        if self._indent is not None and self._indent.should_line_break:
            self._inner.write(b"\n" + self._indent.indent)
        self.write(before)
        self.write(value)
        self.write(after)

    def write_indent(self) -> None:
        """Write a newline and the current indentation; no-op without indentation."""
        if self._indent is not None:
            self._inner.write(b"\n" + self._indent.indent)