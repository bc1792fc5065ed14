from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import TextIO

DEFAULT_TAB_STRING = "\t"


@dataclass
class CodeWriter:
    """
    Indentation-aware text writer for C#-style initializer code.

    Text goes straight to ``stream``. After a line break the next write is
    prefixed with ``indent * depth``; the first line is never indented on
    its own, see :meth:`initialize_indent`.
    """
    stream: TextIO = field(default_factory=io.StringIO)
    indent: str = DEFAULT_TAB_STRING
    base_indent: int = 0
    _level: int = field(default=0, init=False)
    _tabs_pending: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.depth = self.base_indent

    @property
    def depth(self) -> int:
        return self._level

    @depth.setter
    def depth(self, value: int) -> None:
        self._level = max(value, 0)

    def _output_tabs(self) -> None:
        if self._tabs_pending:
            self.stream.write(self.indent * self._level)
            self._tabs_pending = False

    def write(self, text: str) -> None:
        self._output_tabs()
        self.stream.write(text)

    def write_line(self, text: str = "") -> None:
        self._output_tabs()
        self.stream.write(text)
        self.stream.write("\n")
        self._tabs_pending = True

    def write_with_comma(self, value: object) -> None:
        self.write(f"{value}")
        self.write(",")

    def write_line_with_comma(self, value: object) -> None:
        self.write(f"{value}")
        self.write_line(",")

    def write_line_with_semicolon(self, value: object) -> None:
        self.write(f"{value}")
        self.write_line(";")

    def start_collection(self) -> None:
        self.write_line()
        self.write_line("[")
        self.depth += 1

    def end_collection(self) -> None:
        self.depth -= 1
        self.write_line("]")

    def end_collection_with_comma(self) -> None:
        self.depth -= 1
        self.write_line("],")

    def end_collection_with_semicolon(self) -> None:
        self.depth -= 1
        self.write_line("];")

    def start_block(self) -> None:
        self.write_line("{")
        self.depth += 1

    def end_block(self) -> None:
        self.depth -= 1
        self.write_line("}")

    def end_block_with_comma(self) -> None:
        self.depth -= 1
        self.write_line("},")

    def end_block_with_semicolon(self) -> None:
        self.depth -= 1
        self.write_line("};")

    def initialize_indent(self) -> None:
        # Automatic indentation only kicks in after a line break, so an
        # emitter that may produce the first line at a nested depth primes
        # it here.
        self.write(self.indent * self._level)

    def block(self) -> "_Scope":
        return _Scope(self, self.start_block, self.end_block)

    def collection(self) -> "_Scope":
        return _Scope(self, self.start_collection, self.end_collection)

    def getvalue(self) -> str:
        return self.stream.getvalue()  # type: ignore[attr-defined]


class _Scope:
    def __init__(self, cw: CodeWriter, start, end) -> None:
        self.cw = cw
        self._start = start
        self._end = end

    def __enter__(self) -> CodeWriter:
        self._start()
        return self.cw

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end()
