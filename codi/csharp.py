"""Render parsed JSON values as C# object/collection initializers.

The output is built for pasting into test fixtures and seed data::

    MyObject instance = new()
    {
        name = "Test",
        tags =
        [
            "a",
        ],
    };

Objects open with ``new()`` and a brace block, arrays use collection
expressions, and every member line ends with a comma. Only the outermost
value is closed with a semicolon.
"""

from __future__ import annotations

import io
import logging
from typing import Any

from .codegen import DEFAULT_TAB_STRING, CodeWriter
from .types import JsonKind, kind_of, number_literal

logger = logging.getLogger(__name__)

DEFAULT_CLASS_NAME = "MyObject"
META_PREFIX = "$"
UNSUPPORTED_LITERAL = "default /* unsupported type */"


def render_initialization(
    json_value: Any,
    class_name: str = DEFAULT_CLASS_NAME,
    *,
    indent: str = DEFAULT_TAB_STRING,
    meta_prefix: str = META_PREFIX,
) -> str:
    cw = CodeWriter(io.StringIO(), indent=indent)
    cw.write(f"{class_name} instance = ")
    render(cw, json_value, is_root=True, meta_prefix=meta_prefix)
    return cw.getvalue()


def render(cw: CodeWriter, value: Any, is_root: bool = True, *, meta_prefix: str = META_PREFIX) -> None:
    """Write ``value`` to ``cw``.

    A root object or array closes with ``;``, anything nested closes with
    ``,``. Scalars always go through :func:`_write_value`, except at the
    root where they end the statement.
    """
    kind = kind_of(value)
    if kind is JsonKind.OBJECT:
        _write_object(cw, value, is_root, meta_prefix)
    elif kind is JsonKind.ARRAY:
        _write_array(cw, value, is_root, meta_prefix)
    elif is_root:
        cw.write_line_with_semicolon(_scalar_literal(kind, value))
    else:
        _write_value(cw, value, meta_prefix)


def _write_object(cw: CodeWriter, obj: dict[str, Any], is_root: bool, meta_prefix: str) -> None:
    cw.write_line("new()")
    cw.start_block()

    for key, value in obj.items():
        key = str(key)
        if key.startswith(meta_prefix):
            continue
        logger.debug("Processing property: %s", key)
        cw.write(f"{key} = ")
        _write_value(cw, value, meta_prefix)

    if is_root:
        cw.end_block_with_semicolon()
    else:
        cw.end_block_with_comma()


def _write_array(cw: CodeWriter, items: list[Any], is_root: bool, meta_prefix: str) -> None:
    if not items:
        if is_root:
            cw.write_line_with_semicolon("[]")
        else:
            cw.write_line_with_comma("[]")
        return

    cw.start_collection()

    for i, item in enumerate(items):
        logger.debug("Processing array item %d: %r", i, item)
        # null elements are dropped, unlike null property values
        if item is None:
            continue
        render(cw, item, is_root=False, meta_prefix=meta_prefix)

    if is_root:
        cw.end_collection_with_semicolon()
    else:
        cw.end_collection_with_comma()


def _write_value(cw: CodeWriter, value: Any, meta_prefix: str) -> None:
    kind = kind_of(value)
    if kind is JsonKind.OBJECT:
        _write_object(cw, value, False, meta_prefix)
    elif kind is JsonKind.ARRAY:
        _write_array(cw, value, False, meta_prefix)
    else:
        cw.write_line_with_comma(_scalar_literal(kind, value))


def _scalar_literal(kind: JsonKind, value: Any) -> str:
    if kind is JsonKind.NULL:
        return "null"
    if kind is JsonKind.UNDEFINED:
        return "default"
    if kind is JsonKind.STRING:
        # no escaping: the source text is emitted verbatim
        return f'"{value}"'
    if kind is JsonKind.NUMBER:
        return number_literal(value)
    if kind is JsonKind.TRUE:
        return "true"
    if kind is JsonKind.FALSE:
        return "false"
    return UNSUPPORTED_LITERAL
