from .codegen import CodeWriter, DEFAULT_TAB_STRING
from .csharp import (
    render_initialization, render, DEFAULT_CLASS_NAME, META_PREFIX, UNSUPPORTED_LITERAL,
)
from .types import JsonKind, JsonNumber, JsonValue, UNDEFINED, kind_of, load, loads

__all__ = [
    # writer
    "CodeWriter", "DEFAULT_TAB_STRING",
    # emitter
    "render_initialization", "render", "DEFAULT_CLASS_NAME", "META_PREFIX", "UNSUPPORTED_LITERAL",
    # json values
    "JsonKind", "JsonNumber", "JsonValue", "UNDEFINED", "kind_of", "load", "loads",
]
