"""Simple profiling of initializer rendering on wide and deep documents."""

from __future__ import annotations

import timeit
import tracemalloc
from typing import Any

from codi import loads, render_initialization


def _build_nested(depth: int) -> dict[str, Any]:
    current: dict[str, Any] = {"leaf": True}
    for i in range(depth - 1):
        current = {"level": i, "child": current, "items": [1, None, "x"]}
    return current


def main() -> None:
    wide: Any = loads("[" + ",".join(f'{{"id": {i}, "price": {i}.50, "tags": []}}' for i in range(500)) + "]")
    duration: float = timeit.timeit(lambda: render_initialization(wide), number=100)
    print(f"Wide document (500 objects): {duration:.4f}s/100")

    nested: dict[str, Any] = _build_nested(100)
    deep: float = timeit.timeit(lambda: render_initialization(nested), number=100)
    print(f"Nested document (depth 100): {deep:.4f}s/100")

    tracemalloc.start()
    text: str = render_initialization(nested)
    current: int
    peak: int
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    print(f"Nested render: {len(text)} chars, current={current} bytes peak={peak} bytes")


if __name__ == "__main__":
    main()
