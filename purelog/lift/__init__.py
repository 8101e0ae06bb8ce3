"""
Lift helpers with semantic namespaces.

    from purelog import lift as L   # Recommended

Architecture:
- L.up.*    - подъем значений и функций в Writer / WriterResult
- L.call()  - вызов обычной функции с логом
- L.logged  - декоратор: обычная функция -> стадия
- L.down.*  - выход из конвейера (распаковка, unwrap, emit в logging)

Examples:
    from purelog import lift as L

    @L.logged("used scream! ")
    def uppercase(s: str) -> str:
        return s.upper()

    parse = L.up.catching(int, on_error=str, log="used parse! ")
    value = L.down.emit(uppercase("hi"), logger)
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

from .up import catching, fail, fallible, ok, pure, tell
from .call import call, logged
from .down import emit, emit_result, to_tuple, unsafe

# L.up.* / L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "pure",
    "tell",
    "ok",
    "fail",
    "fallible",
    "catching",
    # Call
    "call",
    "logged",
    # Down
    "to_tuple",
    "unsafe",
    "emit",
    "emit_result",
)
