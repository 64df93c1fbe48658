"""Playground pages: linear scripts whose only side effect is printing.

Each page module exposes ``statements()``, yielding one line per executed
statement in order, and ``main()``, which prints them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from enumplay.pages import control_flow, raw_values

PAGES: dict[str, Callable[[], Iterator[str]]] = {
    "control-flow": control_flow.statements,
    "raw-values": raw_values.statements,
}
