"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from enumplay.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from enumplay.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, width: int | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "demo":
        return "\n".join(result.data.get("lines", []))

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if isinstance(item, dict))

    if "id" in result.data:
        return str(result.data["id"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="ep.ok"), Text(f"  {result.op}", style="ep.op"))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="ep.key"), Text(str(value), style=style), sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="ep.error"),
        Text(f"  {result.op}", style="ep.op"),
        Text(" — "),
        Text(msg),
    )
    if err and err.detail.get("choices"):
        _field(console, "choices", ", ".join(str(c) for c in err.detail["choices"]))


# ── Operation renderers ───────────────────────────────────────────────


def _render_demo(result: ServiceResult, console: Console) -> None:
    # Page output is printed verbatim: no status line, no wrapping.
    for line in result.data.get("lines", []):
        console.print(Text(line), soft_wrap=True)


def _render_list_sets(result: ServiceResult, console: Console) -> None:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Set", style="ep.set", no_wrap=True)
    table.add_column("Type")
    table.add_column("Variants", justify="right")
    table.add_column("Raw values")
    table.add_column("Summary")
    for item in result.data.get("items", []):
        table.add_row(
            item["id"],
            item["type"],
            str(item["variants"]),
            "yes" if item["raw_values"] else "no",
            item["summary"],
        )
    console.print(table)


def _render_list_variants(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    has_raw = any("raw_value" in item for item in items)

    table = Table(
        title=f"{result.data.get('set')} ({result.data.get('type')})",
        show_header=True,
        pad_edge=False,
        expand=False,
    )
    table.add_column("Variant", style="ep.variant", no_wrap=True)
    table.add_column("Label")
    if has_raw:
        table.add_column("Raw value", style="ep.raw", justify="right")
    for item in items:
        row = [item["id"], item["label"]]
        if has_raw:
            row.append(str(item["raw_value"]))
        table.add_row(*row)
    console.print(table)


def _render_variant(result: ServiceResult, console: Console) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "set", data.get("set", ""), "ep.set")
    _field(console, "variant", data.get("id", ""), "ep.variant")
    _field(console, "label", data.get("label", ""))
    if "raw_value" in data:
        _field(console, "raw_value", data["raw_value"], "ep.raw")
    for name, text in data.get("descriptions", {}).items():
        _field(console, name, text)


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "demo": _render_demo,
    "list_sets": _render_list_sets,
    "list_variants": _render_list_variants,
    "describe": _render_variant,
    "lookup": _render_variant,
}
