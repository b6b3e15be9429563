"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Successful results print one line per rendering; ``_LINE_LABELS`` names
each line by ``result.op`` in verbose mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from tsbridge.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from tsbridge.services.result import ServiceResult


_LINE_LABELS: dict[str, tuple[str, ...]] = {
    "demo": ("native", "instant", "timespec", "round-trip"),
    "show": ("native", "timespec", "instant"),
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _render_lines(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the last rendering only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    lines = result.data.get("lines")
    if lines and isinstance(lines, list):
        return str(lines[-1])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ts.key")
    console.print(k, Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the Timespec fields and meta block (verbose only)."""
    console.print()
    for key in ("seconds", "nanoseconds", "consistent"):
        if key in result.data:
            _field(console, key, result.data[key])
    for key, value in (result.meta or {}).items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ts.error")
    op = Text(f"  {result.op}", style="ts.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_lines(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """One line per rendering; verbose prefixes each with its source."""
    lines = result.data.get("lines", [])
    if not verbose:
        for line in lines:
            console.print(Text(line))
        return

    known = _LINE_LABELS.get(result.op, ())
    labels = [known[i] if i < len(known) else str(i + 1) for i in range(len(lines))]
    width = max((len(label) for label in labels), default=0)
    for label, line in zip(labels, lines):
        console.print(
            Text(f"{label:<{width}}  ", style="ts.label"),
            Text(line, style="ts.value"),
            sep="",
        )
    _render_meta(console, result)
