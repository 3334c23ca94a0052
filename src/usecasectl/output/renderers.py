"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from usecasectl.output.console import create_console, get_output, style_for_goal_level

if TYPE_CHECKING:
    from rich.console import Console

    from usecasectl.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="uc.ok"), Text(result.op, style="uc.op"))


def _field(console: Console, key: str, value: Any) -> None:
    style = {"id": "uc.id", "title": "uc.title"}.get(key, "")
    console.print(Text(f"  {key}: ", style="uc.key"), Text(str(value), style=style))


def _render_validation_errors(console: Console, errors: list[dict[str, Any]]) -> None:
    for err in errors:
        console.print(
            Text("  - ", style="uc.error"),
            Text(f"{err.get('field', '?')}: ", style="uc.field"),
            Text(str(err.get("message", ""))),
        )
        if err.get("example"):
            console.print(Text(f"      {err['example']}", style="uc.example"))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    # Validation failures list their errors below; keep the headline to one line.
    msg = err.message.splitlines()[0].rstrip(":") if err else "Unknown error"
    console.print(Text("ERROR", style="uc.error"), Text(result.op, style="uc.op"), "—", msg)
    if err is None:
        return

    errors = err.detail.get("errors")
    if errors:
        _render_validation_errors(console, errors)
    for violation in err.detail.get("violations", []):
        console.print(Text(f"  - {violation}"))

    if verbose:
        for key in ("op", "target"):
            if key in err.detail:
                _field(console, key, err.detail[key])


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print(Text("No use cases found.", style="dim"))
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Title", style="uc.title")
    table.add_column("Primary Actor")
    table.add_column("Goal Level")
    if verbose:
        table.add_column("ID", style="uc.id")

    for item in items:
        level = str(item.get("goal_level", ""))
        row = [
            str(item.get("title", "")),
            str(item.get("primary_actor", "")),
            Text(level, style=style_for_goal_level(level)),
        ]
        if verbose:
            row.append(str(item.get("id", "")))
        table.add_row(*row)

    console.print(table)
    console.print(Text(f"{result.data.get('count', len(items))} use case(s)", style="dim"))


def _render_document(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    doc: dict[str, Any] = result.data.get("use_case", {})
    console.print(Text(str(doc.get("title", "")), style="uc.title"))
    for label, key in (
        ("id", "id"),
        ("primary actor", "primaryActor"),
        ("goal level", "goalLevel"),
        ("scope", "designScope"),
        ("trigger", "trigger"),
    ):
        _field(console, label, doc.get(key, ""))

    for label, key in (
        ("Stakeholders", "stakeholders"),
        ("Preconditions", "preconditions"),
        ("Postconditions", "postconditions"),
        ("Success guarantees", "successGuarantees"),
    ):
        values = doc.get(key) or []
        if values:
            console.print(Text(f"{label}:", style="bold"))
            for value in values:
                console.print(f"  - {value}")

    steps = doc.get("mainScenario", {}).get("steps", [])
    console.print(Text("Main scenario:", style="bold"))
    for step in steps:
        console.print(f"  {step['number']}. {step['actor']} {step['action']}")

    extensions = doc.get("extensions") or []
    if extensions:
        console.print(Text("Extensions:", style="bold"))
        for ext in extensions:
            console.print(f"  {ext['branchPoint']}a. {ext['condition']}")
            for step in ext.get("steps", []):
                console.print(f"      {step['number']}. {step['actor']} {step['action']}")


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("id", "title", "path", "deleted"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("field", "text", "id"):
        if key in result.data:
            _field(console, key, result.data[key])
    console.print(Text("  valid", style="uc.ok"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "list": _render_list,
    "show": _render_document,
    "create": _render_mutation,
    "update": _render_mutation,
    "delete": _render_mutation,
    "validate": _render_check,
    "lint": _render_check,
}
