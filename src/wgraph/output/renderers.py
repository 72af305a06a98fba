"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.

Lines are built from :class:`rich.text.Text` pieces so node ids are never
parsed as console markup, and printed with ``soft_wrap`` so a long
traversal stays on one line.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from wgraph.output.console import create_console, format_weight, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from wgraph.services.result import ServiceResult

    Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    weight_precision: int = 6,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, precision=weight_precision)
    else:
        _render_error(result, console, verbose=verbose)

    if verbose:
        _render_meta(console, result)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Traversals print their visitation order one id per line and the graph
    listing prints node ids; other successes print a bare status, marking
    an add_node that found the node already present.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    if result.op in ("bfs", "dfs"):
        return "\n".join(result.data.get("order", []))
    if result.op == "print_graph":
        return "\n".join(str(n["id"]) for n in result.data.get("nodes", []))
    if result.op == "add_node" and not result.data.get("created", True):
        return "OK: add_node (exists)"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _line(console: Console, *parts: str | tuple[str, str]) -> None:
    console.print(Text.assemble(*parts), soft_wrap=True)


def _node(node: str) -> tuple[str, str]:
    return (f"'{node}'", "wg.node")


def _weight(weight: float, precision: int) -> tuple[str, str]:
    return (format_weight(weight, precision), "wg.weight")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, expanding any telemetry span tree."""
    if not result.meta:
        return

    _line(console, ("  meta:", "wg.key"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            _line(console, f"    {key}: {value}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    prefix = " " * indent
    duration = span.get("duration_ms", 0.0)
    extras = ", ".join(f"{k}={v}" for k, v in span.get("annotations", {}).items())
    parts: list[str | tuple[str, str]] = [
        prefix,
        (f"{duration:>8.3f}ms", "wg.key"),
        f"  {span.get('name', '?')}",
    ]
    if extras:
        parts.append(f"  ({extras})")
    _line(console, *parts)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    _line(console, (f"{msg}.", "wg.error"))
    if verbose and err:
        _line(console, ("  code: ", "wg.key"), err.code)
        for key, value in err.detail.items():
            _line(console, (f"  {key}: ", "wg.key"), str(value))


# ── Mutation renderers ────────────────────────────────────────────────


def _node_added(console: Console, node: str) -> None:
    _line(console, "Node ", _node(node), (" added successfully.", "wg.ok"))


def _render_add_node(result: ServiceResult, console: Console, *, precision: int) -> None:
    node = result.data["node"]
    if result.data["created"]:
        _node_added(console, node)
    else:
        _line(console, "Node ", _node(node), (" already exists.", "wg.info"))


def _render_add_edge(result: ServiceResult, console: Console, *, precision: int) -> None:
    d = result.data
    for node in d.get("created_nodes", []):
        _node_added(console, node)
    _line(
        console,
        ("Edge added", "wg.ok"),
        " from ",
        _node(d["source"]),
        " to ",
        _node(d["destination"]),
        " with weight ",
        _weight(d["weight"], precision),
        ".",
    )


def _render_delete_node(result: ServiceResult, console: Console, *, precision: int) -> None:
    _line(console, "Node ", _node(result.data["node"]), (" deleted successfully.", "wg.ok"))


def _render_update_weight(result: ServiceResult, console: Console, *, precision: int) -> None:
    d = result.data
    _line(
        console,
        ("Weight updated", "wg.ok"),
        " for edge from ",
        _node(d["source"]),
        " to ",
        _node(d["destination"]),
        " to ",
        _weight(d["weight"], precision),
        ".",
    )


# ── Query renderers ───────────────────────────────────────────────────


def _render_traversal(result: ServiceResult, console: Console, *, precision: int) -> None:
    d = result.data
    _line(
        console,
        (f"{result.op.upper()} Traversal", "wg.op"),
        " starting from ",
        _node(d["start"]),
        ": ",
        " ".join(d["order"]),
    )


def _render_graph(result: ServiceResult, console: Console, *, precision: int) -> None:
    """One ``node -> (dest, weight) ...`` line per node, in registry order."""
    _line(console, ("Weighted Graph Representation:", "wg.heading"))
    for node in result.data.get("nodes", []):
        parts: list[str | tuple[str, str]] = [(node["id"], "wg.node"), " ->"]
        for edge in node["edges"]:
            parts += [" (", edge["destination"], ", ", _weight(edge["weight"], precision), ")"]
        _line(console, *parts)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, precision: int) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _line(console, ("OK", "wg.ok"), (f"  {result.op}", "wg.op"))
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        _line(console, (f"  {key}: ", "wg.key"), str(value))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "add_node": _render_add_node,
    "add_edge": _render_add_edge,
    "delete_node": _render_delete_node,
    "update_weight": _render_update_weight,
    "bfs": _render_traversal,
    "dfs": _render_traversal,
    "print_graph": _render_graph,
}
