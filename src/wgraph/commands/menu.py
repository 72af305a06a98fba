"""Command: interactive numbered menu over one in-memory graph.

The graph lives for the duration of the menu session.  Each selection
prompts for its arguments, calls one GraphService operation and emits
the result.  Choice 8 or end of input ends the session.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click
from click.types import FloatParamType
import structlog

from wgraph.commands._base import GraphCommand
from wgraph.services.graph import GraphService

if TYPE_CHECKING:
    from wgraph.commands._context import AppContext

log = structlog.get_logger(__name__)

_MENU_EXAMPLES = """\
  wgraph
  wgraph menu
  printf '2\\nA\\nB\\n1.5\\n5\\nA\\n8\\n' | wgraph menu
  wgraph --quiet menu < session.txt
  wgraph --json menu"""

MENU_ITEMS: tuple[str, ...] = (
    "Add Node",
    "Add Edge",
    "Delete Node",
    "Update Edge Weight",
    "BFS Traversal",
    "DFS Traversal",
    "Print Graph",
    "Exit",
)
EXIT_CHOICE = len(MENU_ITEMS)


class NodeIdType(click.ParamType):
    """A node id typed at a prompt: one token, surrounding whitespace dropped."""

    name = "node"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> str:
        token = str(value).strip()
        if not token:
            self.fail("Node name cannot be empty.", param, ctx)
        if len(token.split()) > 1:
            self.fail(f"Node name cannot contain whitespace: {token!r}", param, ctx)
        return token


NODE_ID = NodeIdType()


class WeightType(FloatParamType):
    """An edge weight typed at a prompt.  Must be a finite float."""

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> float:
        weight = super().convert(value, param, ctx)
        if not math.isfinite(weight):
            self.fail(f"Weight must be a finite number: {value!r}", param, ctx)
        return weight


WEIGHT = WeightType()


def render_menu(title: str) -> str:
    """The menu banner: title line, then one numbered line per item."""
    lines = [f"\n{title} :"]
    lines += [f"{number}. {label}" for number, label in enumerate(MENU_ITEMS, start=1)]
    return "\n".join(lines)


class MenuSession:
    """Prompt/dispatch loop bound to one AppContext and its graph."""

    def __init__(self, app: AppContext) -> None:
        self._app = app
        self._service = GraphService(app.store)
        self._err = app.prompts_to_stderr
        self._handlers: dict[int, Callable[[], None]] = {
            1: self._add_node,
            2: self._add_edge,
            3: self._delete_node,
            4: self._update_weight,
            5: self._bfs,
            6: self._dfs,
            7: self._print_graph,
        }

    # -- prompting -------------------------------------------------------

    def _echo(self, message: str) -> None:
        click.echo(message, err=self._err)

    def _node(self, text: str) -> str:
        return click.prompt(text, type=NODE_ID, err=self._err)

    def _weight(self, text: str) -> float:
        return click.prompt(text, type=WEIGHT, err=self._err)

    # -- handlers --------------------------------------------------------

    def _add_node(self) -> None:
        node = self._node("Enter node name")
        self._app.emit(self._service.add_node(node))

    def _add_edge(self) -> None:
        source = self._node("Enter source node")
        destination = self._node("Enter destination node")
        weight = self._weight("Enter edge weight")
        self._app.emit(self._service.add_edge(source, destination, weight))

    def _delete_node(self) -> None:
        node = self._node("Enter node to delete")
        self._app.emit(self._service.delete_node(node))

    def _update_weight(self) -> None:
        source = self._node("Enter source node")
        destination = self._node("Enter destination node")
        weight = self._weight("Enter new weight")
        self._app.emit(self._service.update_weight(source, destination, weight))

    def _bfs(self) -> None:
        start = self._node("Enter start node for BFS")
        self._app.emit(self._service.bfs(start))

    def _dfs(self) -> None:
        start = self._node("Enter start node for DFS")
        self._app.emit(self._service.dfs(start))

    def _print_graph(self) -> None:
        self._app.emit(self._service.print_graph())

    # -- loop --------------------------------------------------------------

    def dispatch(self, choice: int) -> bool:
        """Run the handler for *choice*.  Returns False once the user exits."""
        if choice == EXIT_CHOICE:
            return False
        handler = self._handlers.get(choice)
        if handler is None:
            self._echo("Invalid choice. Please try again.")
        else:
            handler()
        return True

    def run(self) -> None:
        title = self._app.settings.menu.title
        log.debug("menu.start", thread_safe=self._app.store.thread_safe)
        running = True
        while running:
            self._echo(render_menu(title))
            try:
                choice = click.prompt("Enter your choice", type=int, err=self._err)
                running = self.dispatch(choice)
            except click.Abort:
                # End of input or Ctrl-C behaves like choosing Exit.
                self._echo("")
                running = False
        self._echo("Exiting...")
        log.debug("menu.exit", nodes=len(self._app.store.graph))


@click.command(cls=GraphCommand, examples=_MENU_EXAMPLES)
@click.pass_obj
def menu(app: AppContext) -> None:
    """Edit and traverse a weighted directed graph from a numbered menu."""
    MenuSession(app).run()
