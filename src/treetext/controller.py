"""Glue between an input surface and the parse/render core.

The controller owns no widgets. Whatever hosts it (a terminal, a web page,
a test) passes in callables for reading the input and showing results, so
there is no module-level UI state.

Example:
    >>> shown = []
    >>> controller = TreeController(
    ...     read_input=lambda: "(A B)",
    ...     show_output=shown.append,
    ...     show_error=print,
    ... )
    >>> controller.handle_click()
    'A---+\\n    B'

"""

from __future__ import annotations

from collections.abc import Callable

from treetext.config import get_config
from treetext.errors import EmptyInputError, TreeTextError
from treetext.parser import parse_tree
from treetext.renderers import TextRenderer, TreeRenderer
from treetext.utils.logger import get_logger

logger = get_logger(__name__)

MSG_TOO_DEEP = "tree is nested too deeply"


def _noop() -> None:
    pass


class TreeController:
    """Reads tree notation, renders it, and reports errors through callbacks."""

    __slots__ = ("_read_input", "_show_output", "_show_error", "_hide_error", "_renderer")

    def __init__(
        self,
        read_input: Callable[[], str],
        show_output: Callable[[str], None],
        show_error: Callable[[str], None],
        hide_error: Callable[[], None] | None = None,
        renderer: TreeRenderer | None = None,
    ) -> None:
        """Initialize controller.

        Args:
            read_input: Returns the current input text
            show_output: Receives rendered text, or "" to clear the output
            show_error: Receives a labelled error message
            hide_error: Clears a previously shown error
            renderer: Renderer to use (TextRenderer if None)
        """
        self._read_input = read_input
        self._show_output = show_output
        self._show_error = show_error
        self._hide_error = hide_error or _noop
        self._renderer = renderer or TextRenderer()

    def render_from_input(self) -> str | None:
        """Parse and render the current input.

        Returns:
            The rendered text, or None if the input was rejected.
        """
        self._hide_error()
        try:
            source = self._read_input().strip()
            if not source:
                raise EmptyInputError()
            rendered = self._renderer.render(parse_tree(source))
        except TreeTextError as e:
            logger.debug("Rejected tree input: %s", e)
            self._fail(str(e))
            return None
        except RecursionError:
            logger.warning("Tree input exceeds the recursion limit")
            self._fail(MSG_TOO_DEEP)
            return None

        self._show_output(rendered)
        return rendered

    def handle_click(self) -> str | None:
        return self.render_from_input()

    def handle_key_press(self, key: str, ctrl: bool = False) -> str | None:
        """Render on Ctrl+Enter; ignore every other key."""
        if key == "Enter" and ctrl:
            return self.render_from_input()
        return None

    def _fail(self, message: str) -> None:
        self._show_error(f"{get_config().error_label}: {message}")
        self._show_output("")
