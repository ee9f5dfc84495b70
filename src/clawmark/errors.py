"""Exception classes for clawmark.

Parsing and inline formatting are total and never raise. These exceptions
cover the layers around them.
"""

from __future__ import annotations


class ClawmarkError(Exception):
    """Base exception for all clawmark errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(ClawmarkError):
    """Error during rendering.

    Raised when a renderer is handed a node type it does not know how
    to render.
    """

    def __init__(self, node: object, renderer: str | None = None) -> None:
        """Initialize render error.

        Args:
            node: The node that could not be rendered
            renderer: Name of the renderer (optional)
        """
        self.node = node
        self.renderer = renderer

        prefix = f"{renderer}: " if renderer else ""
        location = getattr(node, "location", None)
        where = f" (line {location})" if location is not None else ""
        super().__init__(f"{prefix}cannot render {type(node).__name__}{where}")
