"""Protocol for static asset serving."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pyview import PyView


class StaticFileServerProtocol(Protocol):
    """Protocol for serving CSS, hook scripts and line icons."""

    def register_routes(self, app: "PyView") -> None:
        """Mount the static asset routes on the PyView app.

        Args:
            app: The PyView application instance.
        """
        ...
