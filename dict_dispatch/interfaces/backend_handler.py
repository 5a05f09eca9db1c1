"""Protocol for dictionary backend handlers."""

from typing import Protocol, runtime_checkable

from dict_dispatch.models import Query


@runtime_checkable
class BackendHandler(Protocol):
    """Interface for one external dictionary or translation program.

    A handler turns a Query into exactly one external call: a spawned
    process, an OS script, an HTTP request or a URL open.
    """

    @property
    def name(self) -> str:
        """Human-readable name of the program (e.g. 'GoldenDict')."""
        ...

    def handle(self, query: Query) -> None:
        """Send the query to the external program.

        Args:
            query: Text to look up

        Raises:
            ExternalInvocationFailed: If the program reports failure
        """
        ...


@runtime_checkable
class WindowRaiser(Protocol):
    """Optional capability: bring the program's main window to the front."""

    def raise_main_window(self) -> None:
        """Show the main window without looking anything up."""
        ...
