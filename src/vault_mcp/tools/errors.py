"""Shared error types for the tool layer.

A :class:`ToolError` is a *domain* failure: the dispatcher reports it inside
a successful ``tools/call`` result with ``isError: true`` instead of a
JSON-RPC error object.
"""


class ToolError(Exception):
    """Base error for all tool-level failures."""


class ToolNotFoundError(ToolError):
    """Requested tool does not exist in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name}")


class ToolArgumentsError(ToolError):
    """The arguments supplied to a tool failed validation."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Invalid arguments for {name}" + (f": {detail}" if detail else ""))


class DuplicateToolError(Exception):
    """A tool with the same name is already registered.

    Raised by ``register()`` at startup.  Not a :class:`ToolError`: it never
    reaches a client.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool '{name}' is already registered")
