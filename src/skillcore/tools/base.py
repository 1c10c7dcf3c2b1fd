"""
Tool abstraction used to expose the skill library to an agent.

A tool is one row of a capability table: a name, a description the
model reads, a JSON schema for its arguments, and an async handler.
skillcore never registers tools with a host itself. Hosts take the
definitions from ToolRegistry and route calls back through it.
"""

from __future__ import annotations

import abc as _abc
import dataclasses as _dataclasses
import typing as _typing


@_dataclasses.dataclass
class ToolResult:
    """
    Outcome of one tool call.

    On success ``output`` is the text handed back to the model. On failure
    ``error`` holds the message instead. ``messages`` are side notices a
    host may post to the session, such as "Loading skill: tdd".
    """

    success: bool
    output: str
    error: str | None = None
    messages: list[str] = _dataclasses.field(default_factory=list)

    @classmethod
    def failure(cls, error: str) -> ToolResult:
        return cls(success=False, output="", error=error)

    def to_dict(self) -> dict[str, _typing.Any]:
        return _dataclasses.asdict(self)


class Tool(_abc.ABC):
    """
    One entry in the capability table.

    Concrete tools provide ``name``, ``description``, ``input_schema`` and
    ``execute``. The definition helpers below turn those into the shapes
    the Anthropic and OpenAI tool-calling APIs expect.
    """

    @property
    @_abc.abstractmethod
    def name(self) -> str:
        """Identifier the model calls the tool by, e.g. 'use_skill'."""

    @property
    @_abc.abstractmethod
    def description(self) -> str:
        """Text shown to the model when it chooses tools."""

    @property
    @_abc.abstractmethod
    def input_schema(self) -> dict[str, _typing.Any]:
        """JSON schema (type: object) for the call arguments."""

    @_abc.abstractmethod
    async def execute(self, input: dict[str, _typing.Any]) -> ToolResult:
        """Run the tool for one call. Failures are reported in the result."""

    @property
    def read_only(self) -> bool:
        """True when the tool never changes anything on disk."""
        return False

    def to_api_format(self) -> dict[str, _typing.Any]:
        """Anthropic tool definition."""
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
        }

    def to_openai_format(self) -> dict[str, _typing.Any]:
        """OpenAI function-calling definition."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.input_schema,
            },
        }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"

    def _text_input(
        self,
        input: dict[str, _typing.Any],
        key: str,
        *,
        label: str | None = None,
    ) -> str | ToolResult:
        """
        Fetch a required string argument.

        Returns the stripped value, or a failed ToolResult naming the
        argument when it is missing, blank or not a string.
        """
        value = input.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
        return ToolResult.failure(f"No {label or key} provided")
