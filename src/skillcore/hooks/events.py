"""
Host lifecycle events and the injections they produce.

These define the data structures exchanged with the host:
- HookEvent: Lifecycle events that trigger a bootstrap injection
- SessionInjection: Text the host should deliver into a session
"""

from __future__ import annotations

import collections.abc as _collections_abc
import dataclasses as _dataclasses
import enum as _enum
import typing as _typing


class HookEvent(_enum.Enum):
    """Lifecycle events that cause skill guidance to be injected."""

    SESSION_CREATED = "session.created"
    """New session begins, before the first user message."""

    SESSION_COMPACTED = "session.compacted"
    """Context was compacted; guidance must be restored."""

    @property
    def compact(self) -> bool:
        """Whether the injection for this event uses the short form."""
        return self is HookEvent.SESSION_COMPACTED

    @classmethod
    def from_type(cls, event_type: object) -> HookEvent | None:
        """Map a host event type string to a HookEvent, if handled."""
        try:
            return cls(event_type)
        except ValueError:
            return None


def _lookup(data: _typing.Any, *keys: str) -> _typing.Any:
    """Walk nested mappings, returning None at the first missing key."""
    for key in keys:
        if not isinstance(data, _collections_abc.Mapping):
            return None
        data = data.get(key)
    return data


def get_session_id(event: _typing.Mapping[str, _typing.Any]) -> str | None:
    """
    Extract the session id from a host event.

    Hosts put the id in different places depending on the event; the
    first of properties.info.id, properties.sessionID and session.id
    that is set wins.

    Args:
        event: Host event mapping.

    Returns:
        Session id, or None if the event carries none.
    """
    for keys in (
        ("properties", "info", "id"),
        ("properties", "sessionID"),
        ("session", "id"),
    ):
        value = _lookup(event, *keys)
        if value:
            return str(value)
    return None


@_dataclasses.dataclass(frozen=True)
class SessionInjection:
    """
    Text to deliver into a session.

    The host posts ``text`` as a synthetic, no-reply message.

    Attributes:
        session_id: Target session
        text: Payload to inject
        compact: Whether the short post-compaction form was used
    """

    session_id: str
    text: str
    compact: bool = False

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to JSON-serializable dict."""
        return {
            "session_id": self.session_id,
            "text": self.text,
            "compact": self.compact,
        }
