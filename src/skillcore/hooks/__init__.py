"""
Host lifecycle hooks.

The host reports lifecycle events; skillcore answers with the text it
wants injected. skillcore never calls into the host itself.
"""

from skillcore.hooks.events import HookEvent, SessionInjection, get_session_id

__all__ = ["HookEvent", "SessionInjection", "get_session_id"]
