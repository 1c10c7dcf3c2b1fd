"""
Host-facing entry point.

SkillsPlugin bundles what a host needs from skillcore:
- tools: the use_skill and find_skills capability table
- on_session_start / on_context_compacted: bootstrap text to inject
- handle_event: the same, driven by a raw host event
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import skillcore.constants as constants
import skillcore.hooks.events as events
import skillcore.plugin.bootstrap as bootstrap
import skillcore.skills.registry as registry
import skillcore.tools.registry as tools_registry

if _typing.TYPE_CHECKING:
    import skillcore.config as config
    import skillcore.skills.roots as roots_module

_logger = _logging.getLogger(__name__)


class SkillsPlugin:
    """
    Skill library integration for an agent host.

    Holds no session state: each call derives its answer from the
    configured roots and the files currently on disk.
    """

    def __init__(
        self,
        roots: roots_module.SkillRoots,
        *,
        max_depth: int = constants.DEFAULT_MAX_DEPTH,
    ) -> None:
        """
        Initialize the plugin.

        Args:
            roots: Project, personal and superpowers skill roots.
            max_depth: Deepest directory level searched by find_skills.
        """
        self._resolver = registry.SkillResolver(roots, max_depth=max_depth)
        self._tools = tools_registry.create_skill_tools(self._resolver)

    @classmethod
    def from_settings(cls, settings: config.Settings) -> SkillsPlugin:
        """Create a plugin from resolved settings."""
        return cls(settings.skill_roots(), max_depth=settings.max_depth)

    @property
    def resolver(self) -> registry.SkillResolver:
        return self._resolver

    @property
    def tools(self) -> tools_registry.ToolRegistry:
        """Tools for the host to register."""
        return self._tools

    def bootstrap_text(self, *, compact: bool = False) -> str | None:
        """Bootstrap text, or None if the bootstrap skill is missing."""
        return bootstrap.render_bootstrap(self._resolver.roots, compact=compact)

    def on_session_start(self, session_id: str) -> str | None:
        """
        Text to inject when a session is created.

        Args:
            session_id: The new session.

        Returns:
            Full bootstrap text, or None if there is nothing to inject.
        """
        _logger.debug("Session %s started", session_id)
        return self.bootstrap_text(compact=False)

    def on_context_compacted(self, session_id: str) -> str | None:
        """
        Text to re-inject after a session's context was compacted.

        Args:
            session_id: The compacted session.

        Returns:
            Compact bootstrap text, or None if there is nothing to inject.
        """
        _logger.debug("Session %s compacted", session_id)
        return self.bootstrap_text(compact=True)

    def handle_event(
        self,
        event: _typing.Mapping[str, _typing.Any],
    ) -> events.SessionInjection | None:
        """
        React to a raw host event.

        Args:
            event: Host event with a "type" and a session id somewhere in
                its payload.

        Returns:
            The injection to deliver, or None for unhandled events, events
            without a session id, or when no bootstrap skill is installed.
        """
        hook_event = events.HookEvent.from_type(event.get("type"))
        if hook_event is None:
            return None

        session_id = events.get_session_id(event)
        if session_id is None:
            _logger.debug("Ignoring %s event without a session id", hook_event.value)
            return None

        if hook_event.compact:
            text = self.on_context_compacted(session_id)
        else:
            text = self.on_session_start(session_id)
        if text is None:
            return None

        return events.SessionInjection(
            session_id=session_id,
            text=text,
            compact=hook_event.compact,
        )
