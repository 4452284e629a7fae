"""Plugin registration and enumeration."""

import re
from typing import Optional

import structlog

from .base import PluginDescriptor

logger = structlog.get_logger()

_INLINE_FLAGS = re.compile(r"^(?:\(\?[aiLmsux]+\))*")


def is_anchored(pattern: re.Pattern[str]) -> bool:
    """True if the pattern starts with '^' or '\\A', after any inline flag groups."""
    source = _INLINE_FLAGS.sub("", pattern.pattern, count=1)
    return source.startswith(("^", r"\A"))


class PluginRegistry:
    """Ordered registry of plugin descriptors.

    Registration order is match precedence: the dispatcher scans plugins
    first to last and the earliest match wins.
    """

    def __init__(self) -> None:
        self._plugins: list[PluginDescriptor] = []

    def register(self, plugin: PluginDescriptor) -> None:
        """Register a plugin."""
        if not is_anchored(plugin.exact_pattern):
            raise ValueError(
                f"Exact pattern for plugin '{plugin.name}' must be anchored with '^' or '\\A'"
            )
        if self.get(plugin.name) is not None:
            # Accepted; the earlier registration keeps precedence.
            logger.warning("Duplicate plugin name registered", name=plugin.name)
        self._plugins.append(plugin)
        logger.info("Plugin registered", name=plugin.name)

    def get(self, name: str) -> Optional[PluginDescriptor]:
        """Return the first plugin registered under ``name``."""
        for plugin in self._plugins:
            if plugin.name == name:
                return plugin
        return None

    def list_plugins(self) -> list[PluginDescriptor]:
        """List all registered plugins."""
        return list(self._plugins)

    def list_invocation_hints(self) -> list[str]:
        """Return each plugin's invocation hint in registration order."""
        return [plugin.invocation_hint for plugin in self._plugins]
