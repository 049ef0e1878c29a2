"""Integrations subpackage for node-arena.

Contains the pytest plugin, auto-discovered through the pytest11 entry point
declared in pyproject.toml.
"""

from __future__ import annotations

__all__: list[str] = []
