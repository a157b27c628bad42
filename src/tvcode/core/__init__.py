"""Shared low-level helpers for tvcode."""

from tvcode.core.subprocess_utils import run_command

__all__ = ["run_command"]
