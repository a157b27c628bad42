"""External tool discovery and capability probing."""

from tvcode.tools.detection import (
    REQUIRED_TOOLS,
    build_availability_table,
    check_tool_availability,
    find_tool,
    list_encoders,
    parse_encoder_list,
)

__all__ = [
    "REQUIRED_TOOLS",
    "build_availability_table",
    "check_tool_availability",
    "find_tool",
    "list_encoders",
    "parse_encoder_list",
]
