"""Transcode command synthesis and execution via FFmpeg.

Module organization:
- types.py: Video path variants, TranscodeCommand, TranscodeResult, EncodeError
- command.py: FFmpeg command synthesis
- executor.py: TranscodeExecutor class

Usage:
    from tvcode.executor.transcode import build_transcode_command, TranscodeExecutor
"""

from .command import (
    build_audio_args,
    build_hardware_args,
    build_software_args,
    build_transcode_command,
    build_video_args,
    derive_output_path,
    escape_filter_path,
    plan_video_path,
)
from .executor import TranscodeExecutor
from .types import (
    BitmapOverlayBurn,
    EncodeError,
    NoBurn,
    TextFilterBurn,
    TranscodeCommand,
    TranscodeResult,
    VideoPath,
)

__all__ = [
    # Types
    "BitmapOverlayBurn",
    "EncodeError",
    "NoBurn",
    "TextFilterBurn",
    "TranscodeCommand",
    "TranscodeResult",
    "VideoPath",
    # Command building
    "build_audio_args",
    "build_hardware_args",
    "build_software_args",
    "build_transcode_command",
    "build_video_args",
    "derive_output_path",
    "escape_filter_path",
    "plan_video_path",
    # Executor
    "TranscodeExecutor",
]
