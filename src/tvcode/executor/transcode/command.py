"""FFmpeg command synthesis for delivery transcodes.

This module composes the classified media profile, the optional burn
request, the resolved encoding strategy and the bitrate tier into an
ordered ffmpeg argument list plus the derived output path.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from tvcode.domain import (
    BitrateTier,
    BurnRequest,
    EncodingStrategy,
    HardwareKind,
    HardwareStrategy,
    MediaProfile,
    SoftwareStrategy,
)
from tvcode.policy.profile import DEFAULT_PROFILE, DeliveryProfile

from .types import (
    BitmapOverlayBurn,
    NoBurn,
    TextFilterBurn,
    TranscodeCommand,
    VideoPath,
)

logger = logging.getLogger(__name__)

# Fixed H.264 profile/level for hardware encoders (Apple TV compatible)
H264_PROFILE = "high"
H264_LEVEL = "4.1"


def derive_output_path(
    input_path: Path,
    burned: bool,
    profile: DeliveryProfile = DEFAULT_PROFILE,
) -> Path:
    """Derive the output path next to the input file.

    Args:
        input_path: Source file path.
        burned: Whether subtitles are burned into the output.
        profile: Delivery profile with suffixes and extension.

    Returns:
        e.g. ``movie.mkv`` -> ``movie_appletv.mp4`` or ``movie_appletv_subs.mp4``.
    """
    suffix = profile.output_suffix
    if burned:
        suffix += profile.burn_suffix
    return input_path.parent / f"{input_path.stem}{suffix}.{profile.extension}"


def escape_filter_path(path: str) -> str:
    """Escape a file path for use inside a quoted filtergraph argument.

    Backslashes and colons are escaped for the filter option parser, and
    single quotes close, escape and reopen the quoted string.
    """
    return path.replace("\\", "\\\\").replace(":", "\\:").replace("'", "'\\''")


def plan_video_path(
    burn: BurnRequest | None,
    strategy: EncodingStrategy,
) -> VideoPath:
    """Dispatch the burn request once into one of the three video paths.

    A burn discards the strategy: both burn paths are software-only, so
    a hardware strategy combined with a burn cannot be expressed.
    """
    if burn is None:
        return NoBurn(strategy=strategy)
    if isinstance(strategy, HardwareStrategy):
        logger.debug(
            "Ignoring %s strategy: subtitle burn requires software encoding",
            strategy.label,
        )
    if burn.track.is_bitmap:
        return BitmapOverlayBurn(track=burn.track)
    return TextFilterBurn(track=burn.track)


def build_probe_args(profile: DeliveryProfile = DEFAULT_PROFILE) -> list[str]:
    """Input probing hints matching the analyzer's, so stream indices agree."""
    return [
        "-analyzeduration",
        str(profile.probe_analyze_duration),
        "-probesize",
        str(profile.probe_size),
    ]


def build_software_args(profile: DeliveryProfile = DEFAULT_PROFILE) -> list[str]:
    """Software encoder arguments (CRF mode, bitrate tier not used)."""
    sw = profile.software
    return [
        "-c:v",
        sw.encoder,
        "-preset",
        sw.preset,
        "-crf",
        str(sw.crf),
        "-profile:v",
        sw.profile,
        "-level",
        sw.level,
    ]


def _videotoolbox_args(tier: BitrateTier, profile: DeliveryProfile) -> list[str]:
    return [
        "-c:v",
        HardwareKind.VIDEOTOOLBOX.encoder_name,
        "-b:v",
        tier.target,
        "-profile:v",
        H264_PROFILE,
        "-level",
        H264_LEVEL,
        "-allow_sw",
        "1",
    ]


def _nvenc_args(tier: BitrateTier, profile: DeliveryProfile) -> list[str]:
    return [
        "-c:v",
        HardwareKind.NVENC.encoder_name,
        "-preset",
        "p7",
        "-b:v",
        tier.target,
        "-maxrate",
        tier.max,
        "-profile:v",
        H264_PROFILE,
        "-level",
        H264_LEVEL,
    ]


def _qsv_args(tier: BitrateTier, profile: DeliveryProfile) -> list[str]:
    return [
        "-c:v",
        HardwareKind.QSV.encoder_name,
        "-preset",
        "veryslow",
        "-b:v",
        tier.target,
        "-profile:v",
        H264_PROFILE,
        "-level",
        H264_LEVEL,
    ]


def _vaapi_args(tier: BitrateTier, profile: DeliveryProfile) -> list[str]:
    # h264_vaapi only accepts VA surfaces; upload the decoded frames.
    return [
        "-vaapi_device",
        profile.vaapi_device,
        "-vf",
        "format=nv12,hwupload",
        "-c:v",
        HardwareKind.VAAPI.encoder_name,
        "-b:v",
        tier.target,
        "-profile:v",
        H264_PROFILE,
    ]


HARDWARE_ARG_BUILDERS: dict[
    HardwareKind, Callable[[BitrateTier, DeliveryProfile], list[str]]
] = {
    HardwareKind.VIDEOTOOLBOX: _videotoolbox_args,
    HardwareKind.NVENC: _nvenc_args,
    HardwareKind.QSV: _qsv_args,
    HardwareKind.VAAPI: _vaapi_args,
}


def build_hardware_args(
    kind: HardwareKind,
    tier: BitrateTier,
    profile: DeliveryProfile = DEFAULT_PROFILE,
) -> list[str]:
    """Hardware encoder arguments for a kind at a bitrate tier."""
    return HARDWARE_ARG_BUILDERS[kind](tier, profile)


def build_video_args(
    video_path: VideoPath,
    media: MediaProfile,
    tier: BitrateTier,
    profile: DeliveryProfile = DEFAULT_PROFILE,
) -> tuple[list[str], str]:
    """Build the video block and its human-facing label.

    Args:
        video_path: Dispatched video path.
        media: Classified media profile (for the input path).
        tier: Bitrate tier for hardware paths.
        profile: Delivery profile.

    Returns:
        Tuple of (arguments, label).
    """
    if isinstance(video_path, BitmapOverlayBurn):
        index = video_path.track.subtitle_index
        args = ["-filter_complex", f"[0:v][0:s:{index}]overlay"]
        args.extend(build_software_args(profile))
        return args, "burning bitmap subtitles using overlay filter"

    if isinstance(video_path, TextFilterBurn):
        index = video_path.track.subtitle_index
        escaped = escape_filter_path(str(media.path))
        args = ["-vf", f"subtitles='{escaped}':si={index}"]
        args.extend(build_software_args(profile))
        return args, "burning text subtitles using subtitles filter"

    strategy = video_path.strategy
    if isinstance(strategy, SoftwareStrategy):
        return build_software_args(profile), "software encoding (H.264)"
    return (
        build_hardware_args(strategy.kind, tier, profile),
        f"hardware acceleration: {strategy.kind.value} (H.264)",
    )


def build_audio_args(
    media: MediaProfile,
    profile: DeliveryProfile = DEFAULT_PROFILE,
) -> tuple[list[str], str]:
    """Copy target-codec audio, otherwise re-encode with a stereo downmix.

    Returns:
        Tuple of (arguments, label).
    """
    target = profile.audio_codec
    if media.audio_codec == target:
        return ["-c:a", "copy"], f"copying {target.upper()} audio"
    return (
        [
            "-c:a",
            target,
            "-b:a",
            profile.audio_bitrate,
            "-ac",
            str(profile.audio_channels),
        ],
        f"converting audio to {target.upper()}",
    )


def build_output_args(
    output_path: Path,
    profile: DeliveryProfile = DEFAULT_PROFILE,
) -> list[str]:
    """Container, fast-start and overwrite settings, ending with the output."""
    return [
        "-movflags",
        "+faststart",
        "-f",
        profile.output_format,
        "-y",
        str(output_path),
    ]


def build_transcode_command(
    media: MediaProfile,
    burn: BurnRequest | None,
    strategy: EncodingStrategy,
    tier: BitrateTier,
    profile: DeliveryProfile = DEFAULT_PROFILE,
) -> TranscodeCommand:
    """Synthesize the full ffmpeg invocation for one file.

    Order: probe hints, input, video block, audio block, ``-sn``, output
    settings. Subtitle streams are never carried into the output: burned
    tracks are already in the picture and the MP4 target cannot hold the
    bitmap/ASS formats typical sources use.

    Args:
        media: Classified media profile.
        burn: Burn request, if any.
        strategy: Resolved encoding strategy (ignored when burning).
        tier: Bitrate tier for the frame size.
        profile: Delivery profile.

    Returns:
        TranscodeCommand with arguments, output path and labels.
    """
    video_path = plan_video_path(burn, strategy)
    output_path = derive_output_path(media.path, burn is not None, profile)

    args: list[str] = build_probe_args(profile)
    args.extend(["-i", str(media.path)])

    video_args, video_label = build_video_args(video_path, media, tier, profile)
    args.extend(video_args)

    audio_args, audio_label = build_audio_args(media, profile)
    args.extend(audio_args)

    args.append("-sn")
    args.extend(build_output_args(output_path, profile))

    logger.debug("Synthesized ffmpeg arguments: %s", " ".join(args))

    return TranscodeCommand(
        input_path=media.path,
        output_path=output_path,
        args=tuple(args),
        video_label=video_label,
        audio_label=audio_label,
        video_path=video_path,
    )
