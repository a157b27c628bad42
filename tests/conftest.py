"""Shared test fixtures for tvcode."""

from pathlib import Path
from typing import Any

import pytest

from tvcode.domain import MediaProfile, SubtitleTrack


def make_stream(codec_type: str, codec_name: str | None, **extra: Any) -> dict:
    """Build one ffprobe stream dict."""
    stream: dict[str, Any] = {"codec_type": codec_type}
    if codec_name is not None:
        stream["codec_name"] = codec_name
    stream.update(extra)
    return stream


def make_ffprobe_output(
    streams: list[dict],
    format_name: str = "matroska,webm",
) -> dict:
    """Build an ffprobe JSON report with the given streams."""
    return {
        "streams": streams,
        "format": {"format_name": format_name, "duration": "5400.0"},
    }


@pytest.fixture
def stream():
    """Factory for ffprobe stream dicts."""
    return make_stream


@pytest.fixture
def ffprobe_report():
    """Factory for ffprobe JSON reports."""
    return make_ffprobe_output


@pytest.fixture
def hevc_mkv_output() -> dict:
    """ffprobe report for a 1080p HEVC/AC3 Matroska file with two subtitles."""
    return make_ffprobe_output(
        [
            make_stream("video", "hevc", width=1920, height=1080),
            make_stream("audio", "ac3", channels=6),
            make_stream(
                "subtitle",
                "subrip",
                tags={"language": "eng", "title": "English"},
            ),
            make_stream(
                "subtitle",
                "hdmv_pgs_subtitle",
                tags={"language": "eng", "title": "Full"},
            ),
        ]
    )


@pytest.fixture
def compliant_mp4_output() -> dict:
    """ffprobe report for an already compliant H.264/AAC MP4 file."""
    return make_ffprobe_output(
        [
            make_stream("video", "h264", width=1280, height=720),
            make_stream("audio", "aac", channels=2),
        ],
        format_name="mov,mp4,m4a,3gp,3g2,mj2",
    )


@pytest.fixture
def text_track() -> SubtitleTrack:
    """An SRT subtitle track at subtitle position 0."""
    return SubtitleTrack(subtitle_index=0, codec="subrip", language="eng")


@pytest.fixture
def bitmap_track() -> SubtitleTrack:
    """A PGS subtitle track at subtitle position 1."""
    return SubtitleTrack(
        subtitle_index=1,
        codec="hdmv_pgs_subtitle",
        language="eng",
        title="Full",
        is_bitmap=True,
    )


@pytest.fixture
def hevc_media(text_track: SubtitleTrack, bitmap_track: SubtitleTrack) -> MediaProfile:
    """Classified 1080p HEVC/AC3 Matroska file with two subtitle tracks."""
    return MediaProfile(
        path=Path("/videos/Movie.mkv"),
        video_codec="hevc",
        audio_codec="ac3",
        container="matroska,webm",
        width=1920,
        height=1080,
        subtitle_tracks=(text_track, bitmap_track),
    )


@pytest.fixture
def compliant_media() -> MediaProfile:
    """Classified file that already meets the delivery profile."""
    return MediaProfile(
        path=Path("/videos/Show.mp4"),
        video_codec="h264",
        audio_codec="aac",
        container="mov,mp4,m4a,3gp,3g2,mj2",
        width=1280,
        height=720,
    )
