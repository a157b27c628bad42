"""Human-readable rendering of classified media profiles."""

from tvcode.domain import MediaProfile, SubtitleTrack


def format_profile_human(media: MediaProfile) -> list[str]:
    """Render the stream summary of a file as display lines.

    Args:
        media: Classified media profile.

    Returns:
        Lines without trailing newlines or indentation.
    """
    lines = [
        f"Video: {media.video_codec} ({media.width}x{media.height})",
        f"Audio: {media.audio_codec}",
        f"Container: {media.container or 'unknown'}",
    ]
    if media.subtitle_tracks:
        lines.append(f"Subtitles: {len(media.subtitle_tracks)} track(s) found")
    return lines


def format_track_choice(track: SubtitleTrack, position: int) -> str:
    """Render one entry of the subtitle selection menu.

    Args:
        track: Subtitle track.
        position: 1-based menu number.

    Returns:
        Line like "[1] eng (hdmv_pgs_subtitle, bitmap) - Full".
    """
    language = track.language or "unknown"
    title = f" - {track.title}" if track.title else ""
    return f"[{position}] {language} ({track.codec}, {track.kind_label}){title}"
