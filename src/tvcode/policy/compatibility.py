"""Compatibility evaluation against the delivery profile.

The evaluator is pure: it only looks at the classified MediaProfile. The
caller ORs its result with the presence of a burn request, since burning
requires re-encoding the video plane even when the codecs already match.
"""

import logging
from dataclasses import dataclass

from tvcode.domain import MediaProfile

from .profile import DEFAULT_PROFILE, DeliveryProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompatibilityReport:
    """Per-criterion compliance of one file."""

    video_ok: bool
    audio_ok: bool
    container_ok: bool

    @property
    def compliant(self) -> bool:
        return self.video_ok and self.audio_ok and self.container_ok

    @property
    def needs_transcode(self) -> bool:
        return not self.compliant


def evaluate_compatibility(
    media: MediaProfile,
    profile: DeliveryProfile = DEFAULT_PROFILE,
) -> CompatibilityReport:
    """Check a file's codecs and container against the delivery targets.

    The container string from ffprobe may list several aliases
    (e.g. "mov,mp4,m4a,3gp,3g2,mj2"), so the container matches when any
    target alias occurs in it. The "unknown" codec sentinel never matches.

    Args:
        media: Classified media profile.
        profile: Delivery profile with the targets.

    Returns:
        CompatibilityReport with one flag per criterion.
    """
    container = media.container.casefold()
    report = CompatibilityReport(
        video_ok=media.video_codec == profile.video_codec,
        audio_ok=media.audio_codec == profile.audio_codec,
        container_ok=any(alias in container for alias in profile.container_aliases),
    )
    if report.needs_transcode:
        logger.debug(
            "Not compliant: video=%s (%s) audio=%s (%s) container=%s (%s)",
            media.video_codec,
            report.video_ok,
            media.audio_codec,
            report.audio_ok,
            media.container,
            report.container_ok,
        )
    return report


def needs_transcode(
    media: MediaProfile,
    profile: DeliveryProfile = DEFAULT_PROFILE,
) -> bool:
    """Return True unless video, audio and container all match the targets."""
    return evaluate_compatibility(media, profile).needs_transcode
