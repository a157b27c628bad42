"""Resolution-based video bitrate tiers."""

from collections.abc import Sequence

from tvcode.domain import BitrateTier

from .profile import DEFAULT_PROFILE, DeliveryProfile


def select_bitrate_tier(
    width: int,
    height: int,
    profile: DeliveryProfile = DEFAULT_PROFILE,
) -> BitrateTier:
    """Pick the bitrate tier for a frame size.

    Tiers are checked from the highest resolution down and are closed at
    their lower edge: exactly 1920x1080 pixels selects the 1080p tier.
    A file without a detected video stream (0x0) gets the floor tier.

    Args:
        width: Frame width in pixels.
        height: Frame height in pixels.
        profile: Delivery profile holding the tier table.

    Returns:
        The first tier whose threshold the pixel count reaches.
    """
    return match_tier(width * height, profile.tiers(), profile.floor_tier.to_tier())


def match_tier(
    pixels: int,
    tiers: Sequence[tuple[int, BitrateTier]],
    floor: BitrateTier,
) -> BitrateTier:
    """Return the first tier with ``pixels >= min_pixels``, else ``floor``."""
    for min_pixels, tier in tiers:
        if pixels >= min_pixels:
            return tier
    return floor
