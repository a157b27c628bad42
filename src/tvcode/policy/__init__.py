"""Transcode policy: compliance, subtitle selection, acceleration, bitrate.

Module organization:
- profile.py: DeliveryProfile (targets and policy tables)
- loader.py: YAML profile loading
- compatibility.py: Compatibility evaluator
- subtitles.py: Subtitle selector
- acceleration.py: Acceleration resolver
- bitrate.py: Bitrate policy
"""

from .acceleration import (
    EncoderAvailability,
    StrategyRule,
    build_strategy_rules,
    resolve_strategy,
)
from .bitrate import match_tier, select_bitrate_tier
from .compatibility import (
    CompatibilityReport,
    evaluate_compatibility,
    needs_transcode,
)
from .exceptions import InvalidSelectionError, ProfileValidationError
from .loader import load_profile, load_profile_from_dict
from .profile import DEFAULT_PROFILE, BitrateModel, BitrateTierModel, DeliveryProfile
from .subtitles import parse_selection, select_subtitle

__all__ = [
    # Profile
    "DEFAULT_PROFILE",
    "BitrateModel",
    "BitrateTierModel",
    "DeliveryProfile",
    "load_profile",
    "load_profile_from_dict",
    # Compatibility
    "CompatibilityReport",
    "evaluate_compatibility",
    "needs_transcode",
    # Subtitles
    "parse_selection",
    "select_subtitle",
    # Acceleration
    "EncoderAvailability",
    "StrategyRule",
    "build_strategy_rules",
    "resolve_strategy",
    # Bitrate
    "match_tier",
    "select_bitrate_tier",
    # Exceptions
    "InvalidSelectionError",
    "ProfileValidationError",
]
