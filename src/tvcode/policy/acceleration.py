"""Encoding strategy resolution (hardware vs software).

The resolver is a pure function of the host platform, the presence of a
burn request and an already-populated encoder availability table. The
decision is an ordered list of (predicate, strategy) rules evaluated
top-to-bottom, so a new hardware kind or platform is a new rule rather
than another nested branch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from tvcode.domain import (
    SOFTWARE,
    BurnRequest,
    EncodingStrategy,
    HardwareKind,
    HardwareStrategy,
    HostPlatform,
)

from .profile import DEFAULT_PROFILE, DeliveryProfile

logger = logging.getLogger(__name__)

# Platforms whose hardware encoder ships with the OS; no capability probe.
UNPROBED_PLATFORMS = frozenset({HostPlatform.MACOS})

EncoderAvailability = Mapping[str, bool]
"""Encoder name -> usable, computed once per run."""

Predicate = Callable[[EncoderAvailability], bool]


@dataclass(frozen=True)
class StrategyRule:
    """One step of the priority chain."""

    predicate: Predicate
    strategy: EncodingStrategy
    description: str


def _always(_: EncoderAvailability) -> bool:
    return True


def _encoder_listed(kind: HardwareKind) -> Predicate:
    def predicate(available: EncoderAvailability) -> bool:
        return available.get(kind.encoder_name, False)

    return predicate


def build_strategy_rules(
    host: HostPlatform,
    burn_requested: bool,
    profile: DeliveryProfile = DEFAULT_PROFILE,
) -> list[StrategyRule]:
    """Build the ordered rule chain for a host.

    Args:
        host: Host platform.
        burn_requested: Whether a subtitle burn was requested.
        profile: Delivery profile with the hardware priority table.

    Returns:
        Rules in evaluation order; the last rule always matches.
    """
    rules: list[StrategyRule] = []

    # A burn needs a CPU-side filter graph, which only the software path has.
    if burn_requested:
        rules.append(StrategyRule(_always, SOFTWARE, "subtitle burn"))

    for kind in profile.candidates_for(host):
        predicate = _always if host in UNPROBED_PLATFORMS else _encoder_listed(kind)
        rules.append(
            StrategyRule(predicate, HardwareStrategy(kind), kind.encoder_name)
        )

    rules.append(StrategyRule(_always, SOFTWARE, "fallback"))
    return rules


def resolve_strategy(
    host: HostPlatform,
    burn: BurnRequest | None,
    available: EncoderAvailability,
    profile: DeliveryProfile = DEFAULT_PROFILE,
) -> EncodingStrategy:
    """Choose the encoding strategy for one file.

    Args:
        host: Host platform.
        burn: Burn request, if any. Its presence always yields software.
        available: Memoized encoder availability table.
        profile: Delivery profile with the hardware priority table.

    Returns:
        The strategy of the first matching rule.
    """
    for rule in build_strategy_rules(host, burn is not None, profile):
        if rule.predicate(available):
            logger.debug(
                "Strategy %s selected on %s (%s)",
                rule.strategy.label,
                host.value,
                rule.description,
            )
            return rule.strategy
    # The fallback rule always matches; kept for type checkers.
    return SOFTWARE
