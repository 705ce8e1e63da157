"""
Interfaces Package

Contratti dei collaboratori esterni (challenge publisher DNS-01).
"""

from .challenge_interfaces import (
    DEFAULT_POLLING_INTERVAL,
    DEFAULT_PROPAGATION_TIMEOUT,
    ChallengePublisher,
    RecordRegistry,
)

__all__ = [
    "ChallengePublisher",
    "RecordRegistry",
    "DEFAULT_PROPAGATION_TIMEOUT",
    "DEFAULT_POLLING_INTERVAL",
]
