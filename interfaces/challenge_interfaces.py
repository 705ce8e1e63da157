"""
Challenge Publisher Interfaces

Contract of the DNS-01 challenge publishers driven by an external ACME
order workflow. The certificate engine never calls these itself, the
interface exists for type hints and for provider implementations.

Design Pattern: ABC for the publisher, thread-safe registry for the
record identifiers a provider has to remember between present() and
clean_up().
"""

from abc import ABC, abstractmethod
from datetime import timedelta
from threading import Lock
from typing import Dict, Optional, Tuple

# Default del client ACME
DEFAULT_PROPAGATION_TIMEOUT = timedelta(seconds=60)
DEFAULT_POLLING_INTERVAL = timedelta(seconds=2)


class ChallengePublisher(ABC):
    """
    Abstract interface for challenge publishers (DNS-01 providers).

    Implementations receive the domain, the challenge token and the
    precomputed key authorization, and publish/remove the challenge record.
    """

    @abstractmethod
    def present(self, domain: str, token: str, key_auth: str) -> None:
        """
        Publish the challenge record for domain.

        Raises:
            Exception: Provider-specific error if the record cannot be created
        """
        pass

    @abstractmethod
    def clean_up(self, domain: str, token: str, key_auth: str) -> None:
        """Remove the challenge record created by present()"""
        pass

    def timeout(self) -> Tuple[timedelta, timedelta]:
        """
        Propagation timeout and polling interval for the external polling loop.

        Returns:
            Tuple of (propagation_timeout, polling_interval)
        """
        return DEFAULT_PROPAGATION_TIMEOUT, DEFAULT_POLLING_INTERVAL


class RecordRegistry:
    """
    Per-instance map fqdn -> remote record identifier.

    Thread-safe: every read-modify-write happens under a single lock, so a
    record id is either tracked or released exactly once.
    """

    def __init__(self):
        self._records: Dict[str, str] = {}
        self._lock = Lock()

    def track(self, fqdn: str, record_id: str) -> Optional[str]:
        """
        Track record_id for fqdn.

        Returns:
            Previously tracked id for fqdn (now replaced), or None
        """
        with self._lock:
            previous = self._records.get(fqdn)
            self._records[fqdn] = record_id
            return previous

    def get(self, fqdn: str) -> Optional[str]:
        with self._lock:
            return self._records.get(fqdn)

    def pop(self, fqdn: str) -> Optional[str]:
        """Stop tracking fqdn and return its record id (None if unknown)"""
        with self._lock:
            return self._records.pop(fqdn, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, fqdn: str) -> bool:
        with self._lock:
            return fqdn in self._records
