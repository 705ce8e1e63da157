"""
Certificate expiration introspection.

Works on a single certificate; split bundles with parse_pem_bundle() first.
All timestamps are timezone-aware UTC.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from cryptography import x509

from certcrypto.errors import MalformedCertificate
from certcrypto.pem import pem_decode
from config.cert_config import CERT_CONSTANTS


def get_der_cert_expiration(der_bytes: bytes) -> datetime:
    """
    Return the NotAfter date of a DER encoded certificate.

    Raises:
        MalformedCertificate: If der_bytes is not a certificate
    """
    try:
        certificate = x509.load_der_x509_certificate(bytes(der_bytes))
    except ValueError as e:
        raise MalformedCertificate(f"Could not parse certificate: {e}") from e

    return certificate.not_valid_after_utc


def get_pem_cert_expiration(pem_bytes: Union[bytes, str]) -> datetime:
    """
    Return the NotAfter date of a PEM encoded certificate.

    Only the first PEM block is read. DER input must go through
    get_der_cert_expiration() instead.

    Raises:
        InvalidPEM: If no PEM block is found
        MalformedCertificate: If the block is not a certificate
    """
    block = pem_decode(pem_bytes)
    return get_der_cert_expiration(block.data)


def needs_renewal(
    pem_bytes: Union[bytes, str],
    days: Optional[int] = None,
    now: Optional[datetime] = None,
) -> bool:
    """
    Check whether a certificate expires within the renewal window.

    Args:
        pem_bytes: PEM certificate (first block is used)
        days: Renewal window (default: CERT_CONSTANTS.RENEWAL_WINDOW_DAYS)
        now: Reference time (default: current UTC time)

    Returns:
        True if NotAfter falls before now + days
    """
    if days is None:
        days = CERT_CONSTANTS.RENEWAL_WINDOW_DAYS
    if now is None:
        now = datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    return get_pem_cert_expiration(pem_bytes) < now + timedelta(days=days)
