"""
Certificate utility functions.

Provides helper functions for subject/SAN extraction, must-staple detection,
self-signature checks and temporal information handling.

NOTA IMPORTANTE - Gestione Datetime con cryptography:
-----------------------------------------------------
not_valid_before / not_valid_after restituiscono datetime NAIVE.
Usa sempre get_certificate_not_before() e get_certificate_expiry_time()
per ottenere datetime UTC-aware.
"""

from datetime import datetime, timezone
from typing import List, Optional, Union

from cryptography import x509
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa
from cryptography.x509.oid import ExtensionOID, NameOID

CertOrCSR = Union[x509.Certificate, x509.CertificateSigningRequest]


def get_common_name(obj: CertOrCSR) -> Optional[str]:
    """
    Extracts the subject Common Name of a certificate or CSR.

    Returns:
        CN value, or None if the subject has no CN
    """
    attributes = obj.subject.get_attributes_for_oid(NameOID.COMMON_NAME)
    if not attributes:
        return None
    return attributes[0].value


def get_dns_names(obj: CertOrCSR) -> List[str]:
    """
    Extracts SAN DNS names in encoded order.

    Returns:
        List of DNS names (empty if no SAN extension)
    """
    try:
        san = obj.extensions.get_extension_for_class(x509.SubjectAlternativeName)
    except x509.ExtensionNotFound:
        return []
    return san.value.get_values_for_type(x509.DNSName)


def has_must_staple(obj: CertOrCSR) -> bool:
    """
    Checks for the TLS Feature extension requesting status_request (OCSP must-staple).
    """
    try:
        feature = obj.extensions.get_extension_for_oid(ExtensionOID.TLS_FEATURE)
    except x509.ExtensionNotFound:
        return False
    return x509.TLSFeatureType.status_request in feature.value


def is_self_signed(certificate: x509.Certificate) -> bool:
    """
    Checks that issuer equals subject and that the signature verifies
    against the certificate's own public key.
    """
    if certificate.issuer != certificate.subject:
        return False

    public_key = certificate.public_key()
    try:
        if isinstance(public_key, rsa.RSAPublicKey):
            public_key.verify(
                certificate.signature,
                certificate.tbs_certificate_bytes,
                padding.PKCS1v15(),
                certificate.signature_hash_algorithm,
            )
        elif isinstance(public_key, ec.EllipticCurvePublicKey):
            public_key.verify(
                certificate.signature,
                certificate.tbs_certificate_bytes,
                ec.ECDSA(certificate.signature_hash_algorithm),
            )
        else:
            return False
    except InvalidSignature:
        return False
    return True


def get_certificate_expiry_time(certificate: x509.Certificate) -> datetime:
    """
    Extracts certificate expiration timestamp (timezone-aware).

    Args:
        certificate: X.509 certificate

    Returns:
        Expiration datetime in UTC
    """
    # Use not_valid_after_utc (cryptography 42.0+) instead of deprecated not_valid_after
    return certificate.not_valid_after_utc


def get_certificate_not_before(certificate: x509.Certificate) -> datetime:
    """
    Extracts certificate validity start timestamp (timezone-aware).
    """
    return certificate.not_valid_before_utc


def is_certificate_expired(certificate: x509.Certificate, timestamp: Optional[datetime] = None) -> bool:
    """Checks if certificate is expired at timestamp (default: now)."""
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return get_certificate_expiry_time(certificate) < timestamp


def format_certificate_info(certificate: x509.Certificate) -> str:
    """
    Formats certificate information as human-readable string.

    Args:
        certificate: X.509 certificate

    Returns:
        Formatted string with certificate details
    """
    subject = certificate.subject.rfc4514_string()
    issuer = certificate.issuer.rfc4514_string()
    not_before = get_certificate_not_before(certificate)
    not_after = get_certificate_expiry_time(certificate)
    dns_names = get_dns_names(certificate)

    return (
        f"Subject: {subject}\n"
        f"Issuer: {issuer}\n"
        f"Serial: {certificate.serial_number:x}\n"
        f"SAN: {', '.join(dns_names) if dns_names else 'N/A'}\n"
        f"Validity: {not_before.strftime('%Y-%m-%d %H:%M:%S')} to "
        f"{not_after.strftime('%Y-%m-%d %H:%M:%S')}"
    )
