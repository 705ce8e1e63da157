"""
Self-signed certificate generator.

Builds the minimal, short-lived certificates used for transient TLS
validation (ACME tls-alpn-01): fixed placeholder subject, SAN with the
validated domain, caller-supplied marker extensions.

Standards Reference:
- RFC 5280 - Internet X.509 Public Key Infrastructure Certificate Profile
- RFC 8737 - ACME TLS Application-Layer Protocol Negotiation (ALPN) Challenge Extension
"""

import hashlib
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

from asn1crypto import core as asn1_core
from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from certcrypto.errors import RNGFailure, SigningError, UnsupportedKeyType
from certcrypto.pem import pem_encode
from certcrypto.types import DERCertificateBytes
from config.cert_config import CERT_CONSTANTS
from utils.logger import CertLogger

logger = CertLogger.get_logger(
    f"{CERT_CONSTANTS.LOGGER_NAME}.selfsigned", level=logging.NOTSET
)

# id-pe-acmeIdentifier (RFC 8737 Section 6.1)
ACME_IDENTIFIER_OID = x509.ObjectIdentifier("1.3.6.1.5.5.7.1.31")


def raw_extension(oid, value: bytes, critical: bool = False) -> x509.Extension:
    """
    Wrap an already DER-encoded extension value.

    Args:
        oid: ObjectIdentifier or dotted string
        value: DER bytes of the extnValue content
        critical: Criticality flag
    """
    if not isinstance(oid, x509.ObjectIdentifier):
        oid = x509.ObjectIdentifier(oid)
    return x509.Extension(oid, critical, x509.UnrecognizedExtension(oid, bytes(value)))


def acme_identifier_extension(key_authorization: str) -> x509.Extension:
    """Critical acmeIdentifier extension carrying SHA-256(key_authorization)"""
    digest = hashlib.sha256(key_authorization.encode("utf-8")).digest()
    return raw_extension(ACME_IDENTIFIER_OID, asn1_core.OctetString(digest).dump(), critical=True)


def _random_serial_number() -> int:
    # Uniforme in [1, 2^128): il serial deve essere positivo
    try:
        return secrets.randbelow((1 << CERT_CONSTANTS.SERIAL_NUMBER_BITS) - 1) + 1
    except OSError as e:
        raise RNGFailure(f"Random source failed while drawing serial number: {e}") from e


def generate_der_cert(
    private_key: rsa.RSAPrivateKey,
    domain: str,
    expiration: Optional[datetime] = None,
    extensions: Optional[Sequence[x509.Extension]] = None,
) -> bytes:
    """
    Build a self-signed certificate for domain.

    Args:
        private_key: RSA key, both embedded (public half) and used to sign
        domain: Sole SAN DNS name
        expiration: NotAfter (default: now + CERT_CONSTANTS.SELF_SIGNED_VALIDITY_DAYS)
        extensions: Extra extensions appended verbatim

    Returns:
        DER bytes of the certificate

    Raises:
        UnsupportedKeyType: If private_key is not an RSA key
        ValueError: If expiration is not after the current time, domain is not
            an ASCII (A-label) name, or an extra extension repeats one already
            set (KeyUsage, BasicConstraints, SubjectAlternativeName)
        RNGFailure: If the serial number cannot be drawn
        SigningError: If the signature cannot be produced
    """
    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise UnsupportedKeyType(
            f"Self-signed certificates require an RSA key, got {type(private_key).__name__}"
        )

    not_before = datetime.now(timezone.utc)
    if expiration is None:
        expiration = not_before + timedelta(days=CERT_CONSTANTS.SELF_SIGNED_VALIDITY_DAYS)
    elif expiration.tzinfo is None:
        expiration = expiration.replace(tzinfo=timezone.utc)

    if expiration <= not_before:
        raise ValueError(f"Expiration {expiration.isoformat()} is not in the future")

    subject = x509.Name([
        x509.NameAttribute(NameOID.COMMON_NAME, CERT_CONSTANTS.SELF_SIGNED_COMMON_NAME),
    ])

    builder = (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(subject)
        .public_key(private_key.public_key())
        .serial_number(_random_serial_number())
        .not_valid_before(not_before)
        .not_valid_after(expiration)
        .add_extension(
            x509.KeyUsage(
                digital_signature=False,
                content_commitment=False,
                key_encipherment=True,
                data_encipherment=False,
                key_agreement=False,
                key_cert_sign=False,
                crl_sign=False,
                encipher_only=False,
                decipher_only=False,
            ),
            critical=True,
        )
        .add_extension(
            x509.BasicConstraints(ca=False, path_length=None),
            critical=True,
        )
        .add_extension(
            x509.SubjectAlternativeName([x509.DNSName(domain)]),
            critical=False,
        )
    )

    for extension in extensions or ():
        builder = builder.add_extension(extension.value, critical=extension.critical)

    try:
        certificate = builder.sign(private_key, hashes.SHA256())
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise SigningError(f"Failed to sign self-signed certificate for {domain}: {e}") from e

    logger.debug(f"Generated self-signed certificate for {domain}, expires {expiration.isoformat()}")
    return certificate.public_bytes(serialization.Encoding.DER)


def generate_pem_cert(
    private_key: rsa.RSAPrivateKey,
    domain: str,
    extensions: Optional[Sequence[x509.Extension]] = None,
    expiration: Optional[datetime] = None,
) -> bytes:
    """PEM variant of generate_der_cert()"""
    der_bytes = generate_der_cert(private_key, domain, expiration=expiration, extensions=extensions)
    return pem_encode(DERCertificateBytes(der_bytes))
