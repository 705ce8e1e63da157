"""
Certificate Signing Request Builder

Builds and signs PKCS#10 requests for ACME orders, optionally carrying the
SAN DNS names and the OCSP must-staple TLS Feature extension.

Standards Reference:
- RFC 2986 - PKCS #10: Certification Request Syntax
- RFC 7633 - X.509v3 Transport Layer Security (TLS) Feature Extension
"""

import logging
from typing import Optional, Sequence

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.x509.oid import NameOID

from certcrypto.errors import SigningError
from certcrypto.keys import PrivateKey, key_type_of
from certcrypto.types import KeyType
from config.cert_config import CERT_CONSTANTS
from utils.logger import CertLogger

logger = CertLogger.get_logger(f"{CERT_CONSTANTS.LOGGER_NAME}.csr", level=logging.NOTSET)

# TLS Feature (RFC 7633 Section 6)
TLS_FEATURE_OID = x509.ObjectIdentifier("1.3.6.1.5.5.7.1.24")
# SEQUENCE { INTEGER 5 } -> status_request
OCSP_MUST_STAPLE_FEATURE = bytes([0x30, 0x03, 0x02, 0x01, 0x05])


def signature_hash_for(private_key: PrivateKey) -> hashes.HashAlgorithm:
    """
    Hash algorithm paired with the key: SHA-384 for P-384, SHA-256 otherwise.

    Raises:
        UnsupportedKeyType: If the key is not one of the supported variants
    """
    if key_type_of(private_key) == KeyType.EC384:
        return hashes.SHA384()
    return hashes.SHA256()


def build_csr(
    private_key: PrivateKey,
    common_name: str,
    san_names: Optional[Sequence[str]] = None,
    must_staple: bool = False,
) -> bytes:
    """
    Build a DER-encoded CSR signed by private_key.

    Args:
        private_key: EC or RSA private key whose public half goes in the request
        common_name: Subject CN (the main domain)
        san_names: DNS names for the SAN extension, added verbatim in order
        must_staple: If True, add the OCSP must-staple TLS Feature extension

    Returns:
        DER bytes of the signed request

    Raises:
        UnsupportedKeyType: If the key is not EC P-256/P-384 or RSA 2048/4096/8192
        SigningError: If the signature cannot be produced
    """
    algorithm = signature_hash_for(private_key)

    builder = x509.CertificateSigningRequestBuilder().subject_name(
        x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    )

    if san_names:
        builder = builder.add_extension(
            x509.SubjectAlternativeName([x509.DNSName(name) for name in san_names]),
            critical=False,
        )

    if must_staple:
        builder = builder.add_extension(
            x509.UnrecognizedExtension(TLS_FEATURE_OID, OCSP_MUST_STAPLE_FEATURE),
            critical=False,
        )

    try:
        csr = builder.sign(private_key, algorithm)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise SigningError(f"Failed to sign CSR for {common_name}: {e}") from e

    logger.debug(
        f"Built CSR for {common_name} (SAN: {len(san_names or [])}, must-staple: {must_staple})"
    )
    return csr.public_bytes(serialization.Encoding.DER)
