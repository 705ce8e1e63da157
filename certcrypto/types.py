"""
Core Types and Constants

Defines the key types, PEM block labels and value wrappers shared by the
certificate engine.

Standards Reference:
- RFC 7468 - Textual Encodings of PKIX, PKCS, and CMS Structures
- RFC 5280 - Internet X.509 Public Key Infrastructure Certificate Profile
- RFC 7633 - X.509v3 TLS Feature Extension
"""

from dataclasses import dataclass
from enum import Enum


# ============================================================================
# ENUMERATIONS
# ============================================================================


class KeyType(str, Enum):
    """
    Key algorithm and size/curve.

    Values match the strings used by ACME client configuration, so
    ``KeyType("P256")`` and ``KeyType("4096")`` both work.
    """

    EC256 = "P256"
    EC384 = "P384"
    RSA2048 = "2048"
    RSA4096 = "4096"
    RSA8192 = "8192"

    @property
    def is_rsa(self) -> bool:
        return self in (KeyType.RSA2048, KeyType.RSA4096, KeyType.RSA8192)


class PEMBlockType(str, Enum):
    """PEM labels recognized by the codec (RFC 7468 Section 4)"""

    CERTIFICATE = "CERTIFICATE"
    CERTIFICATE_REQUEST = "CERTIFICATE REQUEST"
    RSA_PRIVATE_KEY = "RSA PRIVATE KEY"
    EC_PRIVATE_KEY = "EC PRIVATE KEY"


# ============================================================================
# VALUE TYPES
# ============================================================================


class DERCertificateBytes(bytes):
    """
    Already-encoded certificate DER.

    Plain ``bytes`` carry no label, so only this wrapper is accepted by
    ``pem_encode`` for the ``CERTIFICATE`` block.
    """

    def __repr__(self) -> str:
        return f"DERCertificateBytes({len(self)} bytes)"


@dataclass(frozen=True)
class PEMBlock:
    """Single decoded PEM block: label and DER payload"""

    label: str
    data: bytes
