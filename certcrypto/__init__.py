"""
CertCrypto - certificate material engine

Private keys, CSRs, PEM codec, bundle parsing, expiration introspection and
self-signed certificates for an ACME client.

Submodules:
- types: KeyType, PEM labels, value wrappers
- errors: error taxonomy
- keys: private key generation and loading
- pem: PEM encode/decode
- csr: CSR builder
- bundle: PEM bundle parser
- expiration: NotAfter introspection
- selfsigned: self-signed certificates for transient TLS validation
- ocsp: OCSP status classification

Standards Reference:
- RFC 7468 - Textual Encodings of PKIX, PKCS, and CMS Structures
- RFC 2986 - PKCS #10
- RFC 5280 - X.509 Certificate Profile
- RFC 7633 - TLS Feature Extension
"""

from .types import (
    KeyType,
    PEMBlockType,
    PEMBlock,
    DERCertificateBytes,
)

from .errors import (
    CertCryptoError,
    UnsupportedKeyType,
    UnsupportedValueType,
    InvalidPEM,
    UnexpectedBlockType,
    NotACSR,
    MalformedCertificate,
    EmptyBundle,
    SigningError,
    RNGFailure,
)

from .pem import (
    pem_encode,
    pem_decode,
    pem_decode_expecting,
    pem_decode_csr,
    iter_pem_blocks,
)

from .keys import (
    PrivateKey,
    generate_private_key,
    submit_key_generation,
    key_type_of,
    load_pem_private_key,
)

from .csr import (
    TLS_FEATURE_OID,
    OCSP_MUST_STAPLE_FEATURE,
    build_csr,
    signature_hash_for,
)

from .bundle import (
    parse_pem_bundle,
    split_pem_chain,
)

from .expiration import (
    get_pem_cert_expiration,
    get_der_cert_expiration,
    needs_renewal,
)

from .selfsigned import (
    ACME_IDENTIFIER_OID,
    acme_identifier_extension,
    generate_der_cert,
    generate_pem_cert,
    raw_extension,
)

from .ocsp import OCSPStatus

__all__ = [
    # Types
    "KeyType",
    "PEMBlockType",
    "PEMBlock",
    "DERCertificateBytes",
    "PrivateKey",

    # Errors
    "CertCryptoError",
    "UnsupportedKeyType",
    "UnsupportedValueType",
    "InvalidPEM",
    "UnexpectedBlockType",
    "NotACSR",
    "MalformedCertificate",
    "EmptyBundle",
    "SigningError",
    "RNGFailure",

    # PEM
    "pem_encode",
    "pem_decode",
    "pem_decode_expecting",
    "pem_decode_csr",
    "iter_pem_blocks",

    # Keys
    "generate_private_key",
    "submit_key_generation",
    "key_type_of",
    "load_pem_private_key",

    # CSR
    "TLS_FEATURE_OID",
    "OCSP_MUST_STAPLE_FEATURE",
    "build_csr",
    "signature_hash_for",

    # Bundle / expiration
    "parse_pem_bundle",
    "split_pem_chain",
    "get_pem_cert_expiration",
    "get_der_cert_expiration",
    "needs_renewal",

    # Self-signed
    "ACME_IDENTIFIER_OID",
    "acme_identifier_extension",
    "generate_der_cert",
    "generate_pem_cert",
    "raw_extension",

    # OCSP
    "OCSPStatus",
]
