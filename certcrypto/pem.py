"""
PEM Codec

Encodes and decodes the four PEM block kinds handled by the engine:
CERTIFICATE, CERTIFICATE REQUEST, RSA PRIVATE KEY, EC PRIVATE KEY.

Block bodies are armored and unarmored with asn1crypto.pem; the DER payloads
come from (and go to) the cryptography objects.

Standards Reference:
- RFC 7468 - Textual Encodings of PKIX, PKCS, and CMS Structures
"""

import binascii
import logging
import re
from typing import Collection, Iterator, Optional, Tuple, Union

from asn1crypto import pem as asn1_pem
from cryptography import x509
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from certcrypto.errors import InvalidPEM, NotACSR, UnexpectedBlockType, UnsupportedValueType
from certcrypto.types import DERCertificateBytes, PEMBlock, PEMBlockType
from config.cert_config import CERT_CONSTANTS
from utils.logger import CertLogger

logger = CertLogger.get_logger(f"{CERT_CONSTANTS.LOGGER_NAME}.pem", level=logging.NOTSET)

PEMEncodable = Union[
    ec.EllipticCurvePrivateKey,
    rsa.RSAPrivateKey,
    x509.CertificateSigningRequest,
    DERCertificateBytes,
]

# Stesso alfabeto delle label accettato da asn1crypto.pem
_BEGIN_LINE = re.compile(rb"^-----BEGIN ([A-Z0-9 ]+)-----[ \t]*\r?$", re.MULTILINE)
_END_LINE = re.compile(rb"^-----END ([A-Z0-9 ]+)-----[ \t]*\r?$", re.MULTILINE)


def _as_bytes(data: Union[bytes, str]) -> bytes:
    if isinstance(data, str):
        # Only marker and body lines are interpreted, comments may be any text
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected bytes or str, got {type(data).__name__}")


def _label(block_type: Union[PEMBlockType, str]) -> str:
    return block_type.value if isinstance(block_type, PEMBlockType) else block_type


# ============================================================================
# ENCODING
# ============================================================================


def pem_encode(value: PEMEncodable) -> bytes:
    """
    Encode a key, CSR or DER certificate as a PEM block.

    Args:
        value: EC private key, RSA private key, CSR object or DERCertificateBytes

    Returns:
        PEM bytes (64-column base64 body, trailing newline)

    Raises:
        UnsupportedValueType: For any other value, including plain bytes
    """
    if isinstance(value, DERCertificateBytes):
        block_type, der_bytes = PEMBlockType.CERTIFICATE, bytes(value)
    elif isinstance(value, ec.EllipticCurvePrivateKey):
        # SEC1 ECPrivateKey
        block_type = PEMBlockType.EC_PRIVATE_KEY
        der_bytes = value.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )
    elif isinstance(value, rsa.RSAPrivateKey):
        # PKCS#1 RSAPrivateKey
        block_type = PEMBlockType.RSA_PRIVATE_KEY
        der_bytes = value.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )
    elif isinstance(value, x509.CertificateSigningRequest):
        block_type = PEMBlockType.CERTIFICATE_REQUEST
        der_bytes = value.public_bytes(serialization.Encoding.DER)
    else:
        raise UnsupportedValueType(f"Cannot PEM encode value of type {type(value).__name__}")

    return asn1_pem.armor(block_type.value, der_bytes)


# ============================================================================
# DECODING
# ============================================================================


def _split_blocks(data: bytes) -> Iterator[Tuple[str, bytes]]:
    """
    Locate BEGIN/END pairs and yield (label, armored block) without decoding.

    A BEGIN whose next END carries a different label is not a block: the scan
    resumes right after that BEGIN line. A trailing BEGIN without END is dropped.
    """
    position = 0
    while True:
        begin = _BEGIN_LINE.search(data, position)
        if begin is None:
            return

        end = _END_LINE.search(data, begin.end())
        if end is None:
            return

        label = begin.group(1).decode("ascii")
        if end.group(1) != begin.group(1):
            logger.debug(
                f"Ignoring BEGIN {label} closed by END {end.group(1).decode('ascii')}"
            )
            position = begin.end()
            continue

        yield label, data[begin.start():end.end()]
        position = end.end()


def _unarmor_block(label: str, armored: bytes) -> PEMBlock:
    try:
        _object_type, _headers, der_bytes = asn1_pem.unarmor(armored)
    except binascii.Error as e:
        raise InvalidPEM(f"{label} block body is not valid base64: {e}") from e
    except UnicodeDecodeError as e:
        raise InvalidPEM(f"{label} block headers are not ASCII: {e}") from e
    return PEMBlock(label=label, data=der_bytes)


def iter_pem_blocks(
    pem_bytes: Union[bytes, str],
    labels: Optional[Collection[Union[PEMBlockType, str]]] = None,
) -> Iterator[PEMBlock]:
    """
    Lazily yield every PEM block of a concatenated stream, top to bottom.

    Text outside BEGIN/END markers is ignored, a trailing block without END
    marker is dropped, a BEGIN/END pair with mismatched labels is not a block.

    Args:
        pem_bytes: PEM stream
        labels: If given, blocks with other labels are skipped before their
            body is decoded

    Raises:
        InvalidPEM: If the body of a yielded block is not valid base64
    """
    wanted = None if labels is None else {_label(label) for label in labels}

    for label, armored in _split_blocks(_as_bytes(pem_bytes)):
        if wanted is not None and label not in wanted:
            logger.debug(f"Skipping PEM block {label}")
            continue
        yield _unarmor_block(label, armored)


def pem_decode(pem_bytes: Union[bytes, str]) -> PEMBlock:
    """
    Decode the first PEM block of the input.

    Raises:
        InvalidPEM: If no block can be located or its body is not valid base64
    """
    for block in iter_pem_blocks(pem_bytes):
        return block
    raise InvalidPEM("PEM decode did not yield a valid block. Is the certificate in the right format?")


def pem_decode_expecting(pem_bytes: Union[bytes, str], block_type: Union[PEMBlockType, str]) -> bytes:
    """
    Decode the first PEM block and check its label.

    Returns:
        DER payload of the block

    Raises:
        InvalidPEM: If no block can be located
        UnexpectedBlockType: If the label differs from block_type
    """
    expected = _label(block_type)
    block = pem_decode(pem_bytes)
    if block.label != expected:
        raise UnexpectedBlockType(expected, block.label)
    return block.data


def pem_decode_csr(pem_bytes: Union[bytes, str]) -> x509.CertificateSigningRequest:
    """
    Decode a PEM "CERTIFICATE REQUEST" into a CSR object.

    Raises:
        InvalidPEM: If no block is found or the payload is not a CSR
        NotACSR: If the block has a different label
    """
    block = pem_decode(pem_bytes)
    if block.label != PEMBlockType.CERTIFICATE_REQUEST.value:
        raise NotACSR(PEMBlockType.CERTIFICATE_REQUEST.value, block.label)

    try:
        return x509.load_der_x509_csr(block.data)
    except ValueError as e:
        raise InvalidPEM(f"PEM block is not a valid certificate request: {e}") from e
