"""
Private Key Generation

Generates and loads the private keys used to sign CSRs and self-signed
certificates:
- EC keys on NIST P-256 / P-384
- RSA keys with 2048 / 4096 / 8192 bit moduli

Key generation is CPU-bound and blocking. RSA 8192 can take several seconds,
latency-sensitive callers should use submit_key_generation() and a worker pool.
"""

import logging
import time
from concurrent.futures import Executor, Future
from typing import Union

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from certcrypto.errors import InvalidPEM, RNGFailure, UnexpectedBlockType, UnsupportedKeyType
from certcrypto.pem import pem_decode
from certcrypto.types import KeyType, PEMBlockType
from config.cert_config import CERT_CONSTANTS
from utils.logger import CertLogger

PrivateKey = Union[ec.EllipticCurvePrivateKey, rsa.RSAPrivateKey]

logger = CertLogger.get_logger(f"{CERT_CONSTANTS.LOGGER_NAME}.keys", level=logging.NOTSET)

_EC_CURVES = {
    KeyType.EC256: ec.SECP256R1,
    KeyType.EC384: ec.SECP384R1,
}

_RSA_SIZES = {
    KeyType.RSA2048: 2048,
    KeyType.RSA4096: 4096,
    KeyType.RSA8192: 8192,
}


def _coerce_key_type(key_type) -> KeyType:
    try:
        return KeyType(key_type)
    except ValueError:
        raise UnsupportedKeyType(f"Invalid KeyType: {key_type!r}") from None


def generate_private_key(key_type: Union[KeyType, str]) -> PrivateKey:
    """
    Generate a fresh private key for the requested type.

    Args:
        key_type: KeyType member or its string value ("P256", "2048", ...)

    Returns:
        New EC or RSA private key, never shared with other callers

    Raises:
        UnsupportedKeyType: If key_type is not one of the five supported types
        RNGFailure: If key generation raises OSError. Keys are drawn from the
            OpenSSL CSPRNG, so this only covers OS errors the backend surfaces
    """
    key_type = _coerce_key_type(key_type)
    start = time.perf_counter()

    try:
        if key_type in _EC_CURVES:
            private_key = ec.generate_private_key(_EC_CURVES[key_type]())
        else:
            private_key = rsa.generate_private_key(
                public_exponent=CERT_CONSTANTS.RSA_PUBLIC_EXPONENT,
                key_size=_RSA_SIZES[key_type],
            )
    except OSError as e:
        raise RNGFailure(f"Random source failed during {key_type.name} generation: {e}") from e

    logger.debug(f"Generated {key_type.name} key in {(time.perf_counter() - start) * 1000:.1f} ms")
    return private_key


def submit_key_generation(executor: Executor, key_type: Union[KeyType, str]) -> "Future[PrivateKey]":
    """
    Dispatch key generation to a worker pool.

    The key type is validated eagerly so an unsupported value fails in the
    caller instead of inside the future.
    """
    key_type = _coerce_key_type(key_type)
    return executor.submit(generate_private_key, key_type)


def key_type_of(private_key) -> KeyType:
    """
    Map a private key back to its KeyType.

    Raises:
        UnsupportedKeyType: For curves/sizes/algorithms outside KeyType
    """
    if isinstance(private_key, ec.EllipticCurvePrivateKey):
        for key_type, curve in _EC_CURVES.items():
            if isinstance(private_key.curve, curve):
                return key_type
        raise UnsupportedKeyType(f"Unsupported EC curve: {private_key.curve.name}")

    if isinstance(private_key, rsa.RSAPrivateKey):
        for key_type, size in _RSA_SIZES.items():
            if private_key.key_size == size:
                return key_type
        raise UnsupportedKeyType(f"Unsupported RSA key size: {private_key.key_size}")

    raise UnsupportedKeyType(f"Unsupported private key type: {type(private_key).__name__}")


def load_pem_private_key(pem_bytes: Union[bytes, str]) -> PrivateKey:
    """
    Parse a PKCS#1 RSA or SEC1 EC private key from PEM.

    Args:
        pem_bytes: PEM text containing an "RSA PRIVATE KEY" or "EC PRIVATE KEY" block

    Returns:
        Private key object

    Raises:
        InvalidPEM: If no block is found or the payload is not a valid key
        UnexpectedBlockType: If the block carries any other label
    """
    block = pem_decode(pem_bytes)

    if block.label == PEMBlockType.RSA_PRIVATE_KEY.value:
        expected = rsa.RSAPrivateKey
    elif block.label == PEMBlockType.EC_PRIVATE_KEY.value:
        expected = ec.EllipticCurvePrivateKey
    else:
        raise UnexpectedBlockType("RSA PRIVATE KEY | EC PRIVATE KEY", block.label)

    try:
        private_key = serialization.load_der_private_key(block.data, password=None)
    except (ValueError, TypeError) as e:
        raise InvalidPEM(f"Invalid {block.label} payload: {e}") from e

    if not isinstance(private_key, expected):
        raise InvalidPEM(f"{block.label} block does not contain a matching key")
    return private_key
