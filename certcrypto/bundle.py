"""
Certificate Bundle Parser

Parses a PEM certificate bundle (as returned by an ACME server) from top to
bottom into an ordered list of certificates. Parsing is all-or-nothing: a
single malformed certificate fails the whole bundle.
"""

import logging
from typing import List, Union

from cryptography import x509
from cryptography.hazmat.primitives import serialization

from certcrypto.errors import EmptyBundle, InvalidPEM, MalformedCertificate
from certcrypto.pem import iter_pem_blocks
from certcrypto.types import PEMBlockType
from config.cert_config import CERT_CONSTANTS
from utils.logger import CertLogger

logger = CertLogger.get_logger(f"{CERT_CONSTANTS.LOGGER_NAME}.bundle", level=logging.NOTSET)


def parse_pem_bundle(bundle: Union[bytes, str]) -> List[x509.Certificate]:
    """
    Parse every CERTIFICATE block of a PEM bundle, preserving order.

    Blocks with other labels (keys, CSRs, ...) are skipped without decoding
    their body.

    Args:
        bundle: Concatenated PEM blocks, leaf first

    Returns:
        Non-empty list of certificates in input order

    Raises:
        EmptyBundle: If no certificate block was found
        MalformedCertificate: If any certificate block fails to parse
    """
    certificates = []

    try:
        blocks = iter_pem_blocks(bundle, labels=(PEMBlockType.CERTIFICATE,))
        for index, block in enumerate(blocks):
            try:
                certificates.append(x509.load_der_x509_certificate(block.data))
            except ValueError as e:
                raise MalformedCertificate(
                    f"Certificate #{index} could not be parsed: {e}"
                ) from e
    except InvalidPEM as e:
        raise MalformedCertificate(f"Bundle contains an undecodable certificate block: {e}") from e

    if not certificates:
        raise EmptyBundle("No certificates were found while parsing the bundle")

    logger.debug(f"Parsed bundle with {len(certificates)} certificate(s)")
    return certificates


def split_pem_chain(bundle: Union[bytes, str]) -> List[bytes]:
    """
    Split a bundle into one PEM document per certificate.

    Returns:
        PEM bytes per certificate, same order as the bundle
    """
    return [
        certificate.public_bytes(serialization.Encoding.PEM)
        for certificate in parse_pem_bundle(bundle)
    ]
