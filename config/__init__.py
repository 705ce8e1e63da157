"""
CertCrypto Configuration Package

Centralizza le costanti del motore certificati.
"""

from .cert_config import CERT_CONSTANTS, CertConstants

__all__ = [
    'CERT_CONSTANTS',
    'CertConstants',
]
