"""
Pytest Configuration and Shared Fixtures

Fornisce fixture condivise per tutti i test:
- Chiavi EC/RSA generate una volta per sessione
- Factory per certificati di test (CA + leaf)
- Certificato con NotAfter fisso (2025-01-01T00:00:00Z)
- Bundle PEM CA -> leaf
"""

import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.x509.oid import NameOID

from certcrypto import KeyType, generate_private_key

FIXED_NOT_AFTER = datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def rsa_key():
    """RSA 2048 key condivisa (la generazione RSA è lenta)"""
    return generate_private_key(KeyType.RSA2048)


@pytest.fixture(scope="session")
def ec256_key():
    return generate_private_key(KeyType.EC256)


@pytest.fixture(scope="session")
def ec384_key():
    return generate_private_key(KeyType.EC384)


@pytest.fixture(scope="session")
def cert_factory(ec256_key):
    """
    Factory per certificati firmati dalla CA di test.

    Usage:
        cert = cert_factory("leaf.example.com")
        ca = cert_factory("Test CA", ca=True)
    """
    ca_name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "CertCrypto Test CA")])

    def _make(
        common_name: str,
        ca: bool = False,
        not_before: datetime = None,
        not_after: datetime = None,
    ) -> x509.Certificate:
        not_before = not_before or datetime.now(timezone.utc) - timedelta(days=1)
        not_after = not_after or not_before + timedelta(days=90)
        subject = ca_name if ca else x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
        builder = (
            x509.CertificateBuilder()
            .subject_name(subject)
            .issuer_name(ca_name)
            .public_key(ec256_key.public_key())
            .serial_number(x509.random_serial_number())
            .not_valid_before(not_before)
            .not_valid_after(not_after)
            .add_extension(x509.BasicConstraints(ca=ca, path_length=None), critical=True)
        )
        if not ca:
            builder = builder.add_extension(
                x509.SubjectAlternativeName([x509.DNSName(common_name)]), critical=False
            )
        return builder.sign(ec256_key, hashes.SHA256())

    return _make


@pytest.fixture(scope="session")
def ca_cert(cert_factory):
    return cert_factory("CertCrypto Test CA", ca=True)


@pytest.fixture(scope="session")
def leaf_cert(cert_factory):
    return cert_factory("leaf.example.com")


@pytest.fixture(scope="session")
def fixed_expiry_cert(cert_factory):
    """Certificato con NotAfter = 2025-01-01T00:00:00Z"""
    return cert_factory(
        "expired.example.com",
        not_before=datetime(2024, 1, 1, tzinfo=timezone.utc),
        not_after=FIXED_NOT_AFTER,
    )


@pytest.fixture(scope="session")
def chain_pem(leaf_cert, ca_cert):
    """Bundle PEM leaf -> CA, come restituito da un server ACME"""
    return leaf_cert.public_bytes(serialization.Encoding.PEM) + ca_cert.public_bytes(
        serialization.Encoding.PEM
    )
