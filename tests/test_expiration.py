"""
Test suite per l'introspezione della scadenza dei certificati
"""

from datetime import datetime, timedelta, timezone

import pytest
from cryptography.hazmat.primitives import serialization

from certcrypto import (
    DERCertificateBytes,
    InvalidPEM,
    MalformedCertificate,
    get_der_cert_expiration,
    get_pem_cert_expiration,
    needs_renewal,
    pem_encode,
)

FIXED_NOT_AFTER = datetime(2025, 1, 1, tzinfo=timezone.utc)


class TestCertExpiration:
    """Test suite per get_pem_cert_expiration / get_der_cert_expiration"""

    def test_from_pem(self, fixed_expiry_cert):
        pem = fixed_expiry_cert.public_bytes(serialization.Encoding.PEM)
        expiration = get_pem_cert_expiration(pem)

        assert expiration == datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
        assert expiration.tzinfo is not None

    def test_from_der(self, fixed_expiry_cert):
        der = fixed_expiry_cert.public_bytes(serialization.Encoding.DER)
        assert get_der_cert_expiration(der) == FIXED_NOT_AFTER

    def test_from_pem_uses_first_block(self, fixed_expiry_cert, leaf_cert):
        pem = fixed_expiry_cert.public_bytes(serialization.Encoding.PEM) + leaf_cert.public_bytes(
            serialization.Encoding.PEM
        )
        assert get_pem_cert_expiration(pem) == FIXED_NOT_AFTER

    def test_from_str_with_non_ascii_preamble(self, fixed_expiry_cert):
        pem = "# é\n" + fixed_expiry_cert.public_bytes(serialization.Encoding.PEM).decode("ascii")
        assert get_pem_cert_expiration(pem) == FIXED_NOT_AFTER

    def test_der_input_to_pem_variant_fails(self, leaf_cert):
        with pytest.raises(InvalidPEM):
            get_pem_cert_expiration(leaf_cert.public_bytes(serialization.Encoding.DER))

    def test_malformed_pem_payload(self, leaf_cert):
        der = leaf_cert.public_bytes(serialization.Encoding.DER)
        with pytest.raises(MalformedCertificate):
            get_pem_cert_expiration(pem_encode(DERCertificateBytes(der[:40])))

    def test_malformed_der(self):
        with pytest.raises(MalformedCertificate):
            get_der_cert_expiration(b"\x30\x03\x02\x01\x05")

    def test_non_certificate_block(self, ec256_key):
        with pytest.raises(MalformedCertificate):
            get_pem_cert_expiration(pem_encode(ec256_key))


class TestNeedsRenewal:
    """Test suite per needs_renewal"""

    def test_expired_certificate(self, fixed_expiry_cert):
        pem = fixed_expiry_cert.public_bytes(serialization.Encoding.PEM)
        assert needs_renewal(pem)

    def test_inside_window(self, fixed_expiry_cert):
        pem = fixed_expiry_cert.public_bytes(serialization.Encoding.PEM)
        now = FIXED_NOT_AFTER - timedelta(days=10)
        assert needs_renewal(pem, days=30, now=now)
        assert not needs_renewal(pem, days=5, now=now)

    def test_naive_now_is_utc(self, fixed_expiry_cert):
        pem = fixed_expiry_cert.public_bytes(serialization.Encoding.PEM)
        assert not needs_renewal(pem, days=1, now=datetime(2024, 6, 1))

    def test_fresh_certificate(self, leaf_cert):
        # leaf_cert scade tra ~89 giorni
        pem = leaf_cert.public_bytes(serialization.Encoding.PEM)
        assert not needs_renewal(pem)
        assert needs_renewal(pem, days=120)
