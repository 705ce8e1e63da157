"""
Test suite per utils (logger e helper sui certificati)
"""

import logging
from datetime import datetime, timezone

from cryptography.hazmat.primitives import serialization

from certcrypto import KeyType, build_csr, generate_pem_cert, generate_private_key, parse_pem_bundle
from utils import CertLogger
from utils.cert_utils import (
    format_certificate_info,
    get_certificate_expiry_time,
    get_certificate_not_before,
    get_common_name,
    is_certificate_expired,
    is_self_signed,
)


class TestCertLogger:
    """Test suite per CertLogger"""

    def teardown_method(self):
        CertLogger.clear_cache()

    def test_cached_instance(self):
        first = CertLogger.get_logger("CertCryptoTest.cache")
        assert CertLogger.get_logger("CertCryptoTest.cache") is first

    def test_file_output(self, tmp_path):
        logger = CertLogger.get_logger("CertCryptoTest.file", log_dir=str(tmp_path))
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        content = (tmp_path / "CertCryptoTest.file.log").read_text(encoding="utf-8")
        assert "[CertCryptoTest.file] [INFO] hello" in content
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_set_level(self):
        logger = CertLogger.get_logger("CertCryptoTest.level")
        CertLogger.set_level("CertCryptoTest.level", logging.DEBUG)
        assert logger.level == logging.DEBUG

    def test_library_logger_propagates(self, caplog, ec256_key):
        with caplog.at_level(logging.DEBUG, logger="CertCrypto.csr"):
            build_csr(ec256_key, "logged.example.com")
        assert "logged.example.com" in caplog.text

    def test_library_loggers_follow_parent_level(self, caplog):
        assert logging.getLogger("CertCrypto.keys").level == logging.NOTSET

        with caplog.at_level(logging.DEBUG, logger="CertCrypto"):
            generate_private_key(KeyType.EC256)
        assert "Generated EC256 key" in caplog.text


class TestCertUtils:
    """Test suite per gli helper dei certificati"""

    def test_times_are_utc_aware(self, leaf_cert):
        assert get_certificate_expiry_time(leaf_cert).tzinfo is not None
        assert get_certificate_not_before(leaf_cert).tzinfo is not None

    def test_is_certificate_expired(self, fixed_expiry_cert, leaf_cert):
        assert is_certificate_expired(fixed_expiry_cert)
        assert not is_certificate_expired(fixed_expiry_cert, datetime(2024, 6, 1))
        assert not is_certificate_expired(leaf_cert, datetime.now(timezone.utc))

    def test_is_self_signed(self, rsa_key, leaf_cert, ca_cert):
        cert = parse_pem_bundle(generate_pem_cert(rsa_key, "example.com"))[0]
        assert is_self_signed(cert)
        assert is_self_signed(ca_cert)
        assert not is_self_signed(leaf_cert)

    def test_format_certificate_info(self, leaf_cert):
        info = format_certificate_info(leaf_cert)
        assert "CN=leaf.example.com" in info
        assert "SAN: leaf.example.com" in info
        assert get_common_name(leaf_cert) == "leaf.example.com"

    def test_pem_round_trip_helper(self, leaf_cert):
        pem = leaf_cert.public_bytes(serialization.Encoding.PEM)
        assert get_common_name(parse_pem_bundle(pem)[0]) == "leaf.example.com"
