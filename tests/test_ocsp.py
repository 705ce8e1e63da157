"""
Test suite per la classificazione OCSPStatus
"""

from datetime import datetime, timedelta, timezone

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.x509 import ocsp

from certcrypto import OCSPStatus


def _build_response(leaf_cert, ca_cert, ec256_key, cert_status):
    now = datetime.now(timezone.utc)
    revoked = cert_status == ocsp.OCSPCertStatus.REVOKED
    builder = (
        ocsp.OCSPResponseBuilder()
        .add_response(
            cert=leaf_cert,
            issuer=ca_cert,
            algorithm=hashes.SHA256(),
            cert_status=cert_status,
            this_update=now,
            next_update=now + timedelta(days=1),
            revocation_time=now if revoked else None,
            revocation_reason=None,
        )
        .responder_id(ocsp.OCSPResponderEncoding.HASH, ca_cert)
    )
    return builder.sign(ec256_key, hashes.SHA256())


class TestOCSPStatus:
    """Test suite per OCSPStatus"""

    def test_values(self):
        assert [status.value for status in OCSPStatus] == [0, 1, 2, 3]
        assert len(OCSPStatus) == 4

    @pytest.mark.parametrize("cert_status,expected", [
        (ocsp.OCSPCertStatus.GOOD, OCSPStatus.GOOD),
        (ocsp.OCSPCertStatus.REVOKED, OCSPStatus.REVOKED),
        (ocsp.OCSPCertStatus.UNKNOWN, OCSPStatus.UNKNOWN),
    ])
    def test_from_successful_response(self, leaf_cert, ca_cert, ec256_key, cert_status, expected):
        response = _build_response(leaf_cert, ca_cert, ec256_key, cert_status)
        assert OCSPStatus.from_response(response) is expected

    @pytest.mark.parametrize("response_status", [
        ocsp.OCSPResponseStatus.INTERNAL_ERROR,
        ocsp.OCSPResponseStatus.TRY_LATER,
        ocsp.OCSPResponseStatus.UNAUTHORIZED,
    ])
    def test_from_unsuccessful_response(self, response_status):
        response = ocsp.OCSPResponseBuilder.build_unsuccessful(response_status)
        assert OCSPStatus.from_response(response) is OCSPStatus.SERVER_FAILED
