"""
OCSP status classification.

Pass-through enumeration for OCSP responses fetched and parsed by a caller.
No network I/O happens here.
"""

from enum import Enum

from cryptography.x509 import ocsp


class OCSPStatus(Enum):
    """
    Certificate status as reported by an OCSP responder.

    GOOD: the certificate is valid
    REVOKED: the certificate has been deliberately revoked
    UNKNOWN: the responder doesn't know about the certificate
    SERVER_FAILED: the responder failed to process the request
    """

    GOOD = 0
    REVOKED = 1
    UNKNOWN = 2
    SERVER_FAILED = 3

    @classmethod
    def from_response(cls, response: ocsp.OCSPResponse) -> "OCSPStatus":
        """Classify a parsed OCSP response (first SingleResponse)"""
        if response.response_status != ocsp.OCSPResponseStatus.SUCCESSFUL:
            return cls.SERVER_FAILED

        return _CERT_STATUS_MAP[response.certificate_status]


_CERT_STATUS_MAP = {
    ocsp.OCSPCertStatus.GOOD: OCSPStatus.GOOD,
    ocsp.OCSPCertStatus.REVOKED: OCSPStatus.REVOKED,
    ocsp.OCSPCertStatus.UNKNOWN: OCSPStatus.UNKNOWN,
}
