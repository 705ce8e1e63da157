"""
Error taxonomy for the certificate engine.

Every failure is raised as a subclass of CertCryptoError. Where a failure is
also a plain bad-argument condition the error additionally derives from
ValueError/TypeError, so callers that only catch builtins keep working.
"""


class CertCryptoError(Exception):
    """Base class for all certificate engine errors"""


class UnsupportedKeyType(CertCryptoError, ValueError):
    """Key type (or key object) outside the supported EC/RSA variants"""


class UnsupportedValueType(CertCryptoError, TypeError):
    """Value cannot be PEM encoded"""


class InvalidPEM(CertCryptoError, ValueError):
    """No PEM block could be located, or its body is not valid base64"""


class UnexpectedBlockType(InvalidPEM):
    """PEM block found but with a different label than expected"""

    def __init__(self, expected: str, found: str):
        self.expected = expected
        self.found = found
        super().__init__(f"Expected PEM block '{expected}', found '{found}'")


class NotACSR(UnexpectedBlockType):
    """PEM block is not a CERTIFICATE REQUEST"""


class MalformedCertificate(CertCryptoError, ValueError):
    """Certificate payload could not be parsed"""


class EmptyBundle(CertCryptoError, ValueError):
    """Bundle contains no certificates"""


class SigningError(CertCryptoError):
    """Signature generation failed"""


class RNGFailure(CertCryptoError):
    """The system random source failed"""
