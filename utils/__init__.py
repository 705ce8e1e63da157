"""
Utils Package

Contains utility modules for certificate inspection and logging.
"""

from .cert_utils import (
    format_certificate_info,
    get_certificate_expiry_time,
    get_certificate_not_before,
    get_common_name,
    get_dns_names,
    has_must_staple,
    is_certificate_expired,
    is_self_signed,
)
from .logger import CertLogger

__all__ = [
    # Certificate utilities
    "get_common_name",
    "get_dns_names",
    "has_must_staple",
    "is_self_signed",
    "get_certificate_expiry_time",
    "get_certificate_not_before",
    "is_certificate_expired",
    "format_certificate_info",
    # Logging
    "CertLogger",
]
