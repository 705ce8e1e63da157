"""
CertCrypto Configuration - Costanti centralizzate

Questo file centralizza le costanti usate dal motore di materiale crittografico
(generazione chiavi, CSR, certificati self-signed, finestre di rinnovo).
Modificando qui i valori, si applicano automaticamente a tutto il sistema.

Usage:
    from config.cert_config import CERT_CONSTANTS

    not_after = now + timedelta(days=CERT_CONSTANTS.SELF_SIGNED_VALIDITY_DAYS)
"""

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class CertConstants:
    """
    Costanti centralizzate per il motore certificati.

    Attributi:
        RSA_PUBLIC_EXPONENT: Esponente pubblico per le chiavi RSA
        SELF_SIGNED_VALIDITY_DAYS: Validità di default dei certificati self-signed
        SELF_SIGNED_COMMON_NAME: CN segnaposto dei certificati self-signed
        SERIAL_NUMBER_BITS: Dimensione del serial number casuale
        RENEWAL_WINDOW_DAYS: Giorni prima della scadenza in cui rinnovare
        LOGGER_NAME: Nome del logger del core
        LOG_LEVEL: Livello di log del core
    """
    # Chiavi
    RSA_PUBLIC_EXPONENT: int = 65537

    # Certificati self-signed (tls-alpn-01)
    SELF_SIGNED_VALIDITY_DAYS: int = 365
    SELF_SIGNED_COMMON_NAME: str = "ACME Challenge TEMP"
    SERIAL_NUMBER_BITS: int = 128

    # Rinnovo
    RENEWAL_WINDOW_DAYS: int = 30

    # Logging
    LOGGER_NAME: str = "CertCrypto"
    LOG_LEVEL: int = logging.INFO


# Istanza singleton globale
CERT_CONSTANTS = CertConstants()
