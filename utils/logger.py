"""
Centralized logger for the certificate engine.

Provides configurable logging with file and console output,
level filtering, and consistent formatting.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from config.cert_config import CERT_CONSTANTS


class CertLogger:
    """
    Centralized logger for certificate operations with file and console output.
    """

    _loggers = {}

    @staticmethod
    def get_logger(
        name: str,
        log_dir: Optional[str] = None,
        level: int = CERT_CONSTANTS.LOG_LEVEL,
        console_output: bool = False,
    ) -> logging.Logger:
        """
        Ottiene o crea un logger configurato.

        Args:
            name: Nome del logger (es. "CertCrypto.keys", "CertCrypto.bundle")
            log_dir: Directory per i file di log (opzionale)
            level: Livello minimo di log (default: CERT_CONSTANTS.LOG_LEVEL)
            console_output: Se True, stampa anche su stderr

        Returns:
            Logger configurato pronto all'uso
        """
        # Se esiste già, ritorna il logger cached
        if name in CertLogger._loggers:
            return CertLogger._loggers[name]

        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Formato del log: [2025-10-09 14:30:45] [CertCrypto.keys] [INFO] Messaggio
        formatter = logging.Formatter(
            fmt="[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        if console_output or log_dir:
            # Handler espliciti: non propagare ai logger parent
            logger.propagate = False
            logger.handlers.clear()

        if console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        if log_dir:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path / f"{name}.log", encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        CertLogger._loggers[name] = logger
        return logger

    @staticmethod
    def set_level(name: str, level: int):
        """Changes log level for an existing logger."""
        if name in CertLogger._loggers:
            logger = CertLogger._loggers[name]
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)

    @staticmethod
    def clear_cache():
        """Clears logger cache."""
        CertLogger._loggers.clear()
