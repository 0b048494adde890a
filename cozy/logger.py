# Cozy Flag Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for the Cozy flag parser."""
import logging

logger: logging.Logger = logging.getLogger("cozy")
