# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Optable."""
import logging

logger: logging.Logger = logging.getLogger("optable")
