"""
Mandala Core Configuration Module
=================================

Centralized configuration management for the mandala postit core.
Handles environment variable loading and validation, and provides a clean
interface for accessing configuration values throughout the package.

Features:
- Dynamic environment variable loading with .env support
- Property-based configuration access with a short-lived cache
- Validation with logged fallbacks to safe defaults

Environment Variables:
- LOG_LEVEL, VERBOSE_LOGGING, LOG_DIR: logging setup
- PLACEMENT_CANDIDATE_ATTEMPTS: candidates sampled per placement (default 30)
- PLACEMENT_RANDOM_SEED: optional seed for reproducible placement
- VALIDATE_UNIQUE_IDS: check id uniqueness after every forest mutation

Usage:
    from config.settings import config
    attempts = config.PLACEMENT_CANDIDATE_ATTEMPTS

@author lycosa9527
@made_by MindSpring Team
"""

from dotenv import load_dotenv
import os
import time
from typing import Optional
import logging
from utils.env_utils import ensure_utf8_env_file
from .mandala_config import (
    DEFAULT_CANDIDATE_ATTEMPTS,
    MIN_CANDIDATE_ATTEMPTS,
    MAX_CANDIDATE_ATTEMPTS,
)

logger = logging.getLogger(__name__)

# Ensure .env file is UTF-8 encoded before loading
ensure_utf8_env_file()
load_dotenv()  # Load environment variables from .env file


class Config:
    """
    Centralized configuration for the mandala core.
    Values are cached for a short period so repeated reads stay consistent.
    """
    def __init__(self):
        self._cache = {}
        self._cache_timestamp = 0
        self._cache_duration = 30  # Cache for 30 seconds

    def _get_cached_value(self, key: str, default=None):
        current_time = time.time()
        if current_time - self._cache_timestamp > self._cache_duration:
            self._cache.clear()
            self._cache_timestamp = current_time
        if key not in self._cache:
            self._cache[key] = os.environ.get(key, default)
        return self._cache[key]

    def clear_cache(self):
        """Drop cached values so the next read goes back to the environment."""
        self._cache.clear()
        self._cache_timestamp = 0

    # ============================================================================
    # LOGGING
    # ============================================================================

    @property
    def LOG_LEVEL(self):
        """Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""
        level = self._get_cached_value('LOG_LEVEL', 'INFO').upper()
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if level not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{level}', using INFO")
            return 'INFO'
        return level

    @property
    def VERBOSE_LOGGING(self):
        """Force DEBUG level regardless of LOG_LEVEL."""
        return self._get_cached_value('VERBOSE_LOGGING', 'False').lower() == 'true'

    @property
    def LOG_DIR(self) -> Optional[str]:
        """Directory for rotating log files; console only when unset."""
        value = self._get_cached_value('LOG_DIR', '')
        return value.strip() or None

    # ============================================================================
    # PLACEMENT ENGINE
    # ============================================================================

    @property
    def PLACEMENT_CANDIDATE_ATTEMPTS(self) -> int:
        """Number of random candidates sampled when a cell is already occupied."""
        try:
            val = int(self._get_cached_value('PLACEMENT_CANDIDATE_ATTEMPTS', str(DEFAULT_CANDIDATE_ATTEMPTS)))
            if val < MIN_CANDIDATE_ATTEMPTS or val > MAX_CANDIDATE_ATTEMPTS:
                logger.warning(f"PLACEMENT_CANDIDATE_ATTEMPTS {val} out of range, using {DEFAULT_CANDIDATE_ATTEMPTS}")
                return DEFAULT_CANDIDATE_ATTEMPTS
            return val
        except (ValueError, TypeError):
            logger.warning(f"Invalid PLACEMENT_CANDIDATE_ATTEMPTS value, using {DEFAULT_CANDIDATE_ATTEMPTS}")
            return DEFAULT_CANDIDATE_ATTEMPTS

    @property
    def PLACEMENT_RANDOM_SEED(self) -> Optional[int]:
        """Seed for the placement random source (None = nondeterministic)."""
        raw = self._get_cached_value('PLACEMENT_RANDOM_SEED', '')
        if raw is None or not str(raw).strip():
            return None
        try:
            return int(raw)
        except (ValueError, TypeError):
            logger.warning(f"Invalid PLACEMENT_RANDOM_SEED '{raw}', ignoring")
            return None

    # ============================================================================
    # HIERARCHY TREE
    # ============================================================================

    @property
    def VALIDATE_UNIQUE_IDS(self) -> bool:
        """Check postit id uniqueness after every forest mutation."""
        return self._get_cached_value('VALIDATE_UNIQUE_IDS', 'False').lower() == 'true'

    # ============================================================================
    # VALIDATION AND SUMMARY
    # ============================================================================

    def validate_numeric_config(self) -> bool:
        """
        Validate all numeric configuration values.

        Returns:
            bool: True if all numeric values are valid, False otherwise
        """
        raw_attempts = self._get_cached_value('PLACEMENT_CANDIDATE_ATTEMPTS', str(DEFAULT_CANDIDATE_ATTEMPTS))
        try:
            attempts = int(raw_attempts)
        except (ValueError, TypeError):
            return False
        if not MIN_CANDIDATE_ATTEMPTS <= attempts <= MAX_CANDIDATE_ATTEMPTS:
            return False

        raw_seed = self._get_cached_value('PLACEMENT_RANDOM_SEED', '')
        if raw_seed and str(raw_seed).strip():
            try:
                int(raw_seed)
            except (ValueError, TypeError):
                return False
        return True

    def print_config_summary(self):
        """Log the effective configuration."""
        logger.info("Configuration Summary:")
        logger.info(f"   Logging: {self.LOG_LEVEL} (Verbose: {self.VERBOSE_LOGGING}, Dir: {self.LOG_DIR or '-'})")
        logger.info(f"   Placement: {self.PLACEMENT_CANDIDATE_ATTEMPTS} attempts, seed={self.PLACEMENT_RANDOM_SEED}")
        logger.info(f"   Unique id checks: {self.VALIDATE_UNIQUE_IDS}")


# Create global configuration instance
config = Config()
