"""
Environment File Utilities
==========================

Utility functions for handling .env file encoding before python-dotenv reads it.
"""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

# Encodings tried, in order, when a .env file is not valid UTF-8
FALLBACK_ENCODINGS = ['utf-16', 'utf-8-sig', 'latin1', 'cp1252']


def ensure_utf8_env_file(env_path: str = ".env") -> bool:
    """
    Ensure the .env file is UTF-8 encoded before loading.

    A non-UTF-8 file is re-encoded in place; a one-time backup is kept next to it.

    Args:
        env_path: Path to .env file (default: ".env")

    Returns:
        bool: True if the file was converted, False if nothing had to be done
    """
    env_file = Path(env_path)
    if not env_file.exists():
        return False

    try:
        env_file.read_text(encoding='utf-8')
        return False
    except UnicodeDecodeError:
        logger.warning(f"[EnvUtils] {env_file} is not UTF-8 encoded, attempting to convert")

    content = None
    detected_encoding = None
    for encoding in FALLBACK_ENCODINGS:
        try:
            content = env_file.read_text(encoding=encoding)
            detected_encoding = encoding
            break
        except (UnicodeDecodeError, UnicodeError):
            continue

    if content is None:
        raise ValueError(f"Cannot read {env_file}: invalid encoding. Please save the file as UTF-8.")

    backup_path = env_file.with_name(env_file.name + '.backup.before_utf8_conversion')
    if not backup_path.exists():
        shutil.copy2(env_file, backup_path)
        logger.info(f"[EnvUtils] Created backup: {backup_path}")

    env_file.write_text(content, encoding='utf-8')
    logger.info(f"[EnvUtils] Converted {env_file} from {detected_encoding} to UTF-8")
    return True
