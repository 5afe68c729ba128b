"""
Mandala Service Exceptions
==========================

Raised by the service layer when an expected result signal (no placement,
postit not found, ...) has to be surfaced to the caller.

@author lycosa9527
@made_by MindSpring Team
"""

from typing import Any, Dict, Optional


class MandalaServiceError(Exception):
    """Base exception for mandala core errors."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidConfigurationError(MandalaServiceError):
    """Raised when requested dimensions or scales are not part of the mandala."""
    pass


class ConfigurationMismatchError(MandalaServiceError):
    """Raised when mandalas to overlap do not share dimensions and scales."""
    pass


class NoValidPostitsError(MandalaServiceError):
    """Raised when not a single postit of a batch could be placed."""
    pass


class PostitNotFoundError(MandalaServiceError):
    """Raised when a target or parent postit id is absent from the forest."""
    def __init__(self, postit_id: str, message: Optional[str] = None):
        super().__init__(message or f"Postit not found: {postit_id}", {"postit_id": postit_id})
        self.postit_id = postit_id


class DuplicatePostitIdError(MandalaServiceError):
    """Raised when the same postit id is reachable more than once in a forest."""
    def __init__(self, duplicate_ids):
        duplicate_ids = sorted(duplicate_ids)
        super().__init__(
            f"Duplicate postit ids: {', '.join(duplicate_ids)}",
            {"duplicate_ids": duplicate_ids}
        )
        self.duplicate_ids = duplicate_ids
