"""
Dependency initialization for the MinHash ROM matcher.

Handles numpy, xxhash and tqdm imports with proper error handling.
"""

from __future__ import annotations

import logging
from typing import Optional, Any

# Module-level logger
_logger = logging.getLogger(__name__)

# Check for required dependencies
try:
    import numpy as np
    import xxhash
except ImportError:
    raise ImportError(
        "Required packages not found!\n"
        "Install with: pip install numpy xxhash"
    )

# Optional: tqdm for progress bars
# Store as Optional[Any] to satisfy type checkers when tqdm is not installed
HAS_TQDM = False
_tqdm_class: Optional[Any] = None

try:
    from tqdm import tqdm as _tqdm_import
    HAS_TQDM = True
    _tqdm_class = _tqdm_import
except ImportError:
    _logger.debug("tqdm not installed - build progress bar disabled")


__all__ = [
    'np',
    'xxhash',
    'HAS_TQDM',
    '_tqdm_class',
    '_logger',
]
