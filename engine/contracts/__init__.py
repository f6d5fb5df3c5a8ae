"""Engine contracts.

Plain data carried between the loader, the archive builder and callers:

    from engine.contracts import ArchiveConfig, SavedModel
"""

from .archive_config import ArchiveConfig, GZIP_LEVEL_ENV
from .saved_model import SavedModel

__all__ = [
    "ArchiveConfig",
    "GZIP_LEVEL_ENV",
    "SavedModel",
]
