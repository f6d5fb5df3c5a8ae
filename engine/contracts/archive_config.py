from __future__ import annotations

import os
import tarfile
from dataclasses import dataclass

GZIP_LEVEL_ENV = "MODELPACK_GZIP_LEVEL"


@dataclass(frozen=True)
class ArchiveConfig:
    """Encoder settings for the tar+gzip pipeline.

    ``gzip_mtime`` is written into the gzip header; keeping it fixed makes an
    unchanged tree produce identical bytes.
    """

    compresslevel: int = 6
    tar_format: int = tarfile.PAX_FORMAT
    gzip_mtime: int = 0
    chunk_size: int = 64 * 1024

    def __post_init__(self) -> None:
        if not 0 <= self.compresslevel <= 9:
            raise ValueError(f"compresslevel must be in [0, 9]; got {self.compresslevel}")
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive; got {self.chunk_size}")

    @classmethod
    def from_env(cls) -> "ArchiveConfig":
        raw = os.getenv(GZIP_LEVEL_ENV)
        if raw is None or not raw.strip():
            return cls()
        try:
            level = int(raw)
        except ValueError as e:
            raise ValueError(f"{GZIP_LEVEL_ENV} must be an integer; got {raw!r}") from e
        return cls(compresslevel=level)
