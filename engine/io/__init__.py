"""I/O utilities (Business Layer).

This package is intended to be backend-independent.

Subpackages
-----------
- :mod:`engine.io.archive`: deterministic tar+gzip of a model's content directory
- :mod:`engine.io.metadata`: reading and parsing ``ormbfile.yaml``
"""

from .archive import *  # noqa: F401,F403
from .metadata import *  # noqa: F401,F403
