"""Well-known names inside a model directory.

A model directory looks like::

    <model-dir>/
      ormbfile.yaml     # metadata, parsed into shared_schemas.metadata.Metadata
      model/            # content, archived as <basename>/<relative-path>
"""

from __future__ import annotations

ORMBFILE_NAME = "ormbfile.yaml"
MODEL_DIRECTORY = "model"

# Media type used when the archive leaves the process (HTTP download, etc.).
ARCHIVE_MEDIA_TYPE = "application/gzip"
