# scripts/save_model_local.py
"""Package a local model directory and write the archive next to it.

Run from the repository root:

    python scripts/save_model_local.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from engine.api import ModelPackError, list_members, new_default_saver  # noqa: E402
from engine.runtime.logging_setup import configure_logging  # noqa: E402

# ==== EDIT THESE VALUES AS YOU LIKE ==========================================
MODEL_DIR = Path("./examples/resnet50")    # must hold ormbfile.yaml and model/
OUTPUT = Path("./resnet50.tar.gz")         # archive of MODEL_DIR/model
LOG_LEVEL = logging.INFO
# =============================================================================


def main() -> int:
    configure_logging(LOG_LEVEL)
    try:
        model = new_default_saver().save(MODEL_DIR)
    except ModelPackError as e:
        print(f"SAVE FAILED: {e}")
        return 1

    OUTPUT.write_bytes(model.content)
    print(f"metadata: {model.metadata.model_dump(exclude_none=True)}")
    for name in list_members(model.content):
        print(f"  - {name}")
    print(f"wrote {OUTPUT} ({model.size} bytes, {model.digest})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
