from __future__ import annotations

"""Parser contracts for ``ormbfile.yaml``."""

from dataclasses import dataclass
from typing import Any, Protocol

import yaml
from pydantic import ValidationError

from engine.core.errors import MetadataParseError
from shared_schemas.metadata import Metadata


class MetadataParser(Protocol):
    """Turns raw metadata bytes into a structured document."""

    def parse(self, data: bytes) -> Any: ...


@dataclass
class YamlMetadataParser:
    """Default parser: YAML mapping validated into :class:`Metadata`."""

    encoding: str = "utf-8"

    def parse(self, data: bytes) -> Metadata:
        try:
            doc = yaml.safe_load(data.decode(self.encoding))
        except UnicodeDecodeError as e:
            raise MetadataParseError(f"metadata is not valid {self.encoding}: {e}") from e
        except yaml.YAMLError as e:
            raise MetadataParseError(f"invalid YAML: {e}") from e

        if doc is None:
            doc = {}
        if not isinstance(doc, dict):
            raise MetadataParseError(
                f"expected a mapping at the top level; got {type(doc).__name__}"
            )

        try:
            return Metadata.model_validate(doc)
        except ValidationError as e:
            raise MetadataParseError(f"invalid metadata: {e}") from e
