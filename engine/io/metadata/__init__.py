from .loader import load_metadata
from .parser import MetadataParser, YamlMetadataParser

__all__ = ["load_metadata", "MetadataParser", "YamlMetadataParser"]
