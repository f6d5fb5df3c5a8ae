from .exporter import DefaultExporter, Exporter, new_default_exporter
from .saver import DefaultSaver, Saver, new_default_saver

__all__ = [
    "Saver",
    "DefaultSaver",
    "new_default_saver",
    "Exporter",
    "DefaultExporter",
    "new_default_exporter",
]
