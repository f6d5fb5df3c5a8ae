"""Tar+gzip archiving of a model's content directory."""

from .extract import check_archive, extract_archive, list_members, read_archive_members
from .tar_builder import archive_name, build_archive, write_archive
from .walk import iter_tree

__all__ = [
    "archive_name",
    "build_archive",
    "write_archive",
    "iter_tree",
    "check_archive",
    "extract_archive",
    "list_members",
    "read_archive_members",
]
