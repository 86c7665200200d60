"""Source adapters for the indexing pipeline.

This package contains the source interface and the filesystem loader that
reads an asset bundle from the paths of an ``IndexSettings`` record.
"""

from .base import BundleData, Source
from .filesystem import FilesystemSource, read_json_document

__all__ = ["BundleData", "FilesystemSource", "Source", "read_json_document"]
