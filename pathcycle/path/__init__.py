"""Path storage.

Provides the index-based `PathStore` arena and the `create_path` builder for
paths made of a leading chain and an optional trailing cycle.
"""

from pathcycle.path.builder import create_path
from pathcycle.path.store import PathStore

__all__ = ["PathStore", "create_path"]
