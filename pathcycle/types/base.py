"""Base type aliases and constants shared across pathcycle."""

from __future__ import annotations

import sys

#: Opaque handle of a node inside a ``PathStore`` arena.
NodeIndex = int

#: Reserved index meaning "no successor". Never a valid arena index.
END: NodeIndex = sys.maxsize
