"""Recursive removal of keys from nested data structures."""
from keyprune.core.key_pruner import KeyPruner, KeyPruneError, MaxDepthExceeded, Shape, prune
from keyprune.version import __version__

__all__ = [  # objects importable directly from package.
    "KeyPruner", "KeyPruneError", "MaxDepthExceeded", "Shape", "prune", "__version__",
]
