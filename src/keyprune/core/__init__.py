from .key_pruner import KeyPruner, KeyPruneError, MaxDepthExceeded, Shape, prune

__all__ = ["KeyPruner", "KeyPruneError", "MaxDepthExceeded", "Shape", "prune"]
