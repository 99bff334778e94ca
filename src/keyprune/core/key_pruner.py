"""
This module encapsulates the core algorithm for removing keys from nested data structures.

The main class, `KeyPruner`, walks an arbitrary value made of mappings, sequences
and scalars and builds a new value where every mapping, at any depth, is stripped
of a configurable set of keys. It is mainly intended to sanitize data before
logging or serializing it, e.g., to drop passwords or tokens.

Features:
- Removes keys at every nesting level, inside mappings and sequences.
- Never mutates the input: new containers are built at every level.
- Scalars (and any value that is not a list, tuple or mapping) are passed through untouched.
- Optional maximum depth, to fail early on unexpectedly deep structures.
- Reports how many times each key was removed.

Example usage:

    from keyprune import prune

    data = {
        "user": {
            "password": "secret",
            "profile": {
                "token": "abc123",
                "name": "John Doe",
            },
        },
    }

    prune(data, ["password", "token"])
    # {"user": {"profile": {"name": "John Doe"}}}

Only lists and tuples are traversed as sequences. Other containers, e.g., a deque, a set
or a custom Sequence, are opaque values: mappings inside them are NOT pruned and
sensitive keys they hold survive. Convert them to lists first.

Raises:
    KeyPruneError: When the keys to remove or the max depth are not valid.
    MaxDepthExceeded: When the structure is deeper than allowed or contains a reference cycle.
"""
import enum
import logging
from collections import Counter
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from keyprune.common.dictionaries import copy_dict_without

logger = logging.getLogger(__name__)


ERROR_KEYS_STRING = "Keys to remove must be a collection of strings, not a single string: {!r}."
ERROR_KEYS_TYPE = "Keys to remove must be strings. Got: {}."
ERROR_MAX_DEPTH = "Max depth must be a non-negative integer. Got: {!r}."
ERROR_DEPTH_EXCEEDED = "Structure is nested deeper than max depth ({})."
ERROR_RECURSION = "Structure is too deep or contains a reference cycle."


class KeyPruneError(Exception):
    pass


class MaxDepthExceeded(KeyPruneError):
    pass


class Shape(enum.Enum):
    """The three kinds of values the pruner knows how to handle."""
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SCALAR = "scalar"


class KeyPruner:
    """Removes a set of keys from every mapping found in a nested value.

    Args:
        keys:
            Names of the keys to remove. Compared by exact equality,
            so "user.password" is a single key name and not a path.

        max_depth:
            Maximum nesting depth of containers. The top-level container is at depth 0.
            If None, the only limit is the interpreter recursion limit.
    """
    SEQUENCE_TYPES = (list, tuple)

    def __init__(self, keys: Iterable[str], max_depth: Optional[int] = None):
        if isinstance(keys, (str, bytes)):
            raise KeyPruneError(ERROR_KEYS_STRING.format(keys))

        self.keys = frozenset(keys)

        invalid = sorted(repr(k) for k in self.keys if not isinstance(k, str))
        if invalid:
            raise KeyPruneError(ERROR_KEYS_TYPE.format(", ".join(invalid)))

        if max_depth is not None and (isinstance(max_depth, bool) or max_depth < 0):
            raise KeyPruneError(ERROR_MAX_DEPTH.format(max_depth))

        self.max_depth = max_depth

    def __repr__(self):
        return "{}(keys={}, max_depth={})".format(
            self.__class__.__name__, sorted(self.keys), self.max_depth
        )

    @classmethod
    def shape(cls, value: Any) -> Shape:
        """Classifies a value as a sequence, a mapping or a scalar.

        Sequences are checked first. Strings and bytes are scalars.
        """
        if isinstance(value, cls.SEQUENCE_TYPES):
            return Shape.SEQUENCE

        if isinstance(value, Mapping):
            return Shape.MAPPING

        return Shape.SCALAR

    def prune(self, value: Any) -> Any:
        """Returns a copy of value without the configured keys.

        Args:
            value:
                The value to sanitize.

        Returns:
            A new value of the same shape. Lists stay lists, tuples stay tuples
            and mappings become dicts. Scalars are returned as they are.
        """
        pruned, removed = self.prune_and_count(value)

        if removed:
            logger.debug("Removed keys: {}.".format(dict(removed)))

        return pruned

    def prune_and_count(self, value: Any) -> tuple[Any, Counter]:
        """Same as `prune`, but also returns the number of removals for each key."""
        removed = Counter()

        try:
            pruned = self._prune(value, 0, removed)
        except RecursionError as e:
            raise MaxDepthExceeded(ERROR_RECURSION) from e

        return pruned, removed

    def _prune(self, value: Any, depth: int, removed: Counter) -> Any:
        shape = self.shape(value)

        if shape is Shape.SCALAR:
            return value

        if self.max_depth is not None and depth > self.max_depth:
            raise MaxDepthExceeded(ERROR_DEPTH_EXCEEDED.format(self.max_depth))

        if shape is Shape.MAPPING:
            # Keys are dropped before recursing, so they can never come back.
            removed.update(k for k in value if k in self.keys)

            return {
                k: self._prune(v, depth + 1, removed)
                for k, v in copy_dict_without(value, self.keys).items()
            }

        items = [self._prune(item, depth + 1, removed) for item in value]

        if isinstance(value, tuple):
            return tuple(items)

        return items


def prune(value: Any, keys: Iterable[str], max_depth: Optional[int] = None) -> Any:
    """Recursively removes keys from a value at any nesting level.

    Shortcut for `KeyPruner(keys, max_depth=max_depth).prune(value)`.
    """
    return KeyPruner(keys, max_depth=max_depth).prune(value)
