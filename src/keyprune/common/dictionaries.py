"""Utility functions for working with dictionaries."""
from collections.abc import Collection, Mapping


def copy_dict_without(dictionary: Mapping, keys: Collection) -> dict:
    """Returns a shallow copy of the given mapping as a dict, excluding specified keys.

    Args:
        dictionary:
            The source mapping to copy. Its iteration order is kept.

        keys:
            The keys to leave out. A set is preferred, since membership is checked for every key.

    Returns:
        A new dictionary with the specified keys removed.
    """
    return {k: v for k, v in dictionary.items() if k not in keys}
