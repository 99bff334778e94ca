import argparse

ERROR_KEYS = "Must be a comma-separated string of non-empty key names."
ERROR_NON_NEGATIVE_INT = "Must be a non-negative integer. Got: {}."
ERROR_POSITIVE_INT = "Must be a positive integer. Got: {}."


def keys(keys_str: str) -> tuple[str, ...]:
    parts = tuple(k.strip() for k in keys_str.split(","))
    if not all(parts):
        raise argparse.ArgumentTypeError(ERROR_KEYS)

    return parts


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(ERROR_NON_NEGATIVE_INT.format(value))

    if number < 0:
        raise argparse.ArgumentTypeError(ERROR_NON_NEGATIVE_INT.format(value))

    return number


def positive_int(value: str) -> int:
    number = non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError(ERROR_POSITIVE_INT.format(value))

    return number
