import logging

from rich.logging import RichHandler


_TIME_ENTRY = "%(asctime)s - "
_DEFAULT_LOG_FORMAT = f"{_TIME_ENTRY}%(name)s - %(message)s"


def setup_logger(
    verbose: bool = False,
    format_: str = _DEFAULT_LOG_FORMAT,
    warning_level: tuple = (),
    force: bool = False,
    rich: bool = True,
) -> None:
    """Configures the root logger.

    Args:
        verbose: If true, sets the level to DEBUG instead of INFO.
        format_: logger format.
        warning_level: list of packages/modules for which to set the log level as WARNING.
        force: If true, forces the root logger config replacing the one done on other places.
        rich: If true, logs through rich. Its handler already renders the time.
    """
    level = logging.DEBUG if verbose else logging.INFO

    if rich:
        handler = RichHandler(show_path=verbose)
        format_ = format_.replace(_TIME_ENTRY, "")
    else:
        handler = logging.StreamHandler()

    logging.basicConfig(level=level, format=format_, handlers=[handler], force=force)

    for module in warning_level:
        logging.getLogger(module).setLevel(logging.WARNING)
