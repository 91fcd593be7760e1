import logging
import sys

# HTTP client chatter only shows with --verbose.
_HTTP_LOGGERS = ("httpx", "httpcore")

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def log_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Root level for the CLI; ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Send log records to stderr so rich tables on stdout stay clean.

    The default level shows per-resource load summaries ("Parsed 12 records from ...");
    ``quiet`` keeps only warnings such as malformed weekly documents.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(log_level(verbose=verbose, quiet=quiet))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)

    for name in _HTTP_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)
