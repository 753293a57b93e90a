import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging with one console handler.

    Call once, at application startup. Calling again replaces the handler
    rather than stacking a duplicate.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    # SQL is logged through echo=True when wanted, not through the root level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
