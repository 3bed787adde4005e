"""Logging for napiway.

Library modules log under their own ``__name__`` (``napiway.ir.flatten``,
``napiway.generate``, ...). Nothing is printed until the CLI calls
``configure_logging``, which routes the ``napiway`` tree through ``click.echo``
so log lines share stderr with the CLI's own error output.
"""

import logging

import click

ROOT_LOGGER = "napiway"


def get_logger(name: str) -> logging.Logger:
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


class ClickEchoHandler(logging.Handler):
    """Writes records to stderr with ``click.echo``; warnings and errors are prefixed."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            if record.levelno >= logging.WARNING:
                message = f"{record.levelname.lower()}: {message}"
            click.echo(message, err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Attach a ClickEchoHandler to the ``napiway`` logger and set its level.

    ``verbose`` shows per-endpoint detail (DEBUG); ``quiet`` keeps only
    warnings. Calling it again replaces the previous handler.
    """
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in [h for h in logger.handlers if isinstance(h, ClickEchoHandler)]:
        logger.removeHandler(handler)

    handler = ClickEchoHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
