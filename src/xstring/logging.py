"""
Logging helpers.
"""


# std
import functools as ftl
import contextlib as ctx

# third-party
from loguru import logger


# ---------------------------------------------------------------------------- #
@ctx.contextmanager
def disabled(*libraries):
    """
    Temporarily disable logging for `libraries`. On exit the libraries are
    enabled, whatever their state was before entering the block.
    """

    for lib in libraries:
        logger.disable(lib)

    try:
        yield

    finally:
        # re-enable
        for lib in libraries:
            logger.enable(lib)


@ctx.contextmanager
def enabled(*libraries):
    """
    Temporarily enable logging for `libraries`. xstring is silent by default,
    use this to see its debug messages for a block of code. On exit the
    libraries are disabled, whatever their state was before entering the
    block, so do not nest this inside an explicit `logger.enable`.
    """

    for lib in libraries:
        logger.enable(lib)

    try:
        yield

    finally:
        for lib in libraries:
            logger.disable(lib)


# ---------------------------------------------------------------------------- #
def get_defining_class(kls, name):
    # first class in the mro that defines attribute `name`
    for base in kls.__mro__:
        if name in vars(base):
            return base


class LoggingMixin:
    class Logger:

        # use descriptor so we can access the logger via logger and cls().logger

        @staticmethod
        def add_parent(record, parent):
            """Prepend the class name to the function name in the log record."""
            fname = record['function']

            if fname.startswith(('<cell line:', '<module>')):
                # catch interactive use
                return

            if kls := get_defining_class(parent, fname):
                parent = kls

            record['function'] = f'{parent.__name__}.{fname}'

        def __get__(self, obj, kls=None):
            return logger.patch(
                ftl.partial(self.add_parent, parent=(kls or type(obj)))
            )

    logger = Logger()
