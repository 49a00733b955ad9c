"""
Console and file input / output for text values.
"""

# std
import sys
from pathlib import Path

# third-party
from loguru import logger

# relative
from .errors import check_char


# ---------------------------------------------------------------------------- #

def print_line(text, file=None, flush=False):
    """
    Write `text` followed by a newline to `file`.

    Parameters
    ----------
    text : object
        Converted with `str`.
    file : file-like, str, Text or Path, optional
        Writable text stream, by default `sys.stdout`. A path is opened for
        writing, replacing any existing content.
    flush : bool, optional
        Whether to flush the stream after writing, by default False.
    """
    from .text import Text

    if isinstance(file, Text):
        file = str(file)

    if isinstance(file, (str, Path)):
        logger.debug('Writing line to file: {!s}', file)
        with Path(file).open('w') as stream:
            return _write(stream, text, flush)

    return _write(file or sys.stdout, text, flush)


def _write(stream, text, flush):
    stream.write(f'{text!s}\n')
    if flush:
        stream.flush()
    return stream


def read_line(source, delimiter='\n'):
    """
    Read characters from the text stream `source` up to, but excluding,
    `delimiter`, or up to the end of the stream, whichever comes first. The
    delimiter is consumed.

    Parameters
    ----------
    source : file-like
        Readable text stream.
    delimiter : str, optional
        Single character terminating the line, by default a newline.

    Returns
    -------
    str or None
        The line, or None if the stream was already exhausted.
    """
    check_char(delimiter, 'delimiter')

    if delimiter == '\n':
        line = source.readline()
        if not line:
            logger.debug('End of input reached on {!r}.', source)
            return None
        return line[:-1] if line.endswith('\n') else line

    chars = []
    while (char := source.read(1)) and char != delimiter:
        chars.append(char)

    if not (char or chars):
        logger.debug('End of input reached on {!r}.', source)
        return None

    return ''.join(chars)
