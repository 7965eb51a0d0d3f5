# -*- coding: utf-8 -*-
"""
Module that supplies various utility functions and classes.

:copyright:
    2026, dgwaveform developers.
:license:
    GNU General Public License, Version 3
    (https://www.gnu.org/licenses/gpl-3.0.html)

"""

import logging
import sys
import time
from functools import wraps


log_spacer = "=" * 80


def logger(loglevel="info", stream=None):
    """
    Simple logger that writes plain messages to stderr.

    stdout is reserved for the binary trace output, so log messages never go there.

    Parameters
    ----------
    loglevel : str, optional
        Toggle for logging level - default is to print only "info" messages. To print
        more detailed "debug" messages, set to "debug".
    stream : file-like object, optional
        Stream to log to. Defaults to `sys.stderr`.

    """

    level = logging.DEBUG if loglevel == "debug" else logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        handlers = [logging.StreamHandler(sys.stderr if stream is None else stream)]
        logging.basicConfig(level=level, format="%(message)s", handlers=handlers)
    root.setLevel(level)


def timeit(*args_, **kwargs_):
    """Function wrapper that measures the time elapsed during its execution."""

    def inner_function(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            ts = time.time()
            result = func(*args, **kwargs)
            msg = f"\tElapsed time: {time.time() - ts:6f} seconds."
            try:
                if args_[0] == "info":
                    logging.info(msg)
            except IndexError:
                logging.debug(msg)
            return result

        return wrapper

    return inner_function


class ConfigurationError(Exception):
    """
    Custom exception to handle waveform parameters that cannot produce a valid
    sampling plan.
    """

    def __init__(self, msg):
        self.msg = msg
        super().__init__(msg)


class InvalidDerivativeOrderError(ConfigurationError):
    """Custom exception to handle a derivative order below 1."""

    def __init__(self, n):
        super().__init__(f"derivative order must be ≥ 1 (got n={n})")


class PrecisionExceededError(ConfigurationError):
    """
    Custom exception to handle a sampling interval that falls below the precision of
    the output trace header (microseconds).
    """

    def __init__(self, dt):
        super().__init__(
            "frequency parameters exceed representable precision; reduce oversample "
            f"factor or peak frequency (dt={dt:.3g} s < 1e-6 s)"
        )


class InvalidOutputFormatError(Exception):
    """
    Custom exception to handle a waveform file format for which ObsPy has no writer.
    """

    def __init__(self, file_format, supported):
        super().__init__(
            f"The output format you have selected: '{file_format}' is not a valid "
            f"option! Choose one of: {', '.join(sorted(supported))}."
        )
