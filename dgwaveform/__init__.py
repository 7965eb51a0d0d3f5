# -*- coding: utf-8 -*-
"""
dgwaveform - a Python package to synthesise Gaussian derivative source waveforms as
seismic traces.

:copyright:
    2026, dgwaveform developers.
:license:
    GNU General Public License, Version 3
    (https://www.gnu.org/licenses/gpl-3.0.html)

"""

import logging
import os
from importlib.metadata import PackageNotFoundError, version

import matplotlib

from dgwaveform.io import read_config, waveform_to_trace, write_waveform  # NOQA
from dgwaveform.signal import (  # NOQA
    SamplingPlan,
    Waveform,
    WaveformRequest,
    generate,
    resolve,
)
from dgwaveform.util import ConfigurationError  # NOQA


# Set matplotlib logging level and backend
logging.getLogger("matplotlib").setLevel(logging.INFO)
if "DISPLAY" not in os.environ:
    matplotlib.use("Agg")

try:
    __version__ = version("dgwaveform")
except PackageNotFoundError:
    __version__ = "unknown"
