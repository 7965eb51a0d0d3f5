# -*- coding: utf-8 -*-
"""
The :mod:`dgwaveform.io` module handles the input/output operations performed by
dgwaveform. This includes:

    * Reading waveform parameters from .toml configuration files.
    * Copying a synthesised waveform into an ObsPy trace, with a Seismic Unix \
      trace header, and writing it in any format ObsPy supports.

:copyright:
    2026, dgwaveform developers.
:license:
    GNU General Public License, Version 3
    (https://www.gnu.org/licenses/gpl-3.0.html)

"""

from .config import read_config  # NOQA
from .trace import waveform_to_trace, write_waveform  # NOQA
