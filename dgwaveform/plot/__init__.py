# -*- coding: utf-8 -*-
"""
The :mod:`dgwaveform.plot` module provides a figure of the synthesised waveform, for
quick inspection of its shape and sampling.

:copyright:
    2026, dgwaveform developers.
:license:
    GNU General Public License, Version 3
    (https://www.gnu.org/licenses/gpl-3.0.html)

"""

from .waveform import waveform_summary  # NOQA
