# -*- coding: utf-8 -*-
"""
The :mod:`dgwaveform.signal` module handles the core of the dgwaveform methods. This
includes:

    * Resolving the sampling plan (sampling interval, causal delay and number of \
      samples) from the waveform parameters.
    * Computing the n-th order derivative of a Gaussian via Hermite polynomials.

:copyright:
    2026, dgwaveform developers.
:license:
    GNU General Public License, Version 3
    (https://www.gnu.org/licenses/gpl-3.0.html)

"""

from .kernel import (
    Waveform,  # NOQA
    gaussian_derivative,  # NOQA
    gaussian_sigma,  # NOQA
    generate,  # NOQA
    hermite_polynomial,  # NOQA
)
from .sampling import SamplingPlan, WaveformRequest, resolve  # NOQA
