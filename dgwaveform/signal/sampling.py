# -*- coding: utf-8 -*-
"""
Module to resolve the sampling plan of a Gaussian derivative waveform from the
user-supplied (or defaulted) waveform parameters.

:copyright:
    2026, dgwaveform developers.
:license:
    GNU General Public License, Version 3
    (https://www.gnu.org/licenses/gpl-3.0.html)

"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import dgwaveform.util as util


# Smallest sampling interval (s) that survives the microsecond trace header field
MIN_SAMPLE_INTERVAL = 1e-6


@dataclass(frozen=True)
class WaveformRequest:
    """
    Parameters describing the Gaussian derivative waveform to synthesise.

    Attributes
    ----------
    derivative_order : int
        Order of the time derivative of the Gaussian (n >= 1). Default: 2 (Ricker).
    peak_frequency : float
        Frequency (Hz) at which the amplitude spectrum of the waveform peaks.
        Default: 35 Hz.
    frequency_oversample : int, optional
        Factor applied to the peak frequency to give the maximum frequency, which in
        turn sets the sampling interval. Larger values give smoother waveforms.
        Default: derivative_order**2.
    explicit_length : int, optional
        Number of samples in the output trace. Default: computed from the causal delay.
    extra_shift : float
        Additional time shift (s) added to the causal delay. A positive value shifts
        the waveform to the right. Default: 0.
    sign : {1, -1}
        Polarity of the waveform. Default: 1.
    verbose : bool
        Toggle output of detailed diagnostic messages.

    """

    derivative_order: int = 2
    peak_frequency: float = 35.0
    frequency_oversample: int | None = None
    explicit_length: int | None = None
    extra_shift: float = 0.0
    sign: int = 1
    verbose: bool = False

    @property
    def nfpeak(self) -> int:
        """Frequency oversample factor, defaulting to the square of the order."""
        if self.frequency_oversample is None:
            return self.derivative_order * self.derivative_order
        return self.frequency_oversample


@dataclass(frozen=True)
class SamplingPlan:
    """
    Sampling parameters derived from a `WaveformRequest`.

    Attributes
    ----------
    sample_interval : float
        Time between samples (s).
    causal_delay : float
        Time (s) of the centre of the Gaussian, t0.
    max_frequency : float
        Maximum frequency (Hz) represented by the sampling, i.e. the Nyquist frequency.
    sample_count : int
        Number of samples in the waveform.

    """

    sample_interval: float
    causal_delay: float
    max_frequency: float
    sample_count: int

    def __str__(self) -> str:
        return (
            f"\tSample interval  = {self.sample_interval:.12f} s\n"
            f"\tCausal delay, t0 = {self.causal_delay:f} s\n"
            f"\tMax frequency    = {self.max_frequency:.0f} Hz\n"
            f"\tNumber of samples = {self.sample_count}"
        )


def resolve(request: WaveformRequest) -> SamplingPlan:
    """
    Derive the sampling plan for a Gaussian derivative waveform.

    The maximum frequency is nfpeak * fpeak, and the sampling interval is chosen so
    that it is the Nyquist frequency. To make the pulse (pseudo-)causal the centre of
    the Gaussian is delayed by sqrt(n) / fpeak, plus any additional shift. Unless an
    explicit length is given, the trace is long enough to hold the pulse twice over.

    Parameters
    ----------
    request:
        Waveform parameters.

    Returns
    -------
     :
        Sample interval, causal delay, maximum frequency and number of samples.

    Raises
    ------
    InvalidDerivativeOrderError
        If the derivative order is less than 1.
    PrecisionExceededError
        If the resulting sampling interval is smaller than 1 microsecond.
    ConfigurationError
        If any other parameter is out of range.

    """

    n = request.derivative_order
    if n < 1:
        raise util.InvalidDerivativeOrderError(n)
    if not request.peak_frequency > 0:
        raise util.ConfigurationError(
            f"peak frequency must be > 0 (got fpeak={request.peak_frequency})"
        )
    nfpeak = request.nfpeak
    if nfpeak < 1:
        raise util.ConfigurationError(
            f"frequency oversample factor must be ≥ 1 (got nfpeak={nfpeak})"
        )
    if request.sign not in (1, -1):
        raise util.ConfigurationError(f"sign must be 1 or -1 (got sign={request.sign})")
    if request.explicit_length is not None and request.explicit_length < 1:
        raise util.ConfigurationError(
            f"number of samples must be ≥ 1 (got nt={request.explicit_length})"
        )

    fmax = nfpeak * request.peak_frequency
    dt = 0.5 / fmax
    t0 = request.extra_shift + math.sqrt(n) / request.peak_frequency
    if request.explicit_length is None:
        nt = int(round(2 * t0 / dt + 1))
    else:
        nt = request.explicit_length

    logging.info(
        f"n={n} fpeak={request.peak_frequency:.0f} fmax={fmax:.0f} t0={t0:f} "
        f"nt={nt} dt={dt:.12f}"
    )

    if dt < MIN_SAMPLE_INTERVAL:
        raise util.PrecisionExceededError(dt)
    if nt < 1:
        raise util.ConfigurationError(
            f"computed number of samples is {nt}; check the time shift "
            f"(shift={request.extra_shift})"
        )

    return SamplingPlan(
        sample_interval=dt, causal_delay=t0, max_frequency=fmax, sample_count=nt
    )
