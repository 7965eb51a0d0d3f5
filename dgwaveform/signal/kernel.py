# -*- coding: utf-8 -*-
"""
Module to compute the n-th order time derivative of a Gaussian, sampled according to a
`SamplingPlan`.

The derivatives are evaluated in closed form using the probabilists' Hermite
polynomials:

    d^n/dt^n exp(-t^2 / 2 sigma^2) = (-1)^n sigma^-n He_n(t / sigma) exp(-t^2 / 2 sigma^2)

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

import numpy as np

from dgwaveform.signal.sampling import SamplingPlan


@dataclass(frozen=True, eq=False)
class Waveform:
    """
    Sampled Gaussian derivative waveform.

    Attributes
    ----------
    data : `numpy.ndarray` of float
        Read-only waveform amplitudes, normalised to a peak magnitude of 1.
    sample_interval : float
        Time between samples (s).

    """

    data: np.ndarray
    sample_interval: float

    def __len__(self) -> int:
        return len(self.data)

    @property
    def times(self) -> np.ndarray:
        """Sample times (s), starting from zero."""
        return np.arange(len(self.data)) * self.sample_interval


def hermite_polynomial(x, n: int):
    """
    Evaluate the n-th (probabilists') Hermite polynomial, He_n(x), by recurrence:

        He_0 = 1, He_1 = x, He_k = x He_{k-1} - (k - 1) He_{k-2}

    Parameters
    ----------
    x : array-like or float
        Points at which to evaluate the polynomial.
    n : int
        Order of the polynomial (n >= 0).

    Returns
    -------
    h : `numpy.ndarray` or float
        He_n evaluated at x.

    """

    if n < 0:
        raise ValueError(f"Hermite polynomial order must be >= 0 (got {n}).")

    x = np.asarray(x, dtype=float)
    h_prev, h = np.ones_like(x), x.copy()
    if n == 0:
        return h_prev[()]
    for k in range(2, n + 1):
        h_prev, h = h, x * h - (k - 1) * h_prev

    return h[()]


def gaussian_sigma(peak_frequency: float, derivative_order: int) -> float:
    """
    Standard deviation of the Gaussian whose n-th derivative has an amplitude spectrum
    that peaks at `peak_frequency`.

    The n-th derivative multiplies the Gaussian spectrum, exp(-2 pi^2 sigma^2 f^2), by
    (2 pi f)^n; the product is maximised at f^2 = n / (4 pi^2 sigma^2).

    """

    return math.sqrt(derivative_order) / (2 * math.pi * peak_frequency)


def gaussian_derivative(t, sigma: float, n: int):
    """
    Analytic n-th derivative of the Gaussian exp(-t^2 / (2 sigma^2)).

    Parameters
    ----------
    t : array-like or float
        Times relative to the centre of the Gaussian.
    sigma : float
        Standard deviation of the Gaussian.
    n : int
        Order of the derivative.

    Returns
    -------
    d : `numpy.ndarray` or float
        Unnormalised n-th derivative evaluated at t.

    """

    x = np.asarray(t, dtype=float) / sigma

    return (-1) ** n * sigma ** (-n) * hermite_polynomial(x, n) * np.exp(-0.5 * x * x)


def generate(
    plan: SamplingPlan, derivative_order: int, peak_frequency: float, sign: int = 1
) -> Waveform:
    """
    Sample the n-th derivative of a Gaussian centred on the causal delay of the plan.

    The waveform is normalised to a peak magnitude of 1 and multiplied by `sign`. The
    function has no side effects beyond logging; identical inputs give identical
    output.

    Parameters
    ----------
    plan:
        Sampling interval, causal delay and number of samples.
    derivative_order:
        Order of the derivative, n.
    peak_frequency:
        Frequency (Hz) at which the amplitude spectrum of the waveform peaks.
    sign:
        Polarity, 1 or -1.

    Returns
    -------
     :
        Waveform of exactly `plan.sample_count` samples.

    """

    n = derivative_order
    sigma = gaussian_sigma(peak_frequency, n)

    w = np.zeros(plan.sample_count, dtype=np.float64)
    logging.debug("\tMemory for waveform allocated and initialised.")

    t = np.arange(plan.sample_count) * plan.sample_interval - plan.causal_delay
    x = t / sigma
    # sigma^-n is a positive constant that the normalisation removes
    w[:] = (-1) ** n * hermite_polynomial(x, n) * np.exp(-0.5 * x * x)

    peak = np.max(np.abs(w))
    if peak > 0:
        w /= peak
    w *= sign
    w.flags.writeable = False

    return Waveform(data=w, sample_interval=plan.sample_interval)
