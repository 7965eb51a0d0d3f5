# -*- coding: utf-8 -*-
"""
Module to produce a plot of a synthesised Gaussian derivative waveform.

:copyright:
    2026, dgwaveform developers.
:license:
    GNU General Public License, Version 3
    (https://www.gnu.org/licenses/gpl-3.0.html)

"""

import logging

import matplotlib.pyplot as plt


def waveform_summary(waveform, plan, derivative_order, peak_frequency, savefig=None):
    """
    Plot the waveform amplitude against time, marking the causal delay.

    Parameters
    ----------
    waveform : `dgwaveform.signal.kernel.Waveform` object
        Sampled Gaussian derivative waveform.
    plan : `dgwaveform.signal.sampling.SamplingPlan` object
        Sampling plan used to generate the waveform.
    derivative_order : int
        Order of the derivative, used in the title.
    peak_frequency : float
        Peak frequency (Hz), used in the title.
    savefig : str or `pathlib.Path`, optional
        If given, save the figure to this file and close it.

    Returns
    -------
    fig : `matplotlib.pyplot.Figure` object
        Figure showing the waveform.
    ax : `matplotlib.axes.Axes` object
        Figure axes.

    """

    fig, ax = plt.subplots(figsize=(10, 5))

    ax.plot(waveform.times, waveform.data, c="k", lw=1.2, marker=".", ms=4)
    ax.axvline(plan.causal_delay, c="tab:red", ls="--", lw=0.8, label="t0")
    ax.axhline(0.0, c="0.6", lw=0.5)

    ax.set_xlim(0, waveform.times[-1] if len(waveform) > 1 else plan.sample_interval)
    ax.set_xlabel("Time (s)", fontsize=12)
    ax.set_ylabel("Normalised amplitude", fontsize=12)
    ax.set_title(
        f"Gaussian derivative waveform: n={derivative_order}, "
        f"fpeak={peak_frequency:g} Hz, dt={plan.sample_interval * 1e3:.4g} ms",
        fontsize=12,
    )
    ax.legend(loc="upper right")
    fig.tight_layout()

    if savefig is not None:
        fig.savefig(savefig, dpi=200)
        plt.close(fig)
        logging.info(f"\tWaveform plot saved to {savefig}.")

    return fig, ax
