# -*- coding: utf-8 -*-
"""
Module to handle conversion of a `Waveform` into an ObsPy trace and writing it to a
waveform file.

:copyright:
    2026, dgwaveform developers.
:license:
    GNU General Public License, Version 3
    (https://www.gnu.org/licenses/gpl-3.0.html)

"""

from __future__ import annotations

import logging
import pathlib

import numpy as np
from obspy import Stream, Trace
from obspy.core import AttribDict
from obspy.core.util.base import ENTRY_POINTS

import dgwaveform.util as util
from dgwaveform.signal.kernel import Waveform


# SEG-Y trace identification code for seismic data, used as a generic trace type
TRACE_ID_SEISMIC = 1

# SU and SEG-Y hold ns and dt (in microseconds) in unsigned 16-bit header fields
SEGY_FORMATS = {"SU", "SEGY"}
MAX_HEADER_VALUE = 65535


def waveform_to_trace(waveform: Waveform) -> Trace:
    """
    Copy a waveform into a new ObsPy trace with a Seismic Unix / SEG-Y trace header.

    Parameters
    ----------
    waveform:
        Sampled Gaussian derivative waveform.

    Returns
    -------
     :
        Single-precision trace, with trace index 1 of 1.

    """

    nt = len(waveform)
    tr = Trace(
        data=np.array(waveform.data, dtype=np.float32),
        header={"delta": waveform.sample_interval},
    )

    trace_header = AttribDict(
        {
            "trace_sequence_number_within_line": 1,
            "trace_identification_code": TRACE_ID_SEISMIC,
            "number_of_samples_in_this_trace": nt,
            "sample_interval_in_ms_for_this_trace": int(
                round(waveform.sample_interval * 1e6)
            ),
            # SU keeps the number of traces (ntr) in bytes 205-208
            "transduction_constant_mantissa": 1,
        }
    )
    tr.stats.su = AttribDict({"endian": ">", "trace_header": trace_header})
    tr.stats.segy = AttribDict({"trace_header": AttribDict(trace_header)})

    return tr


def _check_header_limits(waveform: Waveform, file_format: str) -> None:
    """Check the number of samples and sampling interval fit the trace header."""

    nt = len(waveform)
    if nt > MAX_HEADER_VALUE:
        raise util.ConfigurationError(
            f"{file_format} supports at most {MAX_HEADER_VALUE} samples per trace "
            f"(got nt={nt}); reduce nt or choose another output format"
        )
    dt_us = int(round(waveform.sample_interval * 1e6))
    if dt_us > MAX_HEADER_VALUE:
        raise util.ConfigurationError(
            f"{file_format} supports a maximum sampling interval of "
            f"{MAX_HEADER_VALUE * 1e-6:.6f} s (got dt={waveform.sample_interval:.6f} s); "
            "increase nfpeak or fpeak, or choose another output format"
        )


@util.timeit()
def write_waveform(
    waveform: Waveform, output, file_format: str = "SU"
) -> Stream:
    """
    Write the waveform as a single trace to a waveform file.

    Parameters
    ----------
    waveform:
        Sampled Gaussian derivative waveform.
    output : str, `pathlib.Path` or binary file-like object
        Destination of the waveform file.
    file_format:
        File format to write waveform data to. Options are all file formats supported by
        ObsPy, including: "SU" (default), "SEGY", "SAC", "MSEED".

    Returns
    -------
     :
        The stream of one trace that was written.

    Raises
    ------
    InvalidOutputFormatError
        If ObsPy cannot write `file_format`.
    ConfigurationError
        If the waveform does not fit the SU / SEG-Y trace header.

    """

    file_format = file_format.upper()
    supported = ENTRY_POINTS["waveform_write"]
    if file_format not in supported:
        raise util.InvalidOutputFormatError(file_format, supported)
    if file_format in SEGY_FORMATS:
        _check_header_limits(waveform, file_format)

    st = Stream(traces=[waveform_to_trace(waveform)])

    if isinstance(output, pathlib.Path):
        output.parent.mkdir(exist_ok=True, parents=True)
        output = str(output)
    st.write(output, format=file_format)
    if hasattr(output, "flush"):
        output.flush()

    name = output if isinstance(output, str) else getattr(output, "name", "stream")
    logging.info(f"\tWaveform written to {name} ({file_format}).")

    return st
