# -*- coding: utf-8 -*-
"""
Command-line interface (CLI) for the dgwaveform package.

:copyright:
    2026, dgwaveform developers.
:license:
    GNU General Public License, Version 3
    (https://www.gnu.org/licenses/gpl-3.0.html)

"""

import argparse
import logging
import pathlib
import sys

import dgwaveform.util as util
from dgwaveform.io import read_config, write_waveform
from dgwaveform.signal import WaveformRequest, generate, resolve


DESCRIPTION = "Make a Gaussian derivative waveform in Seismic Unix (SU) format."

NOTES = """\
notes:
  This code computes a waveform that is the n-th order derivative of a
  Gaussian. The variance of the Gaussian is specified through its peak
  frequency, i.e. the frequency at which the amplitude spectrum of the
  n-th derivative has a maximum. nfpeak is used to compute the maximum
  frequency, which in turn is used to compute the sampling interval.
  Increasing nfpeak gives smoother plots. In order to have a (pseudo-)
  causal pulse, the program computes a time shift equal to sqrt(n)/fpeak.
  An additional shift can be applied with --shift. A positive value
  shifts the waveform to the right.

examples:
  2-loop Ricker:          dgwaveform -n 1 > ricker2.su
  3-loop Ricker:          dgwaveform -n 2 > ricker3.su
  Sonic transducer pulse: dgwaveform -n 10 --fpeak 300 > sonic.su
  Save a plot as well:    dgwaveform -n 10 --fpeak 300 -o sonic.su --plot sonic.png
"""

DEFAULTS = {
    "n": 2,
    "fpeak": 35.0,
    "nfpeak": None,
    "nt": None,
    "shift": 0.0,
    "sign": 1,
    "verbose": 0,
    "outfile": None,
    "format": "SU",
    "plot": None,
}


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser. Unset flags are absent from the namespace."""

    parser = argparse.ArgumentParser(
        prog="dgwaveform",
        description=DESCRIPTION,
        epilog=NOTES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        argument_default=argparse.SUPPRESS,
    )
    parser.add_argument(
        "-n", "--n", type=int, help="Order of derivative, n >= 1. (Default: 2)"
    )
    parser.add_argument("--fpeak", type=float, help="Peak frequency (Hz). (Default: 35)")
    parser.add_argument(
        "--nfpeak",
        type=int,
        help="Max. frequency = nfpeak * fpeak. (Default: n*n)",
    )
    parser.add_argument(
        "--nt", type=int, help="Length of waveform. (Default: 2 * t0 / dt + 1)"
    )
    parser.add_argument(
        "--shift",
        type=float,
        help="Additional time shift in s (used for plotting). (Default: 0)",
    )
    parser.add_argument(
        "--sign",
        type=int,
        choices=[1, -1],
        help="Use -1 to change the sign of the waveform. (Default: 1)",
    )
    parser.add_argument(
        "--verbose",
        type=int,
        choices=[0, 1],
        help="0: don't display diagnostic messages; 1: display them. (Default: 0)",
    )
    parser.add_argument(
        "-o",
        "--outfile",
        help="Output waveform file. (Default: stdout)",
    )
    parser.add_argument(
        "-f",
        "--format",
        help='Output file format - any ObsPy waveform format. (Default: "SU")',
    )
    parser.add_argument("--plot", help="Save a figure of the waveform to this file.")
    parser.add_argument(
        "-c",
        "--config",
        help="Read parameters from a .toml file. Command-line flags take precedence.",
    )

    return parser


def _collect_parameters(args: argparse.Namespace) -> dict:
    """Merge defaults, config file values and command-line flags, in that order."""

    parameters = dict(DEFAULTS)
    cli_values = vars(args)
    if "config" in cli_values:
        parameters.update(read_config(cli_values.pop("config")))
    parameters.update(cli_values)

    return parameters


def _run(parameters: dict) -> None:
    """Resolve, generate and write the waveform."""

    request = WaveformRequest(
        derivative_order=parameters["n"],
        peak_frequency=parameters["fpeak"],
        frequency_oversample=parameters["nfpeak"],
        explicit_length=parameters["nt"],
        extra_shift=parameters["shift"],
        sign=parameters["sign"],
        verbose=bool(parameters["verbose"]),
    )
    if request.verbose:
        util.logger("debug")

    logging.debug(util.log_spacer)
    logging.debug("\tDGWAVEFORM - Gaussian derivative waveform")
    logging.debug(util.log_spacer)

    plan = resolve(request)
    logging.debug(plan)

    waveform = generate(
        plan, request.derivative_order, request.peak_frequency, request.sign
    )

    outfile = parameters["outfile"]
    if outfile is None:
        write_waveform(waveform, sys.stdout.buffer, file_format=parameters["format"])
    else:
        write_waveform(
            waveform, pathlib.Path(outfile), file_format=parameters["format"]
        )

    if parameters["plot"] is not None:
        from dgwaveform.plot import waveform_summary

        waveform_summary(
            waveform,
            plan,
            request.derivative_order,
            request.peak_frequency,
            savefig=parameters["plot"],
        )

    del waveform
    logging.debug("\tMemory freed.")
    logging.debug(util.log_spacer)


def entry_point(args=None) -> None:
    """Entry point for the `dgwaveform` command-line utility."""

    args = _build_parser().parse_args(args)

    level = logging.getLogger().level
    util.logger()
    try:
        _run(_collect_parameters(args))
    except (util.ConfigurationError, util.InvalidOutputFormatError) as e:
        logging.error(f"dgwaveform: {e}")
        sys.exit(1)
    finally:
        logging.getLogger().setLevel(level)
