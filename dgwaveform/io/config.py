# -*- coding: utf-8 -*-
"""
Module to read waveform parameters from a .toml configuration file.

Example file::

    [waveform]
    n = 10
    fpeak = 300.0
    sign = -1

    [output]
    outfile = "sonic.su"
    format = "SU"

:copyright:
    2026, dgwaveform developers.
:license:
    GNU General Public License, Version 3
    (https://www.gnu.org/licenses/gpl-3.0.html)

"""

import pathlib
import tomllib

import dgwaveform.util as util


# Accepted value types for each parameter; bool is rejected wherever int is accepted
WAVEFORM_TYPES = {
    "n": (int,),
    "fpeak": (int, float),
    "nfpeak": (int,),
    "nt": (int,),
    "shift": (int, float),
    "sign": (int,),
    "verbose": (int,),
}
OUTPUT_TYPES = {"outfile": (str,), "format": (str,), "plot": (str,)}


def _check_types(table, values, types, config_file):
    """Raise a ConfigurationError naming any value of the wrong type."""

    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, types[key]):
            expected = " or ".join(t.__name__ for t in types[key])
            raise util.ConfigurationError(
                f"{table}.{key} in {config_file} must be {expected} "
                f"(got {value!r})"
            )


def read_config(config_file) -> dict:
    """
    Read waveform and output parameters from a .toml file.

    Parameters
    ----------
    config_file : str or `pathlib.Path`
        Path to the configuration file.

    Returns
    -------
    parameters : dict
        Flat mapping of parameter name to value, using the command-line names.

    Raises
    ------
    ConfigurationError
        If the file cannot be parsed, has no [waveform] table, or contains unknown
        keys or values of the wrong type.

    """

    config_file = pathlib.Path(config_file)
    try:
        with config_file.open("rb") as f:
            config = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise util.ConfigurationError(f"Could not parse {config_file}: {e}") from e
    except OSError as e:
        raise util.ConfigurationError(f"Could not read {config_file}: {e}") from e

    if not isinstance(config.get("waveform"), dict):
        raise util.ConfigurationError(f"{config_file} has no [waveform] table.")

    unknown = set(config) - {"waveform", "output"}
    if not isinstance(config.get("output", {}), dict):
        raise util.ConfigurationError(f"{config_file}: [output] must be a table.")
    unknown |= {f"waveform.{k}" for k in set(config["waveform"]) - set(WAVEFORM_TYPES)}
    unknown |= {f"output.{k}" for k in set(config.get("output", {})) - set(OUTPUT_TYPES)}
    if unknown:
        raise util.ConfigurationError(
            f"Unknown parameter(s) in {config_file}: {', '.join(sorted(unknown))}"
        )

    _check_types("waveform", config["waveform"], WAVEFORM_TYPES, config_file)
    _check_types("output", config.get("output", {}), OUTPUT_TYPES, config_file)

    parameters = dict(config["waveform"])
    parameters.update(config.get("output", {}))

    return parameters
