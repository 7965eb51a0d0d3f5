# -*- coding: utf-8 -*-
"""
dgwaveform: A Python package to synthesise Gaussian derivative source waveforms as
seismic traces.

:copyright:
    2026, dgwaveform developers.
:license:
    GNU General Public License, Version 3
    (https://www.gnu.org/licenses/gpl-3.0.html)

"""

import pathlib
import shutil
import sys

from setuptools import find_packages, setup


# Directory of the current file
SETUP_DIRECTORY = pathlib.Path(__file__).resolve().parent


def setup_package():
    """Setup package"""

    setup_args = {
        "name": "dgwaveform",
        "version": "1.0.0",
        "description": (
            "Synthesise the n-th order derivative of a Gaussian as a seismic trace."
        ),
        "license": "GPLv3",
        "packages": find_packages(include=["dgwaveform", "dgwaveform.*"]),
        "python_requires": ">=3.11",
        "install_requires": ["matplotlib", "numpy", "obspy"],
        "extras_require": {"test": ["pytest", "scipy"]},
        "entry_points": {
            "console_scripts": ["dgwaveform = dgwaveform.cli:entry_point"],
        },
        "classifiers": [
            "Programming Language :: Python :: 3",
            "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
            "Topic :: Scientific/Engineering :: Physics",
        ],
    }

    shutil.rmtree(str(SETUP_DIRECTORY / "build"), ignore_errors=True)

    setup(**setup_args)


if __name__ == "__main__":
    # clean --all does not remove the build directory automatically
    if "clean" in sys.argv and "--all" in sys.argv:
        shutil.rmtree(str(SETUP_DIRECTORY / "build"), ignore_errors=True)
    else:
        setup_package()
