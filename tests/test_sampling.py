# -*- coding: utf-8 -*-
"""
Test script containing unit tests covering the sampling plan resolution in
dgwaveform.signal.sampling.

:copyright:
    2026, dgwaveform developers.
:license:
    GNU General Public License, Version 3
    (https://www.gnu.org/licenses/gpl-3.0.html)

"""

import math
import unittest

from dgwaveform.signal import WaveformRequest, resolve
import dgwaveform.util as util


class TestResolve(unittest.TestCase):
    """Suite of tests for the sampling plan derived from waveform parameters."""

    def test_default_ricker(self):
        """n=2, fpeak=35 gives nfpeak=4 and a 24-sample trace."""

        request = WaveformRequest(derivative_order=2, peak_frequency=35.0)
        plan = resolve(request)

        self.assertEqual(request.nfpeak, 4)
        self.assertAlmostEqual(plan.max_frequency, 140.0, delta=1e-4)
        self.assertAlmostEqual(plan.sample_interval, 0.0035714, delta=1e-4)
        self.assertAlmostEqual(plan.causal_delay, 0.04040, delta=1e-4)
        self.assertEqual(plan.sample_count, 24)

    def test_exact_formulae(self):
        """Check the derived values against the formulae."""

        request = WaveformRequest(
            derivative_order=3, peak_frequency=50.0, frequency_oversample=5,
            extra_shift=0.01,
        )
        plan = resolve(request)

        self.assertEqual(plan.max_frequency, 250.0)
        self.assertEqual(plan.sample_interval, 0.5 / 250.0)
        self.assertEqual(plan.causal_delay, 0.01 + math.sqrt(3) / 50.0)
        self.assertEqual(
            plan.sample_count,
            int(round(2 * plan.causal_delay / plan.sample_interval + 1)),
        )

    def test_first_order_oversample(self):
        """n=1 defaults nfpeak to 1, so the max frequency is the peak frequency."""

        plan = resolve(WaveformRequest(derivative_order=1, peak_frequency=35.0))
        default_plan = resolve(WaveformRequest())

        self.assertEqual(plan.max_frequency, 35.0)
        self.assertLess(plan.max_frequency, default_plan.max_frequency)

    def test_explicit_length(self):
        """An explicit number of samples bypasses the computed length."""

        for n, fpeak in [(1, 10.0), (2, 35.0), (10, 300.0)]:
            plan = resolve(
                WaveformRequest(
                    derivative_order=n, peak_frequency=fpeak, explicit_length=128
                )
            )
            self.assertEqual(plan.sample_count, 128)

    def test_valid_inputs_positive(self):
        """Sample count and interval are positive for a range of valid inputs."""

        for n in range(1, 12):
            for fpeak in [1.0, 10.0, 35.0, 300.0]:
                plan = resolve(WaveformRequest(derivative_order=n, peak_frequency=fpeak))
                self.assertGreaterEqual(plan.sample_count, 1)
                self.assertGreater(plan.sample_interval, 0.0)

    def test_reject_derivative_order(self):
        """Orders below 1 are rejected."""

        for n in [0, -1]:
            with self.assertRaises(util.ConfigurationError):
                resolve(WaveformRequest(derivative_order=n))

    def test_reject_peak_frequency(self):
        """Zero or negative peak frequencies are rejected."""

        for fpeak in [0.0, -35.0]:
            with self.assertRaises(util.ConfigurationError):
                resolve(WaveformRequest(peak_frequency=fpeak))

    def test_reject_precision_exceeded(self):
        """A sampling interval below 1 microsecond is rejected."""

        request = WaveformRequest(
            derivative_order=2, peak_frequency=1000.0, frequency_oversample=1000
        )
        with self.assertRaises(util.PrecisionExceededError) as cm:
            resolve(request)
        self.assertIsInstance(cm.exception, util.ConfigurationError)
        self.assertIn("reduce oversample factor or peak frequency", str(cm.exception))

    def test_reject_other_parameters(self):
        """Out-of-range oversample, sign, length and shift are rejected."""

        for request in [
            WaveformRequest(frequency_oversample=0),
            WaveformRequest(sign=0),
            WaveformRequest(sign=2),
            WaveformRequest(explicit_length=0),
            WaveformRequest(extra_shift=-1.0),
        ]:
            with self.assertRaises(util.ConfigurationError):
                resolve(request)

    def test_diagnostic_message(self):
        """The sampling plan is always reported at INFO level."""

        with self.assertLogs(level="INFO") as cm:
            resolve(WaveformRequest())

        self.assertEqual(len(cm.output), 1)
        self.assertIn(
            "n=2 fpeak=35 fmax=140 t0=0.040406 nt=24 dt=0.003571428571", cm.output[0]
        )

    def test_request_is_immutable(self):
        """Waveform requests cannot be modified once created."""

        request = WaveformRequest()
        with self.assertRaises(AttributeError):
            request.derivative_order = 3


if __name__ == "__main__":
    unittest.main()
