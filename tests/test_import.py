# -*- coding: utf-8 -*-
"""
Short test script that will ensure dgwaveform and all required dependencies have been
correctly installed.

:copyright:
    2026, dgwaveform developers.
:license:
    GNU General Public License, Version 3
    (https://www.gnu.org/licenses/gpl-3.0.html)

"""

import unittest


class TestImport(unittest.TestCase):
    def test_import(self):
        i = 0
        import sys

        if sys.version_info < (3, 11):
            print("dgwaveform only supports Python 3.11 and up.")
            i += 1
        try:
            import matplotlib  # NOQA
        except ImportError:
            print("You have not properly installed: matplotlib")
            i += 1
        try:
            import numpy  # NOQA
        except ImportError:
            print("You have not properly installed: numpy")
            i += 1
        try:
            import obspy  # NOQA
        except ImportError:
            print("You have not properly installed: obspy")
            i += 1
        try:
            import dgwaveform  # NOQA
        except ImportError as e:
            print(f"dgwaveform does not import correctly. - {e}")
            i += 1
        self.assertEqual(i, 0)


if __name__ == "__main__":
    unittest.main()
