#!/usr/bin/python3

# Copyright © 2026 The font-config-info developers
#
# This file is part of font-config-info.
#
# font-config-info is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# font-config-info is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

import unittest

from FontConfigInfo.utils import format_line, format_quoted, \
                                 format_tristate, format_xft_dpi, \
                                 decode_xft_dpi, compute_dpi, \
                                 format_dpi_value, truncate_resource_value
from FontConfigInfo.definitions import FcResult, FcHintStyle, FcRgba


class TestFormatting(unittest.TestCase):

    def test_label_column(self):
        self.assertEqual("gtk-xft-dpi          -1 (default)",
                         format_line("gtk-xft-dpi", "-1 (default)"))
        # long names aren't cut off
        self.assertEqual("a-name-longer-than-twenty x",
                         format_line("a-name-longer-than-twenty", "x"))

    def test_quoted(self):
        self.assertEqual('"Cantarell 11"', format_quoted("Cantarell 11"))
        self.assertEqual('""', format_quoted(""))
        self.assertEqual("[unset]", format_quoted(None))

    def test_tristate(self):
        self.assertEqual("-1 (default)", format_tristate(-1))
        self.assertEqual("0 (no)", format_tristate(0))
        self.assertEqual("1 (yes)", format_tristate(1))
        self.assertEqual("2 (yes)", format_tristate(2))

    def test_xft_dpi(self):
        self.assertEqual("98304 (96.00 DPI)", format_xft_dpi(98304))
        self.assertEqual("-1 (default)", format_xft_dpi(-1))
        self.assertEqual("0 (default)", format_xft_dpi(0))
        self.assertEqual(96.0, decode_xft_dpi(98304))
        self.assertIsNone(decode_xft_dpi(-1))
        self.assertEqual("147456 (144.00 DPI)", format_xft_dpi(147456))


class TestDPI(unittest.TestCase):

    def test_compute_dpi(self):
        self.assertAlmostEqual(96.0, compute_dpi(1920, 508))
        self.assertEqual("96.00", format_dpi_value(compute_dpi(1920, 508)))

    def test_unknown_physical_size(self):
        self.assertIsNone(compute_dpi(1920, 0))
        self.assertEqual("?", format_dpi_value(None))


class TestResourceTruncation(unittest.TestCase):

    def test_short_value(self):
        self.assertEqual("hintslight", truncate_resource_value(b"hintslight\0"))
        self.assertEqual("96", truncate_resource_value(b"96"))
        self.assertEqual("", truncate_resource_value(b""))

    def test_stops_at_nul(self):
        self.assertEqual("rgb", truncate_resource_value(b"rgb\0garbage"))

    def test_long_value_is_cut(self):
        value = truncate_resource_value(b"x" * 1000 + b"\0")
        self.assertEqual("x" * 255, value)

        value = truncate_resource_value(b"y" * 255 + b"\0")
        self.assertEqual("y" * 255, value)


class TestEnums(unittest.TestCase):

    def test_hint_style(self):
        self.assertEqual("none", FcHintStyle.to_string(0))
        self.assertEqual("slight", FcHintStyle.to_string(1))
        self.assertEqual("medium", FcHintStyle.to_string(2))
        self.assertEqual("full", FcHintStyle.to_string(3))
        self.assertEqual("invalid", FcHintStyle.to_string(99))
        self.assertEqual("invalid", FcHintStyle.to_string(-1))

    def test_rgba(self):
        names = [FcRgba.to_string(i) for i in range(6)]
        self.assertEqual(["unknown", "rgb", "bgr", "vrgb", "vbgr", "none"],
                         names)
        self.assertEqual("invalid", FcRgba.to_string(6))

    def test_result(self):
        self.assertEqual("match", FcResult.to_string(FcResult.MATCH))
        self.assertEqual("no match", FcResult.to_string(1))
        self.assertEqual("type mismatch",
                         FcResult.to_string(FcResult.TYPE_MISMATCH))
        self.assertEqual("no id", FcResult.to_string(3))
        self.assertEqual("out of memory", FcResult.to_string(4))
        self.assertEqual("unknown", FcResult.to_string(42))


if __name__ == '__main__':
    unittest.main()
