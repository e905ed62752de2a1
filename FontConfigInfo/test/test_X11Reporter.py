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


import io
import unittest

from FontConfigInfo.ReportContext import ReportContext
from FontConfigInfo.X11Reporter import report_display_info, \
                                       report_resources, format_screen_size
from FontConfigInfo.Exceptions import DisplayError


class Display_mockup:
    def __init__(self, size = (1920, 1080, 508, 286), resources = None):
        self.size = size
        self.resources = resources

    def get_screen_size(self):
        return self.size

    def get_resource_manager_string(self):
        return self.resources


class ResourceDatabase_mockup:
    """ Parses "name:\tvalue" lines, matches names exactly """

    destroyed = False

    def __init__(self, data):
        self.entries = {}
        for line in data.decode("UTF-8").splitlines():
            name, value = line.split(":", 1)
            self.entries[name.strip()] = value.strip().encode("UTF-8") + b"\0"

    def __enter__(self):
        return self

    def __exit__(self, type, value, traceback):
        self.destroyed = True

    def get_resource(self, name, class_name):
        return self.entries.get(name)


class TestDisplayInfo(unittest.TestCase):

    def test_geometry(self):
        out = io.StringIO()
        report_display_info(ReportContext(out, display=Display_mockup()))
        self.assertEqual(["X11 display info:",
                          "screen pixels        1920x1080",
                          "screen size          508x286 mm "
                              "(96.00x95.92 DPI)",
                          ""],
                         out.getvalue().splitlines())

    def test_zero_physical_size(self):
        self.assertEqual("0x0 mm (?x? DPI)",
                         format_screen_size(1024, 768, 0, 0))

    def test_no_display_is_fatal(self):
        context = ReportContext(io.StringIO(),
                                display_error=DisplayError("no DISPLAY"))
        with self.assertRaises(DisplayError) as cm:
            report_display_info(context)
        self.assertIn("no DISPLAY", str(cm.exception))

    def test_display_error_positional(self):
        context = ReportContext(io.StringIO(), None, None,
                                DisplayError("can't open ':9'"))
        with self.assertRaises(DisplayError) as cm:
            report_resources(context)
        self.assertIn(":9", str(cm.exception))


class TestResources(unittest.TestCase):

    def _report(self, resources):
        out = io.StringIO()
        databases = []

        def factory(data):
            db = ResourceDatabase_mockup(data)
            databases.append(db)
            return db

        report_resources(ReportContext(out,
                                       display=Display_mockup(
                                           resources=resources)),
                         database_factory=factory)
        return out.getvalue().splitlines(), databases

    def test_resources(self):
        lines, databases = self._report(b"Xft.antialias:\t1\n"
                                        b"Xft.hintstyle:\thintslight\n"
                                        b"Xft.dpi:\t96\n")
        self.assertEqual(["X resources (xrdb):",
                          'Xft.antialias        "1"',
                          "Xft.hinting          [unset]",
                          'Xft.hintstyle        "hintslight"',
                          "Xft.rgba             [unset]",
                          'Xft.dpi              "96"',
                          ""],
                         lines)
        self.assertTrue(databases[0].destroyed)

    def test_no_resource_manager_string(self):
        lines, databases = self._report(None)
        self.assertEqual(["X resources (xrdb):",
                          "[failed]",
                          ""],
                         lines)
        self.assertEqual([], databases)

    def test_long_value_truncated(self):
        lines, databases = self._report(b"Xft.rgba:\t" + b"r" * 300 + b"\n")
        self.assertEqual('Xft.rgba             "' + "r" * 255 + '"', lines[4])


if __name__ == '__main__':
    unittest.main()
