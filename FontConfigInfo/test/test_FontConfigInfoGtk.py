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
from unittest import mock

import FontConfigInfo.FontConfigInfoGtk as FontConfigInfoGtkModule
from FontConfigInfo.FontConfigInfoGtk import FontConfigInfoGtk
from FontConfigInfo.ReportContext import ReportContext
from FontConfigInfo.Config import Config
from FontConfigInfo.Exceptions import SchemaError


REPORTERS = ("report_gtk_settings",
             "report_gtk_styles",
             "report_gsettings",
             "report_display_info",
             "report_resources",
             "report_xsettings",
             "report_fontconfig")


class TestFontConfigInfoGtk(unittest.TestCase):

    class Display_mockup:
        closed = False

        def close(self):
            self.closed = True

    def setUp(self):
        self.calls = []
        self.display = self.Display_mockup()
        self.out = io.StringIO()

        patchers = []
        for name in REPORTERS:
            patchers.append(mock.patch.object(
                FontConfigInfoGtkModule, name,
                side_effect=lambda *args, _name=name, **kwargs:
                    self.calls.append((_name, args[1:]))))
        patchers.append(mock.patch.object(
            FontConfigInfoGtkModule, "parse_font_description",
            side_effect=lambda text: "desc:" + text))

        for p in patchers:
            p.start()
            self.addCleanup(p.stop)

    def _run(self, args):
        app = FontConfigInfoGtk(Config(args), self.out)
        app.create_context = lambda: ReportContext(self.out,
                                                   display=self.display)
        app.run()

    def test_reporter_order(self):
        self._run([])
        self.assertEqual(list(REPORTERS), [c[0] for c in self.calls])
        self.assertEqual((None, False, False), self.calls[-1][1])
        self.assertTrue(self.display.closed)

        lines = self.out.getvalue().splitlines()
        self.assertTrue(lines[0].startswith("Running at "))
        self.assertEqual("", lines[1])

    def test_font_options(self):
        self._run(["-b", "-i", "-f", "Serif 12px"])
        self.assertEqual(("desc:Serif 12px", True, True), self.calls[-1][1])

    def test_empty_font_description(self):
        self._run(["-f", ""])
        self.assertEqual(("desc:", False, False), self.calls[-1][1])

    def test_fatal_error_stops_run(self):
        FontConfigInfoGtkModule.report_gsettings.side_effect = \
            SchemaError("gsettings schema for 'x' is not installed")
        with self.assertRaises(SchemaError):
            self._run([])
        self.assertEqual(["report_gtk_settings", "report_gtk_styles"],
                         [c[0] for c in self.calls])
        self.assertTrue(self.display.closed)


if __name__ == '__main__':
    unittest.main()
