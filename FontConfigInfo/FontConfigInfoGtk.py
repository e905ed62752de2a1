# -*- coding: UTF-8 -*-

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

import logging
_logger = logging.getLogger("FontConfigInfoGtk")

import os
import sys
import time
from gettext import gettext as _

from FontConfigInfo.Config             import Config, UsageError, print_usage
from FontConfigInfo.Exceptions         import ChainableError, DisplayError, \
                                              SettingsError, chain_handler
from FontConfigInfo.ReportContext      import ReportContext
from FontConfigInfo.GtkReporter        import report_gtk_settings, \
                                              report_gtk_styles
from FontConfigInfo.GSettingsReporter  import report_gsettings
from FontConfigInfo.X11Reporter        import report_display_info, \
                                              report_resources
from FontConfigInfo.XSettingsReporter  import report_xsettings
from FontConfigInfo.FontconfigReporter import report_fontconfig, \
                                              parse_font_description

app = "font-config-info"


class FontConfigInfoGtk(object):
    """
    Main controller, initializes GTK and the X connection once and
    runs all reporters in order.
    """

    def __init__(self, config, out = None):
        self.config = config
        self.out = out if out is not None else sys.stdout

    def create_context(self):
        from FontConfigInfo.Version import require_gi_versions
        require_gi_versions()
        from gi.repository import GLib, Gdk, Gtk

        GLib.set_prgname(app)

        initialized, _argv = Gtk.init_check(sys.argv)
        if not initialized:
            raise SettingsError(_("Failed to initialize GTK, "
                                  "is there a display?"))

        gtk_settings = Gtk.Settings.get_default()
        if gtk_settings is None:
            raise SettingsError(_("No default GtkSettings object"))

        # own connection to the X server GDK talks to
        from FontConfigInfo.X11 import XDisplayConnection
        display = None
        display_error = None
        gdk_display = Gdk.Display.get_default()
        try:
            display = XDisplayConnection(
                gdk_display.get_name() if gdk_display else None)
        except DisplayError as ex:
            _logger.debug("X display unavailable: {}".format(ex))
            display_error = ex

        return ReportContext(self.out, gtk_settings, display, display_error)

    def run(self):
        config = self.config

        print("Running at {}".format(time.ctime()), file=self.out)
        print(file=self.out)

        context = self.create_context()
        try:
            font_desc = parse_font_description(config.font_desc) \
                        if config.font_desc is not None else None

            report_gtk_settings(context)
            report_gtk_styles(context)
            report_gsettings(context)
            report_display_info(context)
            report_resources(context)
            report_xsettings(context)
            report_fontconfig(context, font_desc, config.bold, config.italic)
        finally:
            if context.display:
                context.display.close()


def main(argv = None):
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] \
           else app
    try:
        config = Config(argv, prog)
    except UsageError:
        print_usage(prog)
        return 1

    config.setup_logging()
    sys.excepthook = chain_handler

    try:
        FontConfigInfoGtk(config).run()
    except ChainableError as ex:
        sys.stdout.flush()
        _logger.error(str(ex))
        return 1

    return 0
