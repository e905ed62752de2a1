# -*- coding: utf-8 -*-

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

"""
Reports for the X display geometry and the Xft entries of the
resource manager database (xrdb).
"""

from gettext import gettext as _

from FontConfigInfo.definitions import XRESOURCE_NAMES, XRESOURCE_CLASS, \
                                       UNSET, FAILED
from FontConfigInfo.Exceptions  import DisplayError
from FontConfigInfo.Values      import Missing, StringValue
from FontConfigInfo.utils       import compute_dpi, format_dpi_value, \
                                       format_quoted, truncate_resource_value

### Logging ###
import logging
_logger = logging.getLogger("X11Reporter")
###############


def _get_display(context):
    if context.display is None:
        raise DisplayError(_("No X display connection"),
                           context.display_error)
    return context.display

def format_screen_size(width_px, height_px, width_mm, height_mm):
    """
    >>> format_screen_size(1920, 1080, 508, 286)
    '508x286 mm (96.00x95.92 DPI)'
    """
    x_dpi = compute_dpi(width_px, width_mm)
    y_dpi = compute_dpi(height_px, height_mm)
    return "{}x{} mm ({}x{} DPI)".format(width_mm, height_mm,
                                         format_dpi_value(x_dpi),
                                         format_dpi_value(y_dpi))

def report_display_info(context):
    with context.section("X11 display info:"):
        display = _get_display(context)
        width_px, height_px, width_mm, height_mm = display.get_screen_size()

        context.print_value("screen pixels",
                            "{}x{}".format(width_px, height_px))
        context.print_value("screen size",
                            format_screen_size(width_px, height_px,
                                               width_mm, height_mm))


def read_resource(db, name, class_name = XRESOURCE_CLASS):
    data = db.get_resource(name, class_name)
    if data is None:
        return Missing()
    return StringValue(truncate_resource_value(data))

def open_resource_database(data):
    from FontConfigInfo.X11 import XResourceDatabase
    return XResourceDatabase(data)

def report_resources(context, names = XRESOURCE_NAMES,
                     database_factory = open_resource_database):
    with context.section("X resources (xrdb):"):
        display = _get_display(context)

        data = display.get_resource_manager_string()
        if not data:
            _logger.debug("root window has no RESOURCE_MANAGER property")
            context.print_line(FAILED)
            return

        with database_factory(data) as db:
            for name in names:
                value = read_resource(db, name)
                text = UNSET if value.is_missing() \
                       else format_quoted(value.value)
                context.print_value(name, text)
