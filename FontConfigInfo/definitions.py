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
Global definitions.
"""

from enum import Enum


# Width of the left-justified label column, "%-20s ".
NAME_FORMAT = "{:<20} "

# Placeholders for values that could not be read
UNSET = "[unset]"
UNKNOWN_TYPE = "[unknown type]"
FAILED = "[failed]"


### Toolkit settings ###
GTK_STRING_SETTING = "string"
GTK_TRISTATE_SETTING = "tristate"
GTK_DPI_SETTING = "dpi"

# name and kind, in report order
GTK_SETTINGS = (
    ("gtk-font-name",     GTK_STRING_SETTING),
    ("gtk-xft-antialias", GTK_TRISTATE_SETTING),
    ("gtk-xft-hinting",   GTK_TRISTATE_SETTING),
    ("gtk-xft-hintstyle", GTK_STRING_SETTING),
    ("gtk-xft-rgba",      GTK_STRING_SETTING),
    ("gtk-xft-dpi",       GTK_DPI_SETTING),
)

# gtk-xft-dpi holds the real DPI times this factor
GTK_XFT_DPI_SCALE = 1024

# widget classes whose themed font is reported
STYLE_WIDGET_TYPES = ("GtkLabel", "GtkMenuItem", "GtkToolbar")


### Desktop preferences ###
SCHEMA_GDI = "org.gnome.desktop.interface"
GDI_KEYS = ("font-name", "text-scaling-factor")


### X resources ###
XRESOURCE_NAMES = ("Xft.antialias",
                   "Xft.hinting",
                   "Xft.hintstyle",
                   "Xft.rgba",
                   "Xft.dpi")
XRESOURCE_CLASS = "*"

# size of the copy buffer for resource values, including the terminator
XRESOURCE_BUFFER_SIZE = 256

MM_PER_INCH = 25.4


### XSETTINGS ###
XSETTINGS_HELPER = "dump_xsettings"
XSETTINGS_FILTER = r"^(Gtk/FontName |Xft/)"
XSETTINGS_INSTALL_HINT = (
    "Install dump_xsettings from https://code.google.com/p/xsettingsd/\n"
    "to print this information.")


### Fontconfig ###
FC_FAMILY     = "family"
FC_WEIGHT     = "weight"
FC_SLANT      = "slant"
FC_PIXEL_SIZE = "pixelsize"
FC_SIZE       = "size"
FC_ANTIALIAS  = "antialias"
FC_HINTING    = "hinting"
FC_AUTOHINT   = "autohint"
FC_HINT_STYLE = "hintstyle"
FC_RGBA       = "rgba"

FC_WEIGHT_BOLD  = 200
FC_SLANT_ITALIC = 100

# Pango sizes are in units of 1/PANGO_SCALE
PANGO_SCALE = 1024


class FcMatchKind(Enum):
    (
        PATTERN,
        FONT,
        SCAN,
    ) = range(3)


class FcResult(Enum):
    (
        MATCH,
        NO_MATCH,
        TYPE_MISMATCH,
        NO_ID,
        OUT_OF_MEMORY,
    ) = range(5)

    @staticmethod
    def to_string(result):
        """ Printable name of a FcResult or of its raw integer value. """
        try:
            result = FcResult(result)
        except ValueError:
            return "unknown"
        return _FC_RESULT_NAMES[result]


class FcHintStyle(Enum):
    (
        NONE,
        SLIGHT,
        MEDIUM,
        FULL,
    ) = range(4)

    @staticmethod
    def to_string(style):
        try:
            return FcHintStyle(style).name.lower()
        except ValueError:
            return "invalid"


class FcRgba(Enum):
    (
        UNKNOWN,
        RGB,
        BGR,
        VRGB,
        VBGR,
        NONE,
    ) = range(6)

    @staticmethod
    def to_string(rgba):
        try:
            return FcRgba(rgba).name.lower()
        except ValueError:
            return "invalid"


_FC_RESULT_NAMES = {
    FcResult.MATCH         : "match",
    FcResult.NO_MATCH      : "no match",
    FcResult.TYPE_MISMATCH : "type mismatch",
    FcResult.NO_ID         : "no id",
    FcResult.OUT_OF_MEMORY : "out of memory",
}
