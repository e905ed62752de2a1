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
Report for the font Fontconfig resolves from a Pango font
description, and the rendering attributes it recommends for it.

The description comes either from the command line or from the
theme font of a label. Its family, optional bold weight and italic
slant, and either its pixel size (absolute sizes) or its point size
seed the query. After the configuration and default substitution
steps the best match is looked up, and each of its attributes is
printed or, if the match lacks it, the reason why.
"""

from gettext import gettext as _

from FontConfigInfo.definitions import FC_FAMILY, FC_WEIGHT, FC_SLANT, \
                                       FC_PIXEL_SIZE, FC_SIZE, \
                                       FC_ANTIALIAS, FC_HINTING, \
                                       FC_AUTOHINT, FC_HINT_STYLE, FC_RGBA, \
                                       FC_WEIGHT_BOLD, FC_SLANT_ITALIC, \
                                       PANGO_SCALE, UNSET, \
                                       FcMatchKind, FcHintStyle, FcRgba
from FontConfigInfo.Exceptions  import FontMatchError

### Logging ###
import logging
_logger = logging.getLogger("FontconfigReporter")
###############


def parse_font_description(text):
    from gi.repository import Pango
    return Pango.FontDescription.from_string(text)

def get_default_font_description():
    """ The theme font of a label, used without -f. """
    from FontConfigInfo.GtkReporter import get_theme_font_description
    font_desc = get_theme_font_description()
    if font_desc is None:
        raise FontMatchError(_("The theme defines no label font"))
    return font_desc


class FontQuery(object):
    """ What gets requested from Fontconfig for a font description. """

    family = None
    pixel_size = None   # float, absolute sizes only
    point_size = None   # int, relative sizes only
    bold = False
    italic = False

    def __init__(self, font_desc, bold = False, italic = False):
        self.family = font_desc.get_family()
        self.bold = bool(bold)
        self.italic = bool(italic)

        # pixel and point size are mutually exclusive
        size = font_desc.get_size()
        if font_desc.get_size_is_absolute():
            self.pixel_size = size / PANGO_SCALE
        else:
            self.point_size = int(size / PANGO_SCALE)

    def apply(self, pattern):
        """ Add the requested properties to an FcPattern. """
        if self.family is not None:
            pattern.add_string(FC_FAMILY, self.family)
        if self.bold:
            pattern.add_integer(FC_WEIGHT, FC_WEIGHT_BOLD)
        if self.italic:
            pattern.add_integer(FC_SLANT, FC_SLANT_ITALIC)
        if self.pixel_size is not None:
            pattern.add_double(FC_PIXEL_SIZE, self.pixel_size)
        else:
            pattern.add_integer(FC_SIZE, self.point_size)

    def print_requested(self, context):
        if self.bold:
            context.print_value("requested weight", "FC_WEIGHT_BOLD")
        if self.italic:
            context.print_value("requested slant", "FC_SLANT_ITALIC")
        if self.pixel_size is not None:
            context.print_value("requested size",
                                "{:.2f} pixels".format(self.pixel_size))
        else:
            context.print_value("requested size",
                                "{} points".format(self.point_size))


def _format_absent(lookup):
    return "[{}]".format(lookup.get_reason_string())

def format_fc_string(lookup):
    if not lookup:
        return _format_absent(lookup)
    return lookup.value

def format_fc_bool(lookup):
    if not lookup:
        return _format_absent(lookup)
    return "{:d}".format(lookup.value)

def format_fc_int(lookup, to_string = None, suffix = ""):
    if not lookup:
        return _format_absent(lookup)
    if to_string:
        return "{:d}{} ({})".format(lookup.value, suffix,
                                    to_string(lookup.value))
    return "{:d}{}".format(lookup.value, suffix)

def format_fc_double(lookup, suffix = ""):
    if not lookup:
        return _format_absent(lookup)
    return "{:.2f}{}".format(lookup.value, suffix)

def print_match(context, match):
    """ One line per resolved attribute, in fixed order. """
    fields = (
        (FC_FAMILY,     format_fc_string(match.get_string(FC_FAMILY))),
        (FC_PIXEL_SIZE, format_fc_double(match.get_double(FC_PIXEL_SIZE),
                                         " pixels")),
        (FC_SIZE,       format_fc_int(match.get_integer(FC_SIZE),
                                      suffix=" points")),
        (FC_ANTIALIAS,  format_fc_bool(match.get_bool(FC_ANTIALIAS))),
        (FC_HINTING,    format_fc_bool(match.get_bool(FC_HINTING))),
        (FC_AUTOHINT,   format_fc_bool(match.get_bool(FC_AUTOHINT))),
        (FC_HINT_STYLE, format_fc_int(match.get_integer(FC_HINT_STYLE),
                                      FcHintStyle.to_string)),
        (FC_RGBA,       format_fc_int(match.get_integer(FC_RGBA),
                                      FcRgba.to_string)),
    )
    for name, text in fields:
        context.print_value(name, text)

def _create_pattern():
    from FontConfigInfo.Fontconfig import FcPattern
    return FcPattern()

def report_fontconfig(context, font_desc = None, bold = False, italic = False,
                      pattern_factory = _create_pattern):
    """
    font_desc is a Pango.FontDescription, None for the theme font.
    """
    if font_desc is None:
        font_desc = get_default_font_description()

    desc_string = font_desc.to_string()
    with context.section("Fontconfig ({}):".format(desc_string or UNSET)):
        query = FontQuery(font_desc, bold, italic)

        with pattern_factory() as pattern:
            query.apply(pattern)
            query.print_requested(context)

            pattern.config_substitute(FcMatchKind.PATTERN)
            pattern.default_substitute()

            _logger.debug("matching font for '{}'".format(desc_string))
            with pattern.font_match() as match:
                print_match(context, match)
