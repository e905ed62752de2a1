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

import logging

from FontConfigInfo.definitions import NAME_FORMAT, UNSET, \
                                       GTK_XFT_DPI_SCALE, MM_PER_INCH, \
                                       XRESOURCE_BUFFER_SIZE

_logger = logging.getLogger("utils")


def format_line(name, text):
    """ One report line: label column followed by the value text. """
    return NAME_FORMAT.format(name) + text

def format_quoted(value):
    """ Quoted string or [unset] for None. """
    if value is None:
        return UNSET
    return '"{}"'.format(value)

def tristate_to_string(value):
    """
    Toolkit boolean settings are integers,
    -1 = default, 0 = false, > 0 = true.
    """
    if value == 0:
        return "no"
    if value > 0:
        return "yes"
    return "default"

def format_tristate(value):
    return "{} ({})".format(value, tristate_to_string(value))

def decode_xft_dpi(value):
    """
    gtk-xft-dpi contains the real DPI times 1024.
    Returns None when the toolkit default is in effect.
    """
    if value > 0:
        return value / GTK_XFT_DPI_SCALE
    return None

def format_xft_dpi(value):
    """
    >>> format_xft_dpi(98304)
    '98304 (96.00 DPI)'
    >>> format_xft_dpi(-1)
    '-1 (default)'
    """
    dpi = decode_xft_dpi(value)
    if dpi is None:
        return "{} (default)".format(value)
    return "{} ({:0.2f} DPI)".format(value, dpi)

def compute_dpi(pixels, millimeters):
    """
    Dots per inch from a pixel count and its physical length.
    Returns None if the physical length is unknown (zero).
    """
    if not millimeters:
        return None
    return pixels * MM_PER_INCH / millimeters

def format_dpi_value(dpi):
    if dpi is None:
        return "?"
    return "{:.2f}".format(dpi)

def truncate_resource_value(data, buffer_size = XRESOURCE_BUFFER_SIZE):
    """
    Copy a raw resource value into a fixed size, zero terminated buffer.
    Longer values are cut off silently, the result is what fits
    in buffer_size - 1 bytes, up to the first NUL byte.
    """
    value = data.split(b"\0", 1)[0]
    chunk = value[:buffer_size - 1]
    if len(chunk) < len(value):
        _logger.debug("resource value truncated from {} to {} bytes" \
                      .format(len(value), len(chunk)))
    return chunk.decode("UTF-8", errors="replace")
