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
Minimal ctypes bindings for Xlib display geometry and the
resource manager database (Xresource.h).
"""

import ctypes.util
from ctypes import *

from gettext import gettext as _

from FontConfigInfo.Exceptions import DisplayError

### Logging ###
import logging
_logger = logging.getLogger("X11")
###############


#########################
# XLib
# using definitions from Xlib.h, Xresource.h
Bool = c_int
XPointer = c_void_p
XrmDatabase = c_void_p

class XDisplay(Structure): pass
XDisplay._fields_ = [('dummy', c_char*1024)]

class XrmValue(Structure): pass
XrmValue._fields_ = [
    ('size', c_uint),
    ('addr', XPointer),
]

libX11 = None
try:
    libX11 = CDLL(ctypes.util.find_library('X11'))

    XOpenDisplay = libX11.XOpenDisplay
    XOpenDisplay.restype = POINTER(XDisplay)
    XOpenDisplay.argtypes = [c_char_p]

    XCloseDisplay = libX11.XCloseDisplay
    XCloseDisplay.restype = c_int
    XCloseDisplay.argtypes = [POINTER(XDisplay)]

    # The DefaultScreen/DisplayWidth... macros have function counterparts.
    XDefaultScreen = libX11.XDefaultScreen
    XDefaultScreen.restype = c_int
    XDefaultScreen.argtypes = [POINTER(XDisplay)]

    XDisplayWidth = libX11.XDisplayWidth
    XDisplayWidth.restype = c_int
    XDisplayWidth.argtypes = [POINTER(XDisplay), c_int]

    XDisplayHeight = libX11.XDisplayHeight
    XDisplayHeight.restype = c_int
    XDisplayHeight.argtypes = [POINTER(XDisplay), c_int]

    XDisplayWidthMM = libX11.XDisplayWidthMM
    XDisplayWidthMM.restype = c_int
    XDisplayWidthMM.argtypes = [POINTER(XDisplay), c_int]

    XDisplayHeightMM = libX11.XDisplayHeightMM
    XDisplayHeightMM.restype = c_int
    XDisplayHeightMM.argtypes = [POINTER(XDisplay), c_int]

    # char *XResourceManagerString(Display *display);
    XResourceManagerString = libX11.XResourceManagerString
    XResourceManagerString.restype = c_char_p
    XResourceManagerString.argtypes = [POINTER(XDisplay)]

    XrmInitialize = libX11.XrmInitialize
    XrmInitialize.restype = None
    XrmInitialize.argtypes = []

    # XrmDatabase XrmGetStringDatabase(char *data);
    XrmGetStringDatabase = libX11.XrmGetStringDatabase
    XrmGetStringDatabase.restype = XrmDatabase
    XrmGetStringDatabase.argtypes = [c_char_p]

    # Bool XrmGetResource(XrmDatabase database, char *str_name,
    #                     char *str_class, char **str_type_return,
    #                     XrmValue *value_return);
    XrmGetResource = libX11.XrmGetResource
    XrmGetResource.restype = Bool
    XrmGetResource.argtypes = [XrmDatabase, c_char_p, c_char_p,
                               POINTER(c_char_p), POINTER(XrmValue)]

    XrmDestroyDatabase = libX11.XrmDestroyDatabase
    XrmDestroyDatabase.restype = None
    XrmDestroyDatabase.argtypes = [XrmDatabase]

except (OSError, AttributeError):
    # CDLL(None) loads the main program when libX11 is not installed,
    # the symbol lookups fail then.
    libX11 = None
    _logger.warning(_("Xlib unavailable, "
                      "display and resource reports disabled"))


def libs_loaded():
    return bool(libX11)


class XDisplayConnection(object):
    """
    Client connection to an X server.
    Use as context manager to close the connection deterministically.
    """

    def __init__(self, display_name = None):
        if not libs_loaded():
            raise DisplayError(_("Xlib is not available"))

        name = display_name.encode("UTF-8") if display_name else None
        self._display = XOpenDisplay(name)
        if not self._display:
            raise DisplayError(_("Can't open X display '{}'") \
                               .format(display_name or ""))
        self.name = display_name
        _logger.debug("opened X display '{}'".format(display_name))

    def __enter__(self):
        return self

    def __exit__(self, type, value, traceback):
        self.close()

    def close(self):
        if self._display:
            XCloseDisplay(self._display)
            self._display = None
            _logger.debug("closed X display '{}'".format(self.name))

    def get_default_screen(self):
        return XDefaultScreen(self._display)

    def get_screen_size(self, screen = None):
        """ Returns (width_px, height_px, width_mm, height_mm). """
        if screen is None:
            screen = self.get_default_screen()
        return (XDisplayWidth(self._display, screen),
                XDisplayHeight(self._display, screen),
                XDisplayWidthMM(self._display, screen),
                XDisplayHeightMM(self._display, screen))

    def get_resource_manager_string(self):
        """
        Contents of the RESOURCE_MANAGER property of the root window
        as bytes, None if there isn't one.
        """
        return XResourceManagerString(self._display)


class XResourceDatabase(object):
    """ Resource database parsed from a resource manager string. """

    def __init__(self, data):
        XrmInitialize()
        self._db = XrmGetStringDatabase(data)

    def __enter__(self):
        return self

    def __exit__(self, type, value, traceback):
        self.destroy()

    def destroy(self):
        if self._db:
            XrmDestroyDatabase(self._db)
            self._db = None

    def get_resource(self, name, class_name):
        """ Raw value bytes of the resource, None if not found. """
        if not self._db:
            return None

        type_return = c_char_p()
        value = XrmValue()
        if not XrmGetResource(self._db,
                              name.encode("UTF-8"),
                              class_name.encode("UTF-8"),
                              byref(type_return),
                              byref(value)):
            return None

        if not value.addr:
            return b""
        return string_at(value.addr, value.size)
