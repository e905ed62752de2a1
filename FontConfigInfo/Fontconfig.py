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
ctypes bindings for the parts of libfontconfig needed to resolve
a font query, wrapped in the FcPattern class.
"""

import ctypes.util
from ctypes import *

from gettext import gettext as _

from FontConfigInfo.definitions import FcMatchKind, FcResult
from FontConfigInfo.Exceptions import FontMatchError
from FontConfigInfo.Values import Found, Absent

### Logging ###
import logging
_logger = logging.getLogger("Fontconfig")
###############


#########################
# Fontconfig
# using definitions from fontconfig.h
FcBool = c_int
FcPatternPtr = c_void_p
FcConfigPtr = c_void_p

libfontconfig = None
try:
    libfontconfig = CDLL(ctypes.util.find_library('fontconfig'))

    FcPatternCreate = libfontconfig.FcPatternCreate
    FcPatternCreate.restype = FcPatternPtr
    FcPatternCreate.argtypes = []

    FcPatternDestroy = libfontconfig.FcPatternDestroy
    FcPatternDestroy.restype = None
    FcPatternDestroy.argtypes = [FcPatternPtr]

    # FcBool FcPatternAddString(FcPattern *p, const char *object,
    #                           const FcChar8 *s);
    FcPatternAddString = libfontconfig.FcPatternAddString
    FcPatternAddString.restype = FcBool
    FcPatternAddString.argtypes = [FcPatternPtr, c_char_p, c_char_p]

    FcPatternAddInteger = libfontconfig.FcPatternAddInteger
    FcPatternAddInteger.restype = FcBool
    FcPatternAddInteger.argtypes = [FcPatternPtr, c_char_p, c_int]

    FcPatternAddDouble = libfontconfig.FcPatternAddDouble
    FcPatternAddDouble.restype = FcBool
    FcPatternAddDouble.argtypes = [FcPatternPtr, c_char_p, c_double]

    # FcResult FcPatternGetString(const FcPattern *p, const char *object,
    #                             int n, FcChar8 **s);
    FcPatternGetString = libfontconfig.FcPatternGetString
    FcPatternGetString.restype = c_int
    FcPatternGetString.argtypes = [FcPatternPtr, c_char_p, c_int,
                                   POINTER(c_char_p)]

    FcPatternGetBool = libfontconfig.FcPatternGetBool
    FcPatternGetBool.restype = c_int
    FcPatternGetBool.argtypes = [FcPatternPtr, c_char_p, c_int,
                                 POINTER(FcBool)]

    FcPatternGetInteger = libfontconfig.FcPatternGetInteger
    FcPatternGetInteger.restype = c_int
    FcPatternGetInteger.argtypes = [FcPatternPtr, c_char_p, c_int,
                                    POINTER(c_int)]

    FcPatternGetDouble = libfontconfig.FcPatternGetDouble
    FcPatternGetDouble.restype = c_int
    FcPatternGetDouble.argtypes = [FcPatternPtr, c_char_p, c_int,
                                   POINTER(c_double)]

    # FcBool FcConfigSubstitute(FcConfig *config, FcPattern *p,
    #                           FcMatchKind kind);
    FcConfigSubstitute = libfontconfig.FcConfigSubstitute
    FcConfigSubstitute.restype = FcBool
    FcConfigSubstitute.argtypes = [FcConfigPtr, FcPatternPtr, c_int]

    FcDefaultSubstitute = libfontconfig.FcDefaultSubstitute
    FcDefaultSubstitute.restype = None
    FcDefaultSubstitute.argtypes = [FcPatternPtr]

    # FcPattern *FcFontMatch(FcConfig *config, FcPattern *p,
    #                        FcResult *result);
    FcFontMatch = libfontconfig.FcFontMatch
    FcFontMatch.restype = FcPatternPtr
    FcFontMatch.argtypes = [FcConfigPtr, FcPatternPtr, POINTER(c_int)]

except (OSError, AttributeError):
    libfontconfig = None
    _logger.warning(_("Fontconfig unavailable, font matching disabled"))


def libs_loaded():
    return bool(libfontconfig)


class FcPattern(object):
    """
    Owned FcPattern handle.

    Getters don't raise, they return Found(value) or Absent(FcResult).
    Use as context manager to destroy the pattern deterministically.
    """

    def __init__(self, handle = None):
        if handle is None:
            if not libs_loaded():
                raise FontMatchError(_("Fontconfig is not available"))
            handle = FcPatternCreate()
            if not handle:
                raise FontMatchError(_("Failed to create Fontconfig pattern"))
        self._handle = handle

    def __enter__(self):
        return self

    def __exit__(self, type, value, traceback):
        self.destroy()

    def destroy(self):
        if self._handle:
            FcPatternDestroy(self._handle)
            self._handle = None

    # query construction
    def add_string(self, prop, value):
        return bool(FcPatternAddString(self._handle, _b(prop), _b(value)))

    def add_integer(self, prop, value):
        return bool(FcPatternAddInteger(self._handle, _b(prop), int(value)))

    def add_double(self, prop, value):
        return bool(FcPatternAddDouble(self._handle, _b(prop), float(value)))

    def config_substitute(self, kind = FcMatchKind.PATTERN):
        """ Apply the user and system configuration to the query. """
        return bool(FcConfigSubstitute(None, self._handle, kind.value))

    def default_substitute(self):
        FcDefaultSubstitute(self._handle)

    def font_match(self):
        """
        Resolve the query to the best matching font.
        Raises FontMatchError if nothing matched.
        """
        result = c_int(FcResult.NO_MATCH.value)
        handle = FcFontMatch(None, self._handle, byref(result))
        if not handle:
            raise FontMatchError(_("No Fontconfig match ({})") \
                                 .format(FcResult.to_string(result.value)))
        return FcPattern(handle)

    # lookups
    def get_string(self, prop, n = 0):
        value = c_char_p()
        result = FcPatternGetString(self._handle, _b(prop), n, byref(value))
        if result != FcResult.MATCH.value:
            return Absent(_to_result(result))
        return Found((value.value or b"").decode("UTF-8", errors="replace"))

    def get_bool(self, prop, n = 0):
        value = FcBool(0)
        result = FcPatternGetBool(self._handle, _b(prop), n, byref(value))
        if result != FcResult.MATCH.value:
            return Absent(_to_result(result))
        return Found(value.value)

    def get_integer(self, prop, n = 0):
        value = c_int(0)
        result = FcPatternGetInteger(self._handle, _b(prop), n, byref(value))
        if result != FcResult.MATCH.value:
            return Absent(_to_result(result))
        return Found(value.value)

    def get_double(self, prop, n = 0):
        value = c_double(0.0)
        result = FcPatternGetDouble(self._handle, _b(prop), n, byref(value))
        if result != FcResult.MATCH.value:
            return Absent(_to_result(result))
        return Found(value.value)


def _b(s):
    return s.encode("UTF-8") if isinstance(s, str) else s

def _to_result(value):
    """ FcResult member for a raw result, the raw int if unknown """
    try:
        return FcResult(value)
    except ValueError:
        return value
