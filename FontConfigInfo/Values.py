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
Transient values read from the configuration sources.

A SettingValue is one of Missing, BoolValue, IntValue, FloatValue,
StringValue or UnknownValue. Fontconfig lookups return either
Found(value) or Absent(reason).
"""

from FontConfigInfo.definitions import FcResult


class SettingValue(object):
    """ Base class of all setting values """

    value = None

    def __init__(self, value = None):
        self.value = value

    def is_missing(self):
        return False

    def __eq__(self, other):
        return type(self) is type(other) and self.value == other.value

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self), self.value))

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self.value)


class Missing(SettingValue):
    """ The source has no value for this name. """

    def __init__(self):
        SettingValue.__init__(self, None)

    def is_missing(self):
        return True

    def __repr__(self):
        return "Missing()"


class BoolValue(SettingValue):
    pass


class IntValue(SettingValue):
    pass


class FloatValue(SettingValue):
    pass


class StringValue(SettingValue):
    pass


class UnknownValue(SettingValue):
    """ A value of a type we don't know how to print, value is the type. """
    pass


class Found(object):
    """ Successful Fontconfig lookup """

    def __init__(self, value):
        self.value = value

    def __bool__(self):
        return True

    def __eq__(self, other):
        return isinstance(other, Found) and self.value == other.value

    def __repr__(self):
        return "Found({!r})".format(self.value)


class Absent(object):
    """ Failed Fontconfig lookup, reason is a FcResult """

    def __init__(self, reason):
        self.reason = reason

    def __bool__(self):
        return False

    def __eq__(self, other):
        return isinstance(other, Absent) and self.reason == other.reason

    def __repr__(self):
        return "Absent({!r})".format(self.reason)

    def get_reason_string(self):
        return FcResult.to_string(self.reason)
