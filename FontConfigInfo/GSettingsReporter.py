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
Report for desktop wide preferences stored in gsettings.
"""

from gettext import gettext as _

from FontConfigInfo.definitions import SCHEMA_GDI, GDI_KEYS, UNSET, \
                                       UNKNOWN_TYPE
from FontConfigInfo.Exceptions  import SchemaError
from FontConfigInfo.Values      import Missing, FloatValue, StringValue, \
                                       UnknownValue
from FontConfigInfo.utils       import format_quoted

### Logging ###
import logging
_logger = logging.getLogger("GSettingsReporter")
###############


class GSettingsStore(object):
    """
    Read-only view of one gsettings schema.
    Keys the schema doesn't define read as Missing.
    """

    def __init__(self, schema_id):
        from gi.repository import Gio

        source = Gio.SettingsSchemaSource.get_default()
        schema = source.lookup(schema_id, True) if source else None
        if schema is None:
            raise SchemaError(_("gsettings schema for '{}' is not installed")
                              .format(schema_id))

        self.schema_id = schema_id
        self._schema = schema
        self._settings = Gio.Settings.new_full(schema, None, None)
        _logger.debug("opened gsettings schema '{}'".format(schema_id))

    def get_value(self, key):
        """ GVariant of key, None if the schema has no such key """
        if not self._schema.has_key(key):
            return None
        return self._settings.get_value(key)

    def close(self):
        self._settings = None
        self._schema = None


def variant_to_setting_value(variant):
    """ Convert a GVariant (or None) to a SettingValue. """
    if variant is None:
        return Missing()

    type_string = variant.get_type_string()
    if type_string == "s":
        return StringValue(variant.get_string())
    if type_string == "d":
        return FloatValue(variant.get_double())
    return UnknownValue(type_string)

def format_gsettings_value(value):
    if value.is_missing():
        return UNSET
    if isinstance(value, StringValue):
        return format_quoted(value.value)
    if isinstance(value, FloatValue):
        return "{:0.2f}".format(value.value)
    return UNKNOWN_TYPE

def report_gsettings(context, schema_id = SCHEMA_GDI, keys = GDI_KEYS,
                     store_factory = GSettingsStore):
    with context.section("GSettings ({}):".format(schema_id)):
        store = store_factory(schema_id)
        try:
            for key in keys:
                value = variant_to_setting_value(store.get_value(key))
                context.print_value(key, format_gsettings_value(value))
        finally:
            store.close()
