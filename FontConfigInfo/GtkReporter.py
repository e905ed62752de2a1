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
Reports for the GTK settings object and the fonts the current
theme assigns to a few widget classes.
"""

from contextlib import contextmanager
from gettext import gettext as _

from FontConfigInfo.definitions import GTK_SETTINGS, STYLE_WIDGET_TYPES, \
                                       GTK_STRING_SETTING, \
                                       GTK_TRISTATE_SETTING, \
                                       GTK_DPI_SETTING, UNSET
from FontConfigInfo.Exceptions  import SettingsError
from FontConfigInfo.Values      import Missing, IntValue, StringValue
from FontConfigInfo.utils       import format_quoted, format_tristate, \
                                       format_xft_dpi

### Logging ###
import logging
_logger = logging.getLogger("GtkReporter")
###############


def read_gtk_setting(settings, name, kind):
    """ Read one property of the GtkSettings object as SettingValue. """
    try:
        value = settings.get_property(name)
    except TypeError as ex:
        # unknown property in this GTK version
        _logger.debug("can't read '{}': {}".format(name, ex))
        value = None

    if kind == GTK_STRING_SETTING:
        if value is None:
            return Missing()
        return StringValue(value)

    # tri-state booleans and the dpi are ints, -1 meaning default
    if value is None:
        value = -1
    return IntValue(int(value))

def format_gtk_setting(value, kind):
    if kind == GTK_TRISTATE_SETTING:
        return format_tristate(value.value)
    if kind == GTK_DPI_SETTING:
        return format_xft_dpi(value.value)
    return format_quoted(value.value)

def report_gtk_settings(context, names = GTK_SETTINGS):
    with context.section("GtkSettings:"):
        settings = context.gtk_settings
        if settings is None:
            raise SettingsError(_("No default GtkSettings object"))

        for name, kind in names:
            value = read_gtk_setting(settings, name, kind)
            context.print_value(name, format_gtk_setting(value, kind))


@contextmanager
def scoped_widget(factory):
    """
    Create a throwaway widget and destroy it when leaving the block,
    whatever happens inside.
    """
    widget = factory()
    try:
        yield widget
    finally:
        widget.destroy()

def get_widget_font(widget):
    """ Font description the theme resolves for widget, may be None. """
    style = widget.get_style_context()
    return style.get_font(widget.get_state_flags())

def get_widget_type_name(widget):
    return widget.__gtype__.name

def get_style_widget_factories(type_names = STYLE_WIDGET_TYPES):
    from gi.repository import Gtk

    factories = {
        "GtkLabel"    : lambda: Gtk.Label(label="foo"),
        "GtkMenuItem" : lambda: Gtk.MenuItem(label="foo"),
        "GtkToolbar"  : lambda: Gtk.Toolbar(),
    }
    return [factories[name] for name in type_names]

def get_theme_font_description():
    """
    Copy of the font description the theme assigns to labels.
    """
    from gi.repository import Gtk

    with scoped_widget(lambda: Gtk.Label(label="foo")) as widget:
        font_desc = get_widget_font(widget)
        return font_desc.copy() if font_desc else None

def report_gtk_styles(context, widget_factories = None):
    if widget_factories is None:
        widget_factories = get_style_widget_factories()

    with context.section("GTK 3.0 styles:"):
        for factory in widget_factories:
            with scoped_widget(factory) as widget:
                font_desc = get_widget_font(widget)
                text = format_quoted(font_desc.to_string()) \
                       if font_desc else UNSET
                context.print_value(get_widget_type_name(widget), text)
