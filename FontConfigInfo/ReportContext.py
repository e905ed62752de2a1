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
Process-wide state shared by all reporters of one run.
"""

import sys
from contextlib import contextmanager

from FontConfigInfo.utils import format_line

### Logging ###
import logging
_logger = logging.getLogger("ReportContext")
###############


class ReportContext(object):
    """
    Holds the toolkit settings object, the X display connection and
    the output stream. Reporters get everything they need from here
    and write their sections through it.
    """

    def __init__(self, out = None, gtk_settings = None, display = None,
                       display_error = None):
        self.out = out if out is not None else sys.stdout
        self.gtk_settings = gtk_settings
        self.display = display
        self.display_error = display_error   # why display is None

    def print_line(self, text = ""):
        print(text, file=self.out)

    def print_value(self, name, text):
        """ name in the label column, followed by text """
        self.print_line(format_line(name, text))

    @contextmanager
    def section(self, title):
        """
        Print a section title, run the body, then the terminating
        blank line.
        """
        _logger.debug("section '{}'".format(title))
        self.print_line(title)
        yield self
        self.print_line()
