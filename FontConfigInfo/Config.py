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
Command line options and logging setup.
"""

import sys
from optparse import OptionParser

### Logging ###
import logging
_logger = logging.getLogger("Config")
###############

LOG_FORMAT = '%(asctime)s:%(levelname)s:%(name)s: %(message)s'
LOG_LEVELS = ("notset", "debug", "info", "warning", "error", "critical")

USAGE = """\
Usage: {prog} [options]

Options:
  -b       Request bold font from Fontconfig
  -f DESC  Specify Pango font description for Fontconfig
  -i       Request italic font from Fontconfig
  -d LEVEL Set the logging level (debug, info, warning, ...)
"""


class UsageError(Exception):
    """ Help was requested or the command line is invalid. """
    pass


class _OptionParser(OptionParser):
    """
    OptionParser that leaves printing the usage and exiting
    to the caller.
    """

    def error(self, msg):
        raise UsageError(msg)

    def exit(self, status = 0, msg = None):
        raise UsageError(msg)


class Config(object):
    """
    Parsed command line of one run.
    """

    bold = False
    italic = False
    font_desc = None
    debug = None

    def __init__(self, argv = None, prog = "font-config-info"):
        self.prog = prog

        parser = _OptionParser(prog=prog, add_help_option=False)
        parser.add_option("-b", action="store_true", dest="bold",
                default=False,
                help="Request bold font from Fontconfig")
        parser.add_option("-f", type="str", dest="font_desc",
                metavar="DESC",
                help="Specify Pango font description for Fontconfig")
        parser.add_option("-i", action="store_true", dest="italic",
                default=False,
                help="Request italic font from Fontconfig")
        parser.add_option("-d", "--debug", type="choice", dest="debug",
                choices=LOG_LEVELS + tuple(l.upper() for l in LOG_LEVELS),
                help="DEBUG={notset|debug|info|warning|error|critical}")
        parser.add_option("-h", action="store_true", dest="help",
                default=False)

        args = sys.argv[1:] if argv is None else argv
        options = parser.parse_args(args)[0]
        if options.help:
            raise UsageError(None)

        self.bold = options.bold
        self.italic = options.italic
        self.font_desc = options.font_desc
        self.debug = options.debug

    def setup_logging(self):
        log_params = {
            "format" : LOG_FORMAT,
        }
        if self.debug:
            log_params["level"] = getattr(logging, self.debug.upper())

        logging.basicConfig(**log_params)
        _logger.debug("logging initialized, level {}".format(self.debug))


def print_usage(prog, file = None):
    print(USAGE.format(prog=prog), file=file or sys.stderr, end="")
