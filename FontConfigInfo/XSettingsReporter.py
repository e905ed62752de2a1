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
Report for the live state of the XSETTINGS daemon, as dumped by
the dump_xsettings helper of xsettingsd.
"""

import re
import subprocess

from FontConfigInfo.definitions import XSETTINGS_HELPER, XSETTINGS_FILTER, \
                                       XSETTINGS_INSTALL_HINT

### Logging ###
import logging
_logger = logging.getLogger("XSettingsReporter")
###############


def run_helper(command = (XSETTINGS_HELPER,)):
    """
    Run the dump helper, blocking until it exits.
    Returns (exit status, stdout bytes). A missing executable
    reports status 127, like the shell would. The helper's own
    diagnostics go to our stderr.
    """
    try:
        p = subprocess.run(list(command), stdout=subprocess.PIPE)
    except OSError as ex:
        _logger.debug("failed to run '{}': {}".format(command[0], ex))
        return 127, b""

    _logger.debug("'{}' exited with status {}" \
                  .format(command[0], p.returncode))
    return p.returncode, p.stdout

def filter_xsettings(data, pattern = XSETTINGS_FILTER):
    """
    Pick the font related lines of the helper output and split each
    at the first run of spaces into (name, value).
    """
    regex = re.compile(pattern)
    for line in data.decode("UTF-8", errors="replace").splitlines():
        if not regex.match(line):
            continue
        fields = re.split(" +", line, maxsplit=1)
        name = fields[0]
        value = fields[1] if len(fields) > 1 else ""
        yield name, value

def report_xsettings(context, helper = run_helper):
    with context.section("XSETTINGS:"):
        status, data = helper()
        rows = list(filter_xsettings(data)) if status == 0 else []

        # no matching lines counts as failure, too
        if not rows:
            for line in XSETTINGS_INSTALL_HINT.splitlines():
                context.print_line(line)
            return

        for name, value in rows:
            context.print_value(name, value)
