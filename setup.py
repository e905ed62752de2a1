#!/usr/bin/python3
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

import sys
import unittest
from os.path import dirname, abspath, join

from setuptools import setup, Command


project_root = dirname(abspath(__file__))


#### custom test command ####

class TestCommand(Command):
    user_options = [] # required by Command

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        suite = unittest.defaultTestLoader.discover(
                    join(project_root, "FontConfigInfo", "test"),
                    top_level_dir=project_root)
        result = unittest.TextTestRunner(verbosity=2).run(suite)
        sys.exit(0 if result.wasSuccessful() else 1)


##### setup #####

setup(
    name = 'font-config-info',
    version = '1.0.0',
    license = 'GPL-3+',
    description = 'Print font rendering and DPI settings of '
                  'an X11 desktop from all their sources',

    packages = ['FontConfigInfo'],
    scripts = ['font-config-info'],

    python_requires = '>=3.6',
    install_requires = ['PyGObject'],
    extras_require = {
        'test': ['pytest'],
    },

    cmdclass = {
                'test': TestCommand,
                }
)
