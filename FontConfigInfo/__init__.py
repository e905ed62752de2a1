# -*- coding: utf-8 -*-
"""
font-config-info: report every place font rendering and DPI
settings may come from on an X11 desktop.
"""

__version__ = "1.0.0"
