# -*- coding: utf-8 -*-
"""
This module provides renderers for game boards.

It includes a plain-text renderer. The `WindowBoard` class, drawing the board in a Matplotlib window, lives in
`mergegrid.utils.windows` so that importing the engine does not load Matplotlib.
"""

from .text import render_text

__all__ = ["render_text"]
