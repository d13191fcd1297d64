# -*- coding: utf-8 -*-
"""
Presentation helpers for the 2048 game.
"""

from .render import render_grid

__all__ = ["render_grid"]
