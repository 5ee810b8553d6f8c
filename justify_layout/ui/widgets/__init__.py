"""Reusable UI widgets"""

from .justify_layout import JustifyLayout, QtChildBox
