"""Data module for drawings."""
from .drawing_data import Vec2, Style, Shape, Drawing

__all__ = [
    'Vec2',
    'Style',
    'Shape',
    'Drawing'
]
