"""
Text module for the fixed-format helpers.

This module provides the bracket-aware tokenizer and the bounding box
text codec.
"""

from pgwkb.components.text.tokenizer import GeometryTokenizer, tokenize
from pgwkb.components.text.box import (
    BoxBase,
    Box2D,
    Box3D,
    parse_box2d,
    parse_box3d,
    split_srid,
)

__all__ = [
    'GeometryTokenizer',
    'tokenize',
    'BoxBase',
    'Box2D',
    'Box3D',
    'parse_box2d',
    'parse_box3d',
    'split_srid',
]
