"""Curly parser: scanning, block matching, node tree construction."""

from curly.parser.blocks import find_block_end
from curly.parser.core import Parser

__all__ = ["Parser", "find_block_end"]
