"""
Text — разбор numeral text и форматирование значений
"""

from decimals.core.text.formatting import to_fixed, to_string
from decimals.core.text.parsing import parse_numeral

__all__ = [
    "parse_numeral",
    "to_string",
    "to_fixed",
]
