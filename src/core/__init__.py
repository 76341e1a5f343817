"""
Core numeric kernel: exact fixed-width arithmetic primitives and number kinds.

This module contains the foundational building blocks that are independent
of any presentation, parsing or persistence layer.
"""
