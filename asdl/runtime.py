"""runtime.py.

- Position sentinels shared by the syntax tree and the printer
"""

# Used throughout the tree to indicate we don't have location info.  Real
# positions are 1-based offsets, so 0 never collides with one.
NO_POS = 0

# Next-line position once the line table is exhausted.  Every position
# compares less than or equal to it, so everything stays on the last line.
MAX_POS = (1 << 63) - 1
