"""
plate-math: barbell loading arithmetic.

Which plates go on the bar for a target weight, and which totals the
available plates can make.
"""

__version__ = "0.1.0"
