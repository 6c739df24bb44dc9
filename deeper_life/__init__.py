"""
deeper-life - daily routine gate and habit tracker.
"""

__version__ = "1.0.0"
