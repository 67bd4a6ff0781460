"""
Holiday rule sets per jurisdiction.
"""

from . import finland, spain

__all__ = ["finland", "spain"]
