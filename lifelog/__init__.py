"""
lifelog - Source Package

The data layer of a terminal diary: one rated entry per day, stored as
one JSON file per month, with mood statistics and calendar bounds.

DESIGN PRINCIPLES:
1. One entry slot per calendar day, always
2. Fail early, fail visibly
3. Never overwrite data that could not be read
4. Every write is auditable
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "lifelog contributors"
