"""
Typeahead: matching and ranking engine for typeahead suggestion lists.
"""

__version__ = "1.0.0"
