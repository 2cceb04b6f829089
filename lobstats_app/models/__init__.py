"""
Result models module.

Immutable metric results derived from a loaded order book.
"""
