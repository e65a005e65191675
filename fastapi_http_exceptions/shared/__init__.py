"""
Shared cross-cutting utilities.
"""
