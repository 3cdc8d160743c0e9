"""
User Service - user records backed by an in-memory cache.
"""

__version__ = "1.0.0"
