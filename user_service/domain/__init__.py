"""
Domain layer - Core business entities and rules.

Contains pure business objects with no infrastructure dependencies.
"""
