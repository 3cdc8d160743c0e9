"""Core infrastructure: async result types and logging setup."""
