"""
Operations and project management GraphQL API backed by MongoDB.
"""
__version__ = "0.1.0"
