"""
Blog Posts API - CRUD REST service for blog posts backed by MongoDB
"""

__version__ = "1.0.0"
