"""
Catalog bounded context: application layer.

Use cases for creating, retrieving and listing products.
"""
