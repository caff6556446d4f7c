"""
Catalog bounded context: domain layer.

This module contains the domain model for the product catalog:
- The Product entity
- Repository results and the repository error taxonomy
- The ProductRepository port
"""
