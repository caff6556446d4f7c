"""
Domain layer package.

Contains the catalog entities, repository result types and port
interfaces. No framework imports, no IO, no side effects.
"""
