"""
Application layer package.

Contains the catalog use cases (create, get, list). Each use case is
a single class with one async ``execute`` method and depends on the
ProductRepository port, never on a concrete adapter.
"""
