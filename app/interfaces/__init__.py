"""
Interfaces layer package.

Contains the FastAPI routers and Pydantic schemas for the catalog
and health endpoints. Routes validate input, call a use case and
wrap the result in the JSON envelope. No business logic belongs here.
"""
