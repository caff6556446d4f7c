"""
Product Catalog: a small product catalog service on Azure.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - catalog: Products, their storage in Cosmos DB, and the HTTP API.

Layers:
    - domain: Entities, repository results, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (Cosmos DB, in-memory) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
