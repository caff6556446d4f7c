"""
Azure Functions entry point.

Hosts the FastAPI application behind a single anonymous HTTP trigger.
Routing is left to FastAPI (see ``routePrefix`` in host.json), so
``GET /api/v1/products`` reaches the catalog router unchanged.
"""

import azure.functions as func

from app.asgi import app as fastapi_app

app = func.AsgiFunctionApp(app=fastapi_app, http_auth_level=func.AuthLevel.ANONYMOUS)
