"""Azure Functions entry point for the Marketplace API.

Every HTTP route of the FastAPI app is served through a single ASGI function,
so the API behaves the same under ``uvicorn src.api.main:app`` and on a
Functions host.
"""
import azure.functions as func

from src.api.main import app as fastapi_app

app = func.AsgiFunctionApp(app=fastapi_app, http_auth_level=func.AuthLevel.ANONYMOUS)
