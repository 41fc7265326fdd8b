# app/handler.py
"""Serverless entry point for AWS Lambda behind API Gateway.

Mangum translates API Gateway events, including their
``queryStringParameters``, to ASGI requests for the FastAPI app.
"""

from mangum import Mangum
from app.main import app

# lifespan="off": the shared HTTP client lives as long as the warm container
handler = Mangum(app, lifespan="off")
