from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from dishka.integrations.fastapi import setup_dishka

from core.container import container
from core.exception_handler import (
    validation_exception_handler,
    http_exception_handler,
    starlette_exception_handler,
    custom_exception_handler
)
from core.exceptions import BaseCustomException
from auth.router import router as auth_router
from query.router import router as query_router
from wallet.router import router as wallet_router

APP_NAME = "Wallet Inspector API"
APP_VERSION = "0.1.0"
APP_DESCRIPTION = "Wallet inspection backend for the Base Wallet Inspector miniapp"

app = FastAPI(
    title=APP_NAME,
    version=APP_VERSION,
    description=APP_DESCRIPTION,
)

setup_dishka(container, app)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(StarletteHTTPException, starlette_exception_handler)
app.add_exception_handler(BaseCustomException, custom_exception_handler)
app.add_exception_handler(Exception, custom_exception_handler)

app.include_router(auth_router)
app.include_router(query_router)
app.include_router(wallet_router)


@app.get("/")
async def root():
    """
    Root endpoint.

    Returns
    -------
    dict
        Application information
    """
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "description": APP_DESCRIPTION,
        "endpoints": {
            "auth": "/api/auth/validate",
            "primary_address": "/api/auth/primary-address/{fid}",
            "query": "/api/query",
            "transactions": "/api/wallet/{address}/transactions",
            "tokens": "/api/wallet/{address}/tokens",
            "activity": "/api/wallet/{address}/activity",
            "counterparties": "/api/wallet/{address}/counterparties",
            "docs": "/docs"
        }
    }


@app.get("/health")
async def health():
    """
    Basic health check endpoint.

    Returns
    -------
    dict
        Health status
    """
    return {"status": "healthy", "version": APP_VERSION}
