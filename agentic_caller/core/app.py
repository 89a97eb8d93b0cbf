"""
FastAPI application factory.
Creates and configures the main FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from agentic_caller.api.routes import call_routes
from agentic_caller.config.settings import settings
from agentic_caller.models.schemas import CallResponse
from agentic_caller.services.call_request_service import CallRequestService, UNEXPECTED_ERROR_MESSAGE
from agentic_caller.services.twilio_service import TwilioService

logger = logging.getLogger(__name__)


def build_call_request_service() -> CallRequestService:
    """Wire the orchestrator to a Twilio dispatcher built from settings."""
    dispatcher = TwilioService(
        settings.twilio_credentials(),
        voice=settings.twilio_voice,
        language=settings.twilio_language,
    )
    return CallRequestService(dispatcher)


def create_app(call_request_service: Optional[CallRequestService] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        call_request_service: Orchestrator to serve; built from settings when omitted

    Returns:
        FastAPI: The configured application instance
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        dispatcher = app.state.call_request_service.dispatcher
        if dispatcher.credentials is None:
            logger.warning("Twilio is not configured; call requests will fail until it is")
        else:
            logger.info(f"Calls will be placed from {dispatcher.credentials.from_number}")
        yield

    app = FastAPI(
        title="Agentic Caller API",
        description="API for turning a call description into a spoken Twilio call",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.call_request_service = call_request_service or build_call_request_service()

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        body = CallResponse(success=False, message=UNEXPECTED_ERROR_MESSAGE)
        return JSONResponse(status_code=500, content=body.model_dump())

    @app.get('/', response_class=JSONResponse)
    async def index_page():
        """Root endpoint providing API information."""
        return {
            "message": "Agentic Caller API is running!",
            "version": "1.0.0",
            "endpoints": {
                "call": "/api/call",
                "health": "/health",
            }
        }

    @app.get('/health', response_class=JSONResponse)
    async def health():
        """Health check endpoint."""
        return {"status": "ok"}

    # Include routers
    app.include_router(call_routes.router)

    return app


# Create the application instance
app = create_app()
