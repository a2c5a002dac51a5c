import logging
from collections.abc import Callable
from datetime import datetime
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import Settings, configure_logging, settings as default_settings
from app.api import routes
from app.services.booking_store import BookingStore
from app.services.sms_service import TwilioService

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[BookingStore] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        settings: Configuration, defaults to the environment-loaded settings
        store: Booking store, defaults to one backed by settings.bookings_file
        clock: Returns the current local time used for availability
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug
    )

    app.state.settings = settings
    app.state.store = store or BookingStore(settings.bookings_file)
    app.state.sms = TwilioService(settings)
    app.state.clock = clock or datetime.now

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "Authorization"],
    )

    # Include routers
    app.include_router(routes.router)

    @app.get("/")
    def read_root():
        return {
            "message": f"Welcome to {settings.app_name}",
            "docs": "/docs",
            "health": "/health",
            "api_base_url": settings.api_base_url,
        }

    logger.info(
        "%s ready - bookings file %s, CORS origins %s",
        settings.app_name, app.state.store.path, settings.allowed_origins,
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
