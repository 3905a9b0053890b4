from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bsgreeks import __version__
from bsgreeks.api import greeks, health
from bsgreeks.core.config import Settings, settings
from bsgreeks.core.logging import configure_logging

def create_app(config: Settings = settings) -> FastAPI:
    configure_logging(config.log_level)

    app = FastAPI(title="Black-Scholes Greeks API", version=__version__)
    app.state.settings = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/api")
    app.include_router(greeks.router)
    return app

app = create_app()
