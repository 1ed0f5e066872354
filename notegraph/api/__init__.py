from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notegraph.api.endpoints import get_endpoints_router
from notegraph.config import settings
from notegraph.ingestion.orchestrator import GraphOrchestrator


def create_app(*, orchestrator: GraphOrchestrator) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router=get_endpoints_router(orchestrator=orchestrator))

    return app
