import sys

from loguru import logger

from notegraph.api import create_app
from notegraph.config import settings
from notegraph.ingestion.orchestrator import GraphOrchestrator
from notegraph.ingestion.relationship_extraction import GraphBuilder
from notegraph.ingestion.vault_loader import VaultLoader

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info(f"Serving note graph for vault {settings.vault_path}")
loader = VaultLoader(settings.vault_path, max_content_notes=settings.max_content_notes)
graph_builder = GraphBuilder(
    hub_min_connections=settings.hub_min_connections,
    hub_percentile=settings.hub_percentile,
)
orchestrator = GraphOrchestrator(loader=loader, graph_builder=graph_builder)
app = create_app(orchestrator=orchestrator)
