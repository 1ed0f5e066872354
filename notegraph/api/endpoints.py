from fastapi import APIRouter, HTTPException, Query
from loguru import logger

from notegraph.api.schemas import FolderResponse, NeighborhoodResponse, PathResponse
from notegraph.domain.graph import FilterOptions, GraphData, GraphStats
from notegraph.errors import NotegraphError
from notegraph.ingestion.orchestrator import GraphOrchestrator


def _create_graph_endpoint(orchestrator: GraphOrchestrator):
    """Create the filtered graph endpoint handler."""

    async def get_graph(
        search: str | None = None,
        show_orphans: bool = True,
        tag: list[str] = Query(default=[]),  # noqa: B008
        folder: list[str] = Query(default=[]),  # noqa: B008
        center: str | None = None,
        depth: int | None = Query(default=None, ge=0),  # noqa: B008
    ) -> GraphData:
        options = FilterOptions(
            search_query=search,
            show_orphans=show_orphans,
            selected_tags=tag,
            selected_folders=folder,
            local_graph_center=center,
            local_graph_depth=depth,
        )
        try:
            return orchestrator.filter(options)
        except NotegraphError as e:
            logger.warning(f"Graph unavailable: {e}")
            raise HTTPException(status_code=404, detail=str(e)) from e
        except Exception as e:
            logger.error(f"Error building graph: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return get_graph


def _create_stats_endpoint(orchestrator: GraphOrchestrator):
    """Create the graph statistics endpoint handler."""

    async def get_stats() -> GraphStats:
        try:
            return orchestrator.stats()
        except NotegraphError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e
        except Exception as e:
            logger.error(f"Error computing graph stats: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return get_stats


def _create_refresh_endpoint(orchestrator: GraphOrchestrator):
    """Create the graph refresh endpoint handler."""

    async def refresh_graph(active: str | None = None) -> GraphStats:
        try:
            orchestrator.refresh(active_note_id=active)
            return orchestrator.stats()
        except NotegraphError as e:
            logger.warning(f"Refresh failed: {e}")
            raise HTTPException(status_code=404, detail=str(e)) from e
        except Exception as e:
            logger.error(f"Error refreshing graph: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return refresh_graph


def _create_neighborhood_endpoint(orchestrator: GraphOrchestrator):
    """Create the local graph endpoint handler."""

    async def get_neighborhood(
        center: str,
        depth: int = Query(default=1, ge=0),  # noqa: B008
    ) -> NeighborhoodResponse:
        try:
            node_ids = orchestrator.neighborhood(center, depth)
        except NotegraphError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e
        except Exception as e:
            logger.error(f"Error computing neighborhood of {center}: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

        return NeighborhoodResponse(center=center, depth=depth, node_ids=sorted(node_ids))

    return get_neighborhood


def _create_path_endpoint(orchestrator: GraphOrchestrator):
    """Create the shortest path endpoint handler."""

    async def get_path(start: str, end: str) -> PathResponse:
        try:
            path, links = orchestrator.shortest_path(start, end)
        except NotegraphError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e
        except Exception as e:
            logger.error(f"Error finding path {start} -> {end}: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

        return PathResponse(start=start, end=end, path=path, links=links)

    return get_path


def _create_folder_endpoint(orchestrator: GraphOrchestrator):
    """Create the folder resolution endpoint handler."""

    async def resolve_folder(query: str) -> FolderResponse:
        try:
            folder = orchestrator.resolve_folder(query)
        except NotegraphError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e
        except Exception as e:
            logger.error(f"Error resolving folder '{query}': {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

        return FolderResponse(query=query, folder=folder)

    return resolve_folder


def get_endpoints_router(*, orchestrator: GraphOrchestrator) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    router.get("/api/graph", response_model=GraphData)(_create_graph_endpoint(orchestrator))
    router.get("/api/graph/stats", response_model=GraphStats)(_create_stats_endpoint(orchestrator))
    router.post("/api/graph/refresh", response_model=GraphStats)(
        _create_refresh_endpoint(orchestrator)
    )
    router.get("/api/graph/neighborhood", response_model=NeighborhoodResponse)(
        _create_neighborhood_endpoint(orchestrator)
    )
    router.get("/api/graph/path", response_model=PathResponse)(_create_path_endpoint(orchestrator))
    router.get("/api/folders/resolve", response_model=FolderResponse)(
        _create_folder_endpoint(orchestrator)
    )

    return router
