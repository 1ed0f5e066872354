"""Response models for the graph API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from notegraph.domain.graph import GraphLink


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NeighborhoodResponse(_CamelModel):
    center: str
    depth: int
    node_ids: list[str]


class PathResponse(_CamelModel):
    start: str
    end: str
    path: list[str]
    links: list[GraphLink]


class FolderResponse(_CamelModel):
    query: str
    folder: str
