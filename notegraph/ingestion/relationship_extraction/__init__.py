"""Relationship extraction module for resolving references and building note graphs."""

from notegraph.ingestion.relationship_extraction.cross_references import CrossReferenceDetector
from notegraph.ingestion.relationship_extraction.graph_builder import GraphBuilder
from notegraph.ingestion.relationship_extraction.resolver import ReferenceResolver

__all__ = [
    "CrossReferenceDetector",
    "GraphBuilder",
    "ReferenceResolver",
]
