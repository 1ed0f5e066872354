"""CLI for building the note graph of a vault folder and printing what it contains"""

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from notegraph.config import settings
from notegraph.ingestion.orchestrator import GraphOrchestrator
from notegraph.ingestion.relationship_extraction import GraphBuilder
from notegraph.ingestion.vault_loader import VaultLoader


def main(
    vault: str,
    active: str | None = None,
    path: list[str] | None = None,
    json_outfile: str | None = None,
) -> None:
    loader = VaultLoader(Path(vault), max_content_notes=settings.max_content_notes)
    graph_builder = GraphBuilder(
        hub_min_connections=settings.hub_min_connections,
        hub_percentile=settings.hub_percentile,
    )
    orchestrator = GraphOrchestrator(loader=loader, graph_builder=graph_builder)
    graph = orchestrator.refresh(active_note_id=active)

    stats = orchestrator.stats()
    print(f"Nodes:         {stats.node_count}")
    print(f"Links:         {stats.link_count} ({stats.bidirectional_count} bidirectional)")
    print(f"Orphans:       {stats.orphan_count}")
    print(f"Hubs:          {stats.hub_count}")
    print(f"Folders:       {stats.cluster_count}")
    print(f"Tags:          {stats.tag_count}")

    if path:
        start, end = path
        node_ids, _ = orchestrator.shortest_path(start, end)
        if node_ids:
            print(f"Path:          {' -> '.join(node_ids)}")
        else:
            print(f"Path:          no path between {start} and {end}")

    if json_outfile:
        Path(json_outfile).write_text(json.dumps(graph.model_dump(by_alias=True), indent=2))
        logger.info(f"Wrote graph to {json_outfile}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--vault",
        type=str,
        required=False,
        help="Vault folder containing notes",
        default=str(settings.vault_path),
    )
    parser.add_argument(
        "--active", type=str, required=False, help="Id of the currently open note", default=None
    )
    parser.add_argument(
        "--path",
        type=str,
        nargs=2,
        metavar=("START", "END"),
        required=False,
        help="Print the shortest path between two note ids",
    )
    parser.add_argument(
        "--json", type=str, required=False, help="Write the graph snapshot to this file"
    )

    args = parser.parse_args()

    logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

    main(
        vault=args.vault,
        active=args.active,
        path=args.path,
        json_outfile=args.json,
    )
