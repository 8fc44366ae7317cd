"""CLI entrypoint and pipeline assembly helpers."""

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .config import ZettelConfig, load_config
from .phases import (
    BacklinkPhase,
    BidirectionalPhase,
    DocumentIngestionPhase,
    GraphBuildPhase,
    KeywordAutoLinkPhase,
    LinkExtractionPhase,
    NoteIndexPhase,
    ValidationAndQAPhase,
)
from .pipeline import PipelinePhase, PipelineRunner


def build_default_phases() -> List[PipelinePhase]:
    return [
        DocumentIngestionPhase(),
        NoteIndexPhase(),
        KeywordAutoLinkPhase(),
        LinkExtractionPhase(),
        BacklinkPhase(),
        BidirectionalPhase(),
        GraphBuildPhase(),
        ValidationAndQAPhase(),
    ]


def run_linking(
    documents: Optional[Iterable[Any]] = None,
    input_path: str = "",
    config: Optional[ZettelConfig] = None,
    focus_id: Optional[int] = None,
) -> Dict[str, Any]:
    """Run every phase and return the final context."""
    initial_context: Dict[str, Any] = {
        "input_path": input_path,
        "documents": list(documents) if documents is not None else None,
        "config": config or ZettelConfig(),
        "focus_id": focus_id,
    }
    runner = PipelineRunner(phases=build_default_phases())
    return runner.run(initial_context)


def build_artifact(context: Dict[str, Any]) -> Dict[str, Any]:
    artifact = context["graph"].to_json()
    artifact["backlinks"] = {
        str(target): [asdict(entry) for entry in entries]
        for target, entries in context.get("backlinks", {}).items()
    }
    artifact["bidirectional"] = {
        str(source): list(partners) for source, partners in context.get("bidirectional", {}).items()
    }
    artifact["mentions"] = {
        str(source): list(targets) for source, targets in context.get("mention_map", {}).items()
    }
    artifact["hashtags"] = {
        str(source): list(tags) for source, tags in context.get("hashtags", {}).items()
    }
    artifact["unresolved"] = [dict(ref) for ref in context.get("unresolved", [])]
    artifact["meta"] = {
        "input_path": context.get("input_path", ""),
        "focus_id": context.get("focus_id"),
        "config": context["config"].to_dict(),
        "skipped_phases": list(context.get("skipped_phases", [])),
        "validation_report": context.get("validation_report", {}),
        "extraction_report": context.get("extraction_report", {}),
    }
    return artifact


def run_pipeline(
    documents: Optional[Iterable[Any]] = None,
    input_path: str = "",
    config: Optional[ZettelConfig] = None,
    focus_id: Optional[int] = None,
) -> Dict[str, Any]:
    context = run_linking(documents, input_path=input_path, config=config, focus_id=focus_id)
    return build_artifact(context)


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build the wiki-link knowledge graph for an issue snapshot."
    )
    parser.add_argument(
        "--input-path",
        required=True,
        help="Path to a JSON list of issues (the issue tracker's shape).",
    )
    parser.add_argument(
        "--output-path",
        default="graph_artifact.json",
        help="Where to save the resulting graph artifact JSON.",
    )
    parser.add_argument(
        "--focus-id",
        type=int,
        default=None,
        help="Issue number to mark as current and prune around.",
    )
    parser.add_argument(
        "--config",
        default="",
        help="Optional JSON settings file; defaults come from ZETTEL_* variables.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level.")
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.config:
        config = ZettelConfig.from_json(Path(args.config).read_text(encoding="utf-8"))
    else:
        config = load_config()

    artifact = run_pipeline(input_path=args.input_path, config=config, focus_id=args.focus_id)
    output_path = Path(args.output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(artifact, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"Graph artifact saved to: {output_path.resolve()}")
    print(
        "Counts:",
        f"nodes={len(artifact['nodes'])}",
        f"edges={len(artifact['edges'])}",
        f"bidirectional={len(artifact['bidirectional'])}",
        f"unresolved={len(artifact['unresolved'])}",
    )
    return 0
