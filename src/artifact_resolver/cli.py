"""
Command-line interface for artifact resolution.

    artifact-resolver resolve --name "Berliner Gramophone" --matched --registry registry.csv
    artifact-resolver analyze --image-url https://example.org/photo.jpg
"""
import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from .config_loader import load_config_from_env
from .config_validator import validate_path, validate_threshold
from .exceptions import ArtifactResolverError
from .models import Guess
from .service import ArtifactResolutionService, create_resolution_service

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="artifact-resolver",
        description="Resolve a vision model's artifact guess against the museum registry.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser("resolve", help="Resolve an existing guess")
    resolve_parser.add_argument("--name", required=True, help="Guessed artifact name")
    resolve_parser.add_argument("--date", default=None, help="Guessed date")
    resolve_parser.add_argument("--description", default=None, help="Guessed description")
    resolve_parser.add_argument(
        "--matched", action="store_true",
        help="The guess claims to match a registry item",
    )
    resolve_parser.add_argument(
        "--suggest", action="store_true",
        help="Also print the closest registry names",
    )
    _add_registry_arguments(resolve_parser)

    analyze_parser = subparsers.add_parser("analyze", help="Identify an artifact photo")
    analyze_parser.add_argument("--image-url", required=True, help="Public URL of the photo")
    _add_registry_arguments(analyze_parser)

    return parser


def _add_registry_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--registry", default=None, help="Registry CSV export")
    source.add_argument("--registry-url", default=None, help="Published registry sheet CSV URL")
    parser.add_argument("--threshold", type=float, default=None, help="Match threshold (0.0-1.0)")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        config = load_config_from_env()
        if args.registry:
            config = replace(
                config,
                registry_csv_path=validate_path(args.registry, "--registry", must_exist=True),
                registry_csv_url=None,
            )
        elif args.registry_url:
            config = replace(config, registry_csv_url=args.registry_url)
        if args.threshold is not None:
            config = replace(config, match_threshold=validate_threshold(
                args.threshold, "--threshold"
            ))

        if args.command == "resolve":
            service = ArtifactResolutionService(config)
            guess = Guess(
                name=args.name,
                date=args.date,
                description=args.description,
                matched=args.matched,
            )
            output = service.resolve_guess(guess).to_dict()
            if args.suggest:
                output["suggestions"] = [
                    {"id": s.entry_id, "name": s.name, "similarity": round(s.similarity, 3)}
                    for s in service.suggest(guess.name)
                ]
        else:
            service = create_resolution_service(config)
            output = service.analyze(args.image_url).to_dict()
    except ArtifactResolverError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
