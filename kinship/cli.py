"""Command-line interface for the kinship engine.

Works on a JSON dump of artwork records (a list of objects with ``id``,
``title``, ``features``, ``medium``, ``year``, ``file_type``, ...).

Usage:
    python -m kinship.cli --artworks data/artworks.json kinship a1
    python -m kinship.cli --artworks data/artworks.json search sketch.html
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from kinship.core.use_cases import (
    CalculateKinshipUseCase,
    GetRelatedWorksUseCase,
    SearchSimilarFilesUseCase,
)
from kinship.infrastructure.database import InMemoryArtworkRepository
from kinship.utils import configure_logging, get_logger, load_config, log_execution_time
from kinship.utils.config import AppConfig
from kinship.utils.exceptions import AppException

logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Compute artwork kinship and file-similarity rankings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Link an artwork to related works
  python -m kinship.cli --artworks artworks.json kinship a1

  # Link, then list the strongest related works
  python -m kinship.cli --artworks artworks.json related a1 --limit 5

  # Find works similar to an uploaded file with a feature vector
  python -m kinship.cli --artworks artworks.json search piece.png --features "[0.1, 0.9]"
        """
    )

    parser.add_argument(
        '--artworks',
        type=Path,
        required=True,
        help='JSON file containing a list of artwork records'
    )

    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Path to configuration file (default: KINSHIP_CONFIG or built-in defaults)'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default=None,
        help='Override log level'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    kinship_parser = subparsers.add_parser('kinship', help='Compute kinship for an artwork')
    kinship_parser.add_argument('artwork_id', help='ID of the source artwork')

    related_parser = subparsers.add_parser('related', help='Compute kinship, then list related works')
    related_parser.add_argument('artwork_id', help='ID of the source artwork')
    related_parser.add_argument('--limit', type=int, default=None, help='Maximum related works')

    search_parser = subparsers.add_parser('search', help='Rank artworks against an uploaded file')
    search_parser.add_argument('filename', help='Name of the uploaded file')
    search_parser.add_argument('--features', type=str, default=None, help='Feature vector as JSON list')

    return parser.parse_args(argv)


def _resolve_config(config_path: Optional[Path]) -> AppConfig:
    if config_path is not None or os.environ.get('KINSHIP_CONFIG'):
        return load_config(config_path)
    return AppConfig()


def run(args: argparse.Namespace) -> dict:
    """Execute the selected command and return a JSON-serializable payload."""
    config = _resolve_config(args.config)
    configure_logging(args.log_level or config.log_level)

    repository = InMemoryArtworkRepository.from_json(args.artworks)

    if args.command == 'search':
        use_case = SearchSimilarFilesUseCase(repository, config.ranker)
        with log_execution_time(logger, "file similarity search"):
            return use_case.execute(args.filename, args.features).to_dict()

    with log_execution_time(logger, "kinship calculation"):
        result = CalculateKinshipUseCase(repository, config.kinship).execute(args.artwork_id)

    if args.command == 'kinship':
        return result.to_dict()

    related = GetRelatedWorksUseCase(repository, limit=config.related_limit)
    return {
        "artwork_id": args.artwork_id,
        "related": [
            {
                "artwork_id": work.artwork_id,
                "similarity_score": work.similarity_score,
                "method": work.relationship.method.value,
            }
            for work in related.execute(args.artwork_id, limit=args.limit)
        ],
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_args(argv)

    try:
        payload = run(args)
    except AppException as e:
        logger.error(f"Command failed: {e}")
        print(json.dumps(e.to_dict(), indent=2, default=str))
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        error = {"error_type": type(e).__name__, "message": str(e), "code": "INTERNAL_ERROR"}
        print(json.dumps(error, indent=2))
        return 1

    print(json.dumps(payload, indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
