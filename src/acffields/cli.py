"""
Command-line interface and entry points for acffields.

Usage:
    acffields fields user 42 --config reader.yaml
    acffields fields taxonomy category:7 --config reader.yaml
    acffields fields option --config reader.yaml
    acffields validate reader.yaml
"""

import argparse
import json
import sys
import uuid
from typing import Any, Dict, Optional

from acffields.core.entity_keys import ENTITY_KINDS
from acffields.core.logger import configure_root_logger, get_logger, push_request_id, reset_request_id
from acffields.factory import build_provider, build_reader
from acffields.models.reader_config import load_config

logger = get_logger(__name__)


def _coerce_ident(ident: Optional[str]) -> Any:
    if ident is not None and ident.isdigit():
        return int(ident)
    return ident


def main(
    kind: str,
    ident: Optional[Any] = None,
    *,
    config_path: Optional[str] = None,
    config_dict: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Look up all field values of one entity.

    Args:
        kind: Entity kind (post, comment, attachment, taxonomy, user, widget, option)
        ident: Entity identifier; ``taxonomy:term_id`` for terms
        config_path: Path to JSON/YAML reader configuration
        config_dict: Direct configuration dictionary

    Returns:
        Result with the entity, provider status and the field mapping

    Example:
        >>> from acffields.cli import main
        >>> main("user", 42, config_dict={"provider": {"kind": "file", "path": "fields.yaml"}})
        {'entity': 'user', 'id': 42, 'active': True, 'fields': {...}}
    """
    config = load_config(path=config_path, data=config_dict)
    configure_root_logger(config.log_level)

    reader = build_reader(config)
    token = push_request_id(uuid.uuid4().hex[:12])
    try:
        logger.info(f"Reading {kind} fields for {ident!r}")
        fields = reader.get_fields(kind, ident)
        result: Dict[str, Any] = {
            "entity": kind,
            "id": ident,
            "active": reader.is_active(),
            "fields": fields,
        }
        logger.info(f"Read {len(fields)} field(s)")
        return result
    finally:
        close = getattr(reader.provider, "close", None)
        if callable(close):
            close()
        reset_request_id(token)


def validate_config(config_path: str) -> bool:
    """
    Validate a reader configuration without performing a lookup.

    Raises:
        Exception: If the configuration is invalid or names an unknown provider
    """
    logger.info(f"Validating config: {config_path}")
    config = load_config(path=config_path)
    provider = build_provider(config.provider)
    close = getattr(provider, "close", None)
    if callable(close):
        close()
    logger.info("Configuration is valid")
    return True


def cli(argv: Optional[list] = None) -> None:
    """Command-line interface for acffields."""
    parser = argparse.ArgumentParser(
        prog="acffields",
        description="Read all custom field values of a CMS entity",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    fields_parser = subparsers.add_parser("fields", help="Print the fields of an entity as JSON")
    fields_parser.add_argument("kind", choices=ENTITY_KINDS, help="Entity kind")
    fields_parser.add_argument("ident", nargs="?", help="Entity id (taxonomy:term_id for terms)")
    fields_parser.add_argument("--config", "-c", help="Path to configuration file (JSON or YAML)")

    validate_parser = subparsers.add_parser("validate", help="Validate a configuration file")
    validate_parser.add_argument("config", help="Path to configuration file (JSON or YAML)")

    args = parser.parse_args(argv)

    if args.command == "fields":
        try:
            result = main(args.kind, _coerce_ident(args.ident), config_path=args.config)
        except Exception as e:
            logger.error(f"Lookup failed: {e}")
            sys.exit(1)
        print(json.dumps(result["fields"], indent=2, default=str))
        sys.exit(0)

    elif args.command == "validate":
        try:
            validate_config(args.config)
        except Exception as e:
            logger.error(f"Validation failed: {e}")
            sys.exit(1)
        sys.exit(0)

    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":
    cli()
