"""
Load the example MongoDB config from the environment (and an optional .env
file) and print the result.

    python -m envconfig --env-file ../.env
"""

import argparse
import logging
import sys

from envconfig.errors import ConfigError
from envconfig.loader import DEFAULT_DOTENV_PATH, load_config
from envconfig.schemas import MongoConfig


def _mask(secret: str) -> str:
    return "*" * 8 if secret else ""


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Load MongoConfig from environment variables")
    parser.add_argument("--env-file", default=DEFAULT_DOTENV_PATH,
        help="Path to a .env file to seed from (existing variables win)")
    parser.add_argument("--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        cfg = load_config(MongoConfig, dotenv_path=args.env_file)
    except ConfigError as e:
        print(f"Error initializing config: {e}", file=sys.stderr)
        return 1

    print(f"MongoDB Host: {cfg.host}")
    print(f"MongoDB Port: {cfg.port}")
    print(f"MongoDB User: {cfg.user}")
    print(f"MongoDB Password: {_mask(cfg.password)}")
    print(f"Debug Mode: {str(cfg.debug_mode).lower()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
