from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .config import DEFAULT_ITEM_LIMIT
from .config_patch import patch_config_file
from .errors import SkinFetchError, UsageError
from .runner import run_batch


def configure_logging(level: str = "INFO", log_file: Optional[Path] = None) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> {message}")
    if log_file is not None:
        logger.add(log_file, level="DEBUG", encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="skinfetch",
        description="Import weapon skins from an inspect link or a whole inventory into a config file.",
        epilog="For profiles with a custom link both -p and -sid are required.",
    )
    ap.add_argument("-i", "--inspect", dest="inspect_url",
                    help="Inspect link of a single item")
    ap.add_argument("-p", "--profile",
                    help="Custom profile name (steamcommunity.com/id/<name>)")
    ap.add_argument("-sid", "--steam-id", dest="steam_id",
                    help="SteamID64 of the profile")
    ap.add_argument("-l", "--limit", type=int, default=DEFAULT_ITEM_LIMIT,
                    help="Max inventory items to fetch (default: %(default)s)")
    ap.add_argument("-r", "--retry", action="store_true",
                    help="Retry items the inspection API rejected, once")
    ap.add_argument("-o", "--output", type=Path, required=True,
                    help="Config file to insert the items into")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--log-file", type=Path, default=None)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    start = time.perf_counter()

    if args.limit < 0:
        logger.error("Limit must be >= 0")
        return 2

    try:
        records = run_batch(
            inspect_url=args.inspect_url,
            profile=args.profile,
            steam_id=args.steam_id,
            limit=args.limit,
            retry_rejects=args.retry,
        )
    except UsageError as e:
        logger.error("{}. Use -i, or -p together with -sid", e)
        return 2
    except (SkinFetchError, ValueError) as e:
        logger.error("Aborting: {}", e)
        return 1

    try:
        patch_config_file(args.output, records)
    except (SkinFetchError, OSError) as e:
        logger.error("Could not update config: {}", e)
        return 1

    logger.info("Done! (Everything took {:.2f}s)", time.perf_counter() - start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
