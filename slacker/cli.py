"""Send one Slack notification from the command line.

Usage examples:
  # SLACKER_HOOK_URL / SLACKER_RECIPIENTS are read from the environment or .env
  python -m slacker.cli "disk full" --tag disk --frequency once_per_hour

  # recipients on the command line (channel:username), repeatable
  python -m slacker.cli "deploy done" --to "#ops:@here" --to "#dev:"
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from slacker.config.settings import Settings
from slacker.core.config_builder import build_config_from_settings
from slacker.core.errors import SlackerError
from slacker.core.notifier import Slacker


def _parse_recipient(raw: str) -> tuple[str, str]:
    channel, _, username = raw.partition(":")
    if not channel:
        raise argparse.ArgumentTypeError(f"invalid recipient {raw!r}, expected channel:username")
    return channel, username


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Send a deduplicated Slack webhook notification")
    ap.add_argument("message", help="Message text")
    ap.add_argument("--hook-url", default=None, help="Webhook URL (default: SLACKER_HOOK_URL)")
    ap.add_argument("--to", action="append", type=_parse_recipient, default=None,
                    help="Recipient as channel:username, repeatable (default: SLACKER_RECIPIENTS)")
    ap.add_argument("--tag", default=None, help="Message tag")
    ap.add_argument("--frequency", default=None, help="always / once_per_hour / once_per_day")
    ap.add_argument("--db", default=None, help="Record file path")
    ap.add_argument("--icon", default=None, help="Icon emoji")
    ap.add_argument("--from", dest="username", default=None, help="Sender display name")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
        logging.basicConfig(
            level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        config = build_config_from_settings(
            settings,
            hook_url=args.hook_url,
            recipients=args.to,
            icon_emoji=args.icon,
            username=args.username,
            frequency=args.frequency,
            message_tag=args.tag,
            database_file_path=args.db,
        )
        with Slacker(config) as slacker:
            slacker.send(args.message)
    except (SlackerError, ValueError) as e:
        # ValueError: pydantic-settings 가 SLACKER_* 값을 해석하지 못한 경우
        logging.getLogger("slacker").error("%s", e)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
