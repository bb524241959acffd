import argparse
import logging
import sys

import pygame
from pydantic import ValidationError

from .config import BounceConfig, load_config
from .simulator import run_game


def main(argv=None):
    parser = argparse.ArgumentParser(description="Bouncing DVD logo screensaver")
    parser.add_argument("--config", type=str, default=None, help="Path to the configuration file")
    parser.add_argument("--duration", type=float, default=None, help="Quit after this many seconds")
    parser.add_argument("--verbose", action="store_true", help="Log every bounce")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.duration is not None:
            # model_copy skips validation, so rebuild through the model
            config = BounceConfig.model_validate({**config.model_dump(), "duration": args.duration})
    except ValidationError as e:
        print(f"[-] Invalid configuration:\n{e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"[-] Could not read configuration: {e}", file=sys.stderr)
        return 1

    try:
        run_game(config)
    except (pygame.error, FileNotFoundError) as e:
        print(f"[-] Could not start: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
