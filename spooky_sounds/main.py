# spooky_sounds/main.py
import argparse
import logging
import sys

from spooky_sounds.assets import make_asset_source
from spooky_sounds.config import (
    FAILURE_POLICIES,
    INTERVAL_UNITS,
    SpookyConfig,
    load_config,
)
from spooky_sounds.decoder import WavDecoder
from spooky_sounds.errors import DecodeError, PlaybackError
from spooky_sounds.loop import FailurePolicy, SoundLoop
from spooky_sounds.player import SoundPlayer, list_devices
from spooky_sounds.selector import Selector, SoundCatalog

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spooky-sounds",
        description="Play a random spooky sound every now and then.",
    )
    parser.add_argument(
        "--device",
        help="Device where the spooky sounds will be played "
             "(see --list-devices, default bluealsa)",
    )
    parser.add_argument(
        "--maximum-interval", "--maximumInterval",
        dest="maximum_interval", type=int,
        help="Maximum interval before the next sound is played (default 15)",
    )
    parser.add_argument(
        "--interval-unit", choices=sorted(INTERVAL_UNITS),
        help="Unit of --maximum-interval (default minutes)",
    )
    parser.add_argument(
        "--sounds-dir",
        help="Read <name>.wav files from this directory instead of the bundled sounds",
    )
    parser.add_argument(
        "--failure-policy", choices=FAILURE_POLICIES,
        help="abort on any error, or skip sounds that fail to decode (default abort)",
    )
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument(
        "--list-devices", action="store_true", help="List audio devices and exit"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def resolve_config(args: argparse.Namespace) -> SpookyConfig:
    """Defaults, then the YAML file, then explicit command-line flags."""
    config = load_config(args.config)
    if args.device is not None:
        config.device = args.device
    if args.maximum_interval is not None:
        config.maximum_interval = args.maximum_interval
    if args.interval_unit is not None:
        config.interval_unit = args.interval_unit
    if args.failure_policy is not None:
        config.failure_policy = args.failure_policy
    if args.sounds_dir is not None:
        config.assets.sounds_dir = args.sounds_dir
    config.validate()
    return config


def build_loop(config: SpookyConfig) -> SoundLoop:
    return SoundLoop(
        selector=Selector(SoundCatalog(config.catalog)),
        decoder=WavDecoder(make_asset_source(config)),
        player=SoundPlayer(),
        device=config.device,
        maximum_interval=config.maximum_interval,
        interval_seconds=config.interval_seconds,
        failure_policy=FailurePolicy(config.failure_policy),
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.list_devices:
        print(list_devices())
        return

    try:
        config = resolve_config(args)
    except (OSError, TypeError, ValueError) as e:
        parser.error(f"invalid configuration: {e}")

    loop = build_loop(config)
    logger.info(
        "Spooky sounds starting on %s, up to %d %s between sounds",
        config.device, config.maximum_interval, config.interval_unit,
    )
    try:
        loop.run()
    except DecodeError as e:
        logger.error("Failed to load sound %s: %s", e.sound, e)
        sys.exit(1)
    except PlaybackError as e:
        logger.error("Failed to play on device %s: %s", e.device, e)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        sys.exit(130)


if __name__ == "__main__":
    main()
