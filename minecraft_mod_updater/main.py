"""Main application entry point."""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from minecraft_mod_updater import __version__
from minecraft_mod_updater.core import ModPack, ModPackUpdater, UpdateResult
from minecraft_mod_updater.core.modpack import MODPACK_URL
from minecraft_mod_updater.utils import (
    CONFIG_FILE,
    Config,
    countdown,
    default_mods_directory,
    setup_logger,
)


EXIT_COUNTDOWN = 20


def build_parser() -> argparse.ArgumentParser:
    """Command line options."""
    parser = argparse.ArgumentParser(
        prog="minecraft-mod-updater",
        description="Replace your Minecraft mods folder with the latest server mod pack.",
    )
    parser.add_argument("--config", type=Path, default=CONFIG_FILE,
                        help=f"settings file (default: {CONFIG_FILE})")
    parser.add_argument("--url", default=MODPACK_URL,
                        help="mod pack zip to download")
    parser.add_argument("-y", "--yes", action="store_true",
                        help="use the configured mods directory without asking")
    parser.add_argument("--countdown", type=int, default=EXIT_COUNTDOWN, metavar="SECONDS",
                        help=f"seconds to wait before exiting (default: {EXIT_COUNTDOWN})")
    parser.add_argument("--log-file", type=Path, default=None,
                        help="also write the log to this file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="show debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def print_launcher_notes(result: UpdateResult, modpack: ModPack) -> None:
    """Remind MultiMC users what to set on their instance."""
    print("\n\n\n===== ADDITIONAL STEPS IF USING MultiMC =====\n")
    print(f"  1) Make sure the 'instance' version of minecraft is: {result.config.version}")
    print("  2) Make sure the 'instance' version of FABRIC is up to date.")
    print(f"    ({modpack.installer_jar.name} is bundled with this)")
    print("===== ===== ===== ===== ===== ===== ===== =====")


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    logger = setup_logger(
        "minecraft_mod_updater",
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_file=args.log_file,
    )

    try:
        if not args.config.exists():
            logger.info(f"No config at {args.config}, creating one with defaults")
        config = Config.load(args.config, default_directory=default_mods_directory())

        modpack = ModPack(url=args.url)
        updater = ModPackUpdater(
            config,
            args.config,
            modpack=modpack,
            auto_confirm=args.yes,
        )
        result = updater.run()
    except Exception as e:
        logger.error(f"Update failed: {e}", exc_info=True)
        raise

    if not result.succeeded:
        return result.exit_code

    print_launcher_notes(result, modpack)
    countdown(args.countdown)
    return 0


if __name__ == "__main__":
    sys.exit(main())
