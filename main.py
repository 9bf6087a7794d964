import argparse
import logging

from icecream import ic

from core.config import get_settings


def main() -> None:
    parser = argparse.ArgumentParser(description="GitHub Profile Finder")

    parser.add_argument(
        "--user",
        "-u",
        default=None,
        help="Username to look up on start (default: start with an empty search)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable icecream traces and debug logging",
    )
    args = parser.parse_args()

    ic.configureOutput(prefix="🍦 DEBUG | ")
    if not args.debug:
        ic.disable()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from client.app import ClientApp

    app = ClientApp(get_settings(), args.user)
    app.run()


if __name__ == "__main__":
    main()
