from typing import List
import argparse
import aiohttp
import asyncio
import logging

logger = logging.getLogger(__name__)

from social.graze.webfinger.app.cli import configure_logging
from social.graze.webfinger.app.config import Settings
from social.graze.webfinger.app.server import init_sentry
from social.graze.webfinger.errors import WebfingerError
from social.graze.webfinger.resolve.fetch import resolve


async def realMain() -> None:
    parser = argparse.ArgumentParser(
        prog="webfinger", description="Fetch WebFinger resources"
    )
    parser.add_argument(
        "identifier",
        nargs="+",
        help="The identifier(s) to resolve, e.g. carol@example.com or group:friends@example.com.",
    )
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Fetch over plain HTTP instead of HTTPS.",
    )

    args = vars(parser.parse_args())

    identifiers: List[str] = args.get("identifier", [])

    settings = Settings()
    init_sentry(settings)
    with_https = settings.with_https and not args.get("insecure", False)

    timeout = aiohttp.ClientTimeout(total=settings.request_timeout)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        for identifier in identifiers:
            try:
                webfinger = await resolve(session, identifier, with_https)
                print(webfinger.to_json())
            except WebfingerError as e:
                logger.error("Cannot resolve %s: %s", identifier, e)
            except Exception:
                logging.exception("Exception resolving identifier %s", identifier)


def main() -> None:
    configure_logging()
    asyncio.run(realMain())


if __name__ == "__main__":
    main()
