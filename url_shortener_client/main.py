"""
Command-line interface for the URL shortener client.

Usage:
    url-shortener shorten <long_url>
    url-shortener expand <short_url>
    url-shortener analytics <short_url> [--format xml|json]

The API key is read from --api-key or the SHORTENER_API_KEY setting.
"""

import argparse
import logging
import sys
from typing import List, Optional

from url_shortener_client import __version__
from url_shortener_client.core.exceptions import URLShortenerClientError
from url_shortener_client.core.setting import settings
from url_shortener_client.services.url_service import URLShortenerClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="url-shortener",
        description="URL Shortener API client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten http://www.example.com/long/path

  # Expand a short URL
  %(prog)s expand http://goo.gl/fbsS

  # Get click analytics as XML
  %(prog)s analytics http://goo.gl/fbsS
        """
    )

    parser.add_argument(
        "--api-key",
        default=settings.SHORTENER_API_KEY,
        help="API key (default: from SHORTENER_API_KEY env)"
    )
    parser.add_argument(
        "--api-url",
        default=settings.SHORTENER_API_URL,
        help=f"API endpoint (default: {settings.SHORTENER_API_URL})"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log HTTP requests"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a long URL")
    shorten_parser.add_argument("url", help="URL to shorten")

    expand_parser = subparsers.add_parser("expand", help="Expand a short URL")
    expand_parser.add_argument("url", help="Short URL to expand")

    analytics_parser = subparsers.add_parser("analytics", help="Get click analytics for a short URL")
    analytics_parser.add_argument("url", help="Short URL to get analytics for")
    analytics_parser.add_argument(
        "--format",
        choices=["xml", "json"],
        default="xml",
        help="Output format (default: xml)"
    )

    return parser


def run(client: URLShortenerClient, args: argparse.Namespace) -> str:
    """Execute the parsed command and return its output."""
    if args.command == "shorten":
        return client.shorten(args.url)
    if args.command == "expand":
        return client.expand(args.url)
    if args.format == "json":
        report = client.get_analytics_report(args.url)
        return report.model_dump_json(by_alias=True, exclude_none=True, indent=2)
    return client.get_analytics(args.url).rstrip("\n")


def main(argv: Optional[List[str]] = None, client: Optional[URLShortenerClient] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        if client is None:
            client = URLShortenerClient(
                args.api_key,
                api_url=args.api_url,
                timeout=settings.REQUEST_TIMEOUT,
            )
        with client:
            print(run(client, args))
        return 0
    except URLShortenerClientError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
