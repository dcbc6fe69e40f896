"""
Command-line interface for Bookmark Pinner.

This module wires configuration, logging and the capture command together
behind the ``bookmark-pinner`` entry point.
"""

import argparse
import logging
import sys
import webbrowser
from pathlib import Path

from bookmark_pinner import __version__
from bookmark_pinner.config.pydantic_config import (
    ConfigurationManager,
    format_config_error,
)
from bookmark_pinner.core.bookmark_form import BookmarkForm
from bookmark_pinner.core.capture import CaptureCommand
from bookmark_pinner.core.metadata_fetcher import MetadataFetcher
from bookmark_pinner.core.pinboard_client import PinboardClient
from bookmark_pinner.core.preferences import PreferenceStore
from bookmark_pinner.core.source_resolver import AppleScriptTabQuery, SourceResolver
from bookmark_pinner.utils.error_handler import ValidationError
from bookmark_pinner.utils.logging_setup import setup_logging
from bookmark_pinner.utils.validation import (
    validate_config_file,
    validate_url_argument,
)


class CLIInterface:
    """Command line interface for capturing a bookmark."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser."""
        parser = argparse.ArgumentParser(
            prog="bookmark-pinner",
            description=(
                "Bookmark Pinner - pin the page in your browser to Pinboard"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  bookmark-pinner
  bookmark-pinner --url https://example.com --tags python,reading
  bookmark-pinner --yes --read-later
  bookmark-pinner --open-site

URL Detection:
  If the clipboard holds a URL it is used. Otherwise the active tab of the
  frontmost browser (Safari, Webkit, Brave Browser, Google Chrome) is used.
  When neither yields a URL the command exits quietly.

Configuration:
  Settings are read from ~/.config/bookmark-pinner/config.toml, or the file
  given with --config. The API token can also come from the
  PINBOARD_API_TOKEN environment variable.

  Example configuration:
  [pinboard]
  api_token = "username:HEX"

  [network]
  timeout = 30
            """,
        )

        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )
        parser.add_argument(
            "--create-config",
            metavar="PATH",
            help="Write a sample TOML configuration file to PATH and exit",
        )
        parser.add_argument(
            "--config",
            "-c",
            help="Configuration file path (TOML or JSON)",
        )
        parser.add_argument(
            "--url",
            "-u",
            help="Bookmark this URL instead of detecting the active page",
        )
        parser.add_argument(
            "--tags",
            "-t",
            help="Initial tags (comma-separated)",
        )
        parser.add_argument(
            "--private",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Mark the bookmark private for this run",
        )
        parser.add_argument(
            "--read-later",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Mark the bookmark read-later for this run",
        )
        parser.add_argument(
            "--yes",
            "-y",
            action="store_true",
            help="Submit the pre-populated bookmark without prompting",
        )
        parser.add_argument(
            "--open-site",
            action="store_true",
            help="Open Pinboard in the browser and exit",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Show log output on the console",
        )

        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> dict:
        """
        Validate all arguments and return processed values.

        Raises:
            ValidationError: If any validation fails
        """
        return {
            "config_path": validate_config_file(args.config),
            "url": validate_url_argument(args.url),
            "tags": args.tags,
            "private": args.private,
            "read_later": args.read_later,
            "interactive": not args.yes,
            "open_site": args.open_site,
            "verbose": args.verbose,
        }

    def build_command(
        self, manager: ConfigurationManager, validated_args: dict
    ) -> CaptureCommand:
        """Assemble the capture command from configuration."""
        config = manager.config

        resolver = SourceResolver(
            tab_query=AppleScriptTabQuery(osascript_path=config.resolver.osascript_path),
            use_selection=config.resolver.use_selection,
        )
        fetcher = MetadataFetcher(
            timeout=config.network.timeout,
            verify_ssl=config.network.verify_ssl,
        )
        client = PinboardClient(
            api_token=manager.get_api_token(),
            base_url=config.pinboard.api_base_url,
            timeout=config.network.timeout,
        )
        form = BookmarkForm(
            client=client,
            preferences=PreferenceStore(config.preferences.path),
            site_url=config.pinboard.site_url,
        )

        return CaptureCommand(
            resolver=resolver,
            fetcher=fetcher,
            form=form,
            interactive=validated_args["interactive"],
            url=validated_args["url"],
            tags=validated_args["tags"],
            private=validated_args["private"],
            read_later=validated_args["read_later"],
        )

    def _handle_create_config(self, output: str) -> int:
        output_path = Path(output)
        if output_path.exists():
            print(f"Configuration file '{output_path}' already exists", file=sys.stderr)
            return 1

        ConfigurationManager.create_sample_config(
            output_path, format="json" if output_path.suffix == ".json" else "toml"
        )
        print(f"Created configuration file: {output_path}")
        print("Edit it to add your Pinboard API token.")
        return 0

    def run(self, args=None) -> int:
        """Execute CLI interface."""
        try:
            parsed_args = self.parse_args(args)

            if parsed_args.create_config:
                return self._handle_create_config(parsed_args.create_config)

            validated_args = self.validate_args(parsed_args)
            setup_logging(verbose=validated_args["verbose"])
            logger = logging.getLogger(__name__)

            manager = ConfigurationManager(validated_args["config_path"])

            if validated_args["open_site"]:
                webbrowser.open(manager.config.pinboard.site_url)
                return 0

            if not manager.has_api_token():
                logger.warning("No Pinboard API token configured")

            command = self.build_command(manager, validated_args)
            try:
                result = command.run()
            finally:
                command.form.client.close()

            if result.aborted and result.bookmark is None:
                logger.info("No URL resolved, nothing to bookmark")
            return result.exit_code

        except ValidationError as e:
            print(f"Validation Error: {e}", file=sys.stderr)
            return 1
        except FileNotFoundError as e:
            print(format_config_error(e), file=sys.stderr)
            return 1
        except ValueError as e:
            # Configuration problems arrive pre-formatted
            print(str(e), file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            return 130


def main(args=None) -> int:
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
