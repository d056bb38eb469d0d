"""Main CLI application for the YouTube video storage."""
import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from adapters.local_storage import LocalFileStorage
from adapters.uploaded_file import UploadedFile
from adapters.youtube_storage import YouTubeStorage
from app.config import get_config
from domain.models import UrlType
from ports.adapter_error import AdapterError


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging.

    Args:
        verbose: Enable debug logging if True.
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from Google API client
    logging.getLogger("googleapiclient").setLevel(logging.WARNING)
    logging.getLogger("google").setLevel(logging.WARNING)


def create_storage() -> YouTubeStorage:
    """
    Create YouTubeStorage wired to a local original storage.

    Returns:
        Configured YouTubeStorage instance.

    Raises:
        ConfigurationError: If credentials are missing or invalid.
    """
    logger = logging.getLogger(__name__)
    config = get_config()

    original_storage = LocalFileStorage(
        config.storage_base_path,
        base_url=config.storage_base_url,
    )
    logger.debug(f"Original storage initialized: {config.storage_base_path}")

    return YouTubeStorage(
        original_storage=original_storage,
        client_id=config.client_id,
        client_secret=config.client_secret,
        refresh_token=config.refresh_token,
        channel_id=config.channel_id,
        default_privacy=config.default_privacy,
        request_options={"num_retries": config.num_retries},
    )


def parse_args(argv: list[str] | None = None):
    """
    Parse command-line arguments.

    Args:
        argv: List of command-line arguments (defaults to sys.argv)

    Returns:
        Parsed arguments object
    """
    parser = argparse.ArgumentParser(
        description="YouTube Storage - Store videos on YouTube with a local original copy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  YOUTUBE_CLIENT_ID         OAuth2 client id (required)
  YOUTUBE_CLIENT_SECRET     OAuth2 client secret (required)
  YOUTUBE_REFRESH_TOKEN     OAuth2 refresh token (required, see utils/obtain_refresh_token.py)
  YOUTUBE_CHANNEL_ID        Channel id (default: the account's only channel)
  YOUTUBE_DEFAULT_PRIVACY   public, unlisted or private (default: private)
  YOUTUBE_NUM_RETRIES       Retries per API request (default: 0)
  STORAGE_BASE_PATH         Original storage directory (default: .data/storage)
  STORAGE_BASE_URL          Original storage URL prefix (default: file:// URIs)

Examples:
  python -m app.main upload video.mp4 --title "My Video"
  python -m app.main republish VIDEO_ID --title "My Video"
  python -m app.main exists VIDEO_ID
  python -m app.main url VIDEO_ID --type embed
  python -m app.main update VIDEO_ID --description "New description"
  python -m app.main delete VIDEO_ID
  python -m app.main clear --yes
        """,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    upload = subparsers.add_parser("upload", help="Upload a video file")
    upload.add_argument("file", help="Path to video file to upload")
    upload.add_argument("--title", default=None, help="Video title (default: file name)")
    upload.add_argument("--description", default=None, help="Video description")

    republish = subparsers.add_parser("republish", help="Upload content held in the original storage as a new video")
    republish.add_argument("key", help="Original storage key (video id of an earlier upload)")
    republish.add_argument("--title", default=None, help="Video title (default: the key)")

    exists = subparsers.add_parser("exists", help="Check if a video exists")
    exists.add_argument("id", help="YouTube video id")

    delete = subparsers.add_parser("delete", help="Delete a video")
    delete.add_argument("id", help="YouTube video id")

    url = subparsers.add_parser("url", help="Print a video URL")
    url.add_argument("id", help="YouTube video id")
    url.add_argument(
        "--type",
        default=UrlType.WATCH.value,
        choices=[t.value for t in UrlType],
        help="URL type (default: watch)",
    )

    update = subparsers.add_parser("update", help="Update video title or description")
    update.add_argument("id", help="YouTube video id")
    update.add_argument("--title", default=None, help="New title")
    update.add_argument("--description", default=None, help="New description")

    clear = subparsers.add_parser("clear", help="Delete ALL videos of the channel and the original storage")
    clear.add_argument("--yes", action="store_true", help="Confirm deleting everything")

    return parser.parse_args(argv)


def run_command(storage: YouTubeStorage, args) -> int:
    """
    Execute a parsed command against the storage.

    Returns:
        Process exit code.
    """
    if args.command == "upload":
        path = Path(args.file)
        if not path.is_file():
            print(f"Error: Video file not found: {args.file}", file=sys.stderr)
            return 1

        snippet = {"title": args.title or path.name}
        if args.description is not None:
            snippet["description"] = args.description

        with open(path, "rb") as f:
            result = storage.upload(f, path.name, {"filename": path.name, "youtube": snippet})

        print(f"Uploaded video successfully. id={result.id}")
        print(f"Watch at: {storage.url(result.id)}")
        return 0

    if args.command == "republish":
        if not storage.original_storage.exists(args.key):
            print(f"Error: Nothing stored under key: {args.key}", file=sys.stderr)
            return 1

        snippet = {"title": args.title or args.key}
        with UploadedFile(storage.original_storage, args.key) as source:
            result = storage.upload(source, args.key, {"filename": args.key, "youtube": snippet})

        print(f"Republished {args.key} as id={result.id}")
        print(f"Watch at: {storage.url(result.id)}")
        return 0

    if args.command == "exists":
        found = storage.exists(args.id)
        print("yes" if found else "no")
        return 0 if found else 1

    if args.command == "delete":
        storage.delete(args.id)
        print(f"Deleted video {args.id}")
        return 0

    if args.command == "url":
        print(storage.url(args.id, type=args.type))
        return 0

    if args.command == "update":
        snippet = {}
        if args.title is not None:
            snippet["title"] = args.title
        if args.description is not None:
            snippet["description"] = args.description
        if not snippet:
            print("Nothing to update: pass --title and/or --description", file=sys.stderr)
            return 2

        video = storage.update(args.id, {"youtube": snippet})
        print(json.dumps(video.get("snippet", {}), indent=2, ensure_ascii=False))
        return 0

    if args.command == "clear":
        if not args.yes:
            print("Refusing to clear without --yes", file=sys.stderr)
            return 2
        storage.clear()
        print("Cleared all videos")
        return 0

    print(f"Unknown command: {args.command}", file=sys.stderr)
    return 2


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = parse_args(argv)

    # Load environment variables
    env_file = Path(".env")
    if env_file.exists():
        load_dotenv(env_file)

    setup_logging(verbose=args.verbose)
    logger = logging.getLogger(__name__)

    try:
        storage = create_storage()
        exit_code = run_command(storage, args)

    except AdapterError as e:
        logger.error(f"{e}")
        sys.exit(1)

    except KeyboardInterrupt:
        logger.warning("\nInterrupted by user")
        sys.exit(130)

    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
