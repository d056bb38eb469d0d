#!/usr/bin/env python3
"""Run the OAuth2 installed-app flow and print a YouTube refresh token."""

import os
import sys

from dotenv import load_dotenv
from google_auth_oauthlib.flow import InstalledAppFlow

SCOPES = ["https://www.googleapis.com/auth/youtube"]


def main():
    load_dotenv()

    secrets_file = sys.argv[1] if len(sys.argv) > 1 else os.getenv(
        "YOUTUBE_CLIENT_SECRETS_FILE", "client_secrets.json"
    )
    if not os.path.exists(secrets_file):
        print(f"ERROR: Client secrets file not found: {secrets_file}", file=sys.stderr)
        print("Download OAuth2 credentials (Desktop app) from Google Cloud Console.", file=sys.stderr)
        sys.exit(1)

    flow = InstalledAppFlow.from_client_secrets_file(secrets_file, SCOPES)
    # offline access + consent prompt so Google always returns a refresh token
    credentials = flow.run_local_server(port=0, access_type="offline", prompt="consent")

    if not credentials.refresh_token:
        print("ERROR: No refresh token returned", file=sys.stderr)
        sys.exit(1)

    print("Add these to your .env file:")
    print("=" * 50)
    print(f"YOUTUBE_CLIENT_ID={credentials.client_id}")
    print(f"YOUTUBE_CLIENT_SECRET={credentials.client_secret}")
    print(f"YOUTUBE_REFRESH_TOKEN={credentials.refresh_token}")


if __name__ == "__main__":
    main()
