#!/usr/bin/env python3
import argparse

from youtube_common import (
    SAMPLE_ERRORS,
    YOUTUBE_READONLY,
    add_auth_arguments,
    authorize_from_args,
    build_service,
    report_error,
    setup_logging,
)

SCOPES = [YOUTUBE_READONLY]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="YouTube Data API quickstart")
    parser.add_argument(
        "--username",
        default="GoogleDevelopers",
        help="Legacy channel username to look up (default: GoogleDevelopers)",
    )
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        creds = authorize_from_args(args, SCOPES, "youtube-quickstart")
        youtube = build_service("youtube", "v3", creds)
        resp = youtube.channels().list(
            part="snippet,contentDetails,statistics",
            forUsername=args.username,
        ).execute()
    except SAMPLE_ERRORS as exc:
        return report_error(exc)

    items = resp.get("items", [])
    if not items:
        print(f"No channel found for username {args.username}.")
        return 1

    channel = items[0]
    print(
        f"This channel's ID is {channel['id']}. "
        f"Its title is '{channel.get('snippet', {}).get('title', '')}', "
        f"and it has {channel.get('statistics', {}).get('viewCount', 'n/a')} views."
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
