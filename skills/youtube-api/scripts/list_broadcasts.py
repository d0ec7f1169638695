#!/usr/bin/env python3
import argparse
import json

from youtube_common import (
    SAMPLE_ERRORS,
    YOUTUBE_READONLY,
    add_auth_arguments,
    authorize_from_args,
    build_service,
    print_header,
    print_separator,
    report_error,
    setup_logging,
)

SCOPES = [YOUTUBE_READONLY]


def list_broadcasts(youtube, status: str = "all") -> list[dict]:
    resp = youtube.liveBroadcasts().list(
        part="id,snippet",
        broadcastType="all",
        broadcastStatus=status,
    ).execute()
    return resp.get("items", [])


def print_broadcast(broadcast: dict) -> None:
    snippet = broadcast.get("snippet", {})
    print(f"  - Id: {broadcast.get('id', '')}")
    print(f"  - Title: {snippet.get('title', '')}")
    print(f"  - Description: {snippet.get('description', '')}")
    print(f"  - Published At: {snippet.get('publishedAt', '')}")
    print(f"  - Scheduled Start Time: {snippet.get('scheduledStartTime', '')}")
    print(f"  - Scheduled End Time: {snippet.get('scheduledEndTime', '')}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List broadcasts for your YouTube channel")
    parser.add_argument(
        "--status",
        choices=["all", "active", "completed", "upcoming"],
        default="all",
        help="Broadcast status filter (default: all)",
    )
    parser.add_argument("--json", action="store_true", help="Output JSON")
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        creds = authorize_from_args(args, SCOPES, "listbroadcasts")
        youtube = build_service("youtube", "v3", creds)
        broadcasts = list_broadcasts(youtube, args.status)
    except SAMPLE_ERRORS as exc:
        return report_error(exc)

    if args.json:
        print(json.dumps(broadcasts, indent=2, ensure_ascii=False))
        return 0

    print_header("Returned Broadcasts")
    for broadcast in broadcasts:
        print_broadcast(broadcast)
        print_separator()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
