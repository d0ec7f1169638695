#!/usr/bin/env python3
import argparse

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


def print_stream(stream: dict) -> None:
    snippet = stream.get("snippet", {})
    print(f"  - Id: {stream.get('id', '')}")
    print(f"  - Title: {snippet.get('title', '')}")
    print(f"  - Description: {snippet.get('description', '')}")
    print(f"  - Published At: {snippet.get('publishedAt', '')}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List live streams for your YouTube channel")
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        creds = authorize_from_args(args, SCOPES, "liststreams")
        youtube = build_service("youtube", "v3", creds)
        resp = youtube.liveStreams().list(part="id,snippet", mine=True).execute()
    except SAMPLE_ERRORS as exc:
        return report_error(exc)

    print_header("Returned Streams")
    for stream in resp.get("items", []):
        print_stream(stream)
        print_separator()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
