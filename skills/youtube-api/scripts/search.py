#!/usr/bin/env python3
"""Search YouTube videos with an API key (no OAuth).

The key comes from --api-key, YOUTUBE_API_KEY, or ``api_key`` in the config file.
"""

import argparse
import os

from googleapiclient.discovery import build

from youtube_common import (
    SAMPLE_ERRORS,
    ConfigurationError,
    load_config,
    print_separator,
    prompt,
    report_error,
    setup_logging,
)

NUMBER_OF_VIDEOS_RETURNED = 25
DEFAULT_QUERY = "YouTube Developers Live"


def get_api_key(cli_value: str | None = None) -> str:
    key = cli_value or os.getenv("YOUTUBE_API_KEY", "").strip() or load_config().get("api_key", "")
    if not key:
        raise ConfigurationError("Missing API key. Pass --api-key or set YOUTUBE_API_KEY.")
    return key


def search_videos(youtube, query: str, limit: int = NUMBER_OF_VIDEOS_RETURNED) -> list[dict]:
    resp = youtube.search().list(
        part="id,snippet",
        q=query,
        type="video",
        fields="items(id/kind,id/videoId,snippet/title,snippet/thumbnails/default/url)",
        maxResults=limit,
    ).execute()
    return resp.get("items", [])


def pretty_print(results: list[dict], query: str) -> None:
    print("\n=============================================================")
    print(f'   First {NUMBER_OF_VIDEOS_RETURNED} videos for search on "{query}".')
    print("=============================================================\n")
    if not results:
        print(" There aren't any results for your query.")
    for result in results:
        rid = result.get("id", {})
        if rid.get("kind") != "youtube#video":
            continue
        snippet = result.get("snippet", {})
        thumbnail = snippet.get("thumbnails", {}).get("default", {})
        print(f" Video Id: {rid.get('videoId', '')}")
        print(f" Title: {snippet.get('title', '')}")
        print(f" Thumbnail: {thumbnail.get('url', '')}")
        print_separator()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search YouTube videos")
    parser.add_argument("--query", help=f"Search term (prompted if omitted, default: {DEFAULT_QUERY})")
    parser.add_argument("--api-key", help="YouTube Data API key")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        api_key = get_api_key(args.api_key)
        query = args.query or prompt("Please enter a search term: ", DEFAULT_QUERY)
        youtube = build("youtube", "v3", developerKey=api_key, cache_discovery=False)
        results = search_videos(youtube, query)
    except SAMPLE_ERRORS as exc:
        return report_error(exc)

    pretty_print(results, query)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
