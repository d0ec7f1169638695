#!/usr/bin/env python3
import argparse
import sys

from youtube_common import (
    SAMPLE_ERRORS,
    YOUTUBE_READONLY,
    add_auth_arguments,
    authorize_from_args,
    build_service,
    print_separator,
    report_error,
    setup_logging,
)

SCOPES = [YOUTUBE_READONLY]


def uploads_playlist_id(youtube) -> str | None:
    resp = youtube.channels().list(
        part="contentDetails",
        mine=True,
        fields="items/contentDetails,nextPageToken,pageInfo",
    ).execute()
    items = resp.get("items", [])
    if not items:
        return None
    return items[0].get("contentDetails", {}).get("relatedPlaylists", {}).get("uploads")


def list_playlist_items(youtube, playlist_id: str) -> list[dict]:
    items = []
    page_token = None
    while True:
        request_kwargs = {
            "part": "id,contentDetails,snippet",
            "playlistId": playlist_id,
            "maxResults": 50,
            "fields": "items(contentDetails/videoId,snippet/title,snippet/publishedAt),nextPageToken,pageInfo",
        }
        if page_token:
            request_kwargs["pageToken"] = page_token
        resp = youtube.playlistItems().list(**request_kwargs).execute()
        items.extend(resp.get("items", []))
        page_token = resp.get("nextPageToken")
        if not page_token:
            return items


def pretty_print(items: list[dict]) -> None:
    print("=============================================================")
    print(f"\t\tTotal Videos Uploaded: {len(items)}")
    print("=============================================================\n")
    for item in items:
        snippet = item.get("snippet", {})
        print(f" video name  = {snippet.get('title', '')}")
        print(f" video id    = {item.get('contentDetails', {}).get('videoId', '')}")
        print(f" upload date = {snippet.get('publishedAt', '')}")
        print_separator()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List every video uploaded to your channel")
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        creds = authorize_from_args(args, SCOPES, "myuploads")
        youtube = build_service("youtube", "v3", creds)
        playlist_id = uploads_playlist_id(youtube)
        if not playlist_id:
            print("Could not resolve uploads playlist id.", file=sys.stderr)
            return 1
        items = list_playlist_items(youtube, playlist_id)
    except SAMPLE_ERRORS as exc:
        return report_error(exc)

    pretty_print(items)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
