#!/usr/bin/env python3
import argparse
from datetime import datetime

from youtube_common import (
    SAMPLE_ERRORS,
    YOUTUBE,
    add_auth_arguments,
    authorize_from_args,
    build_service,
    report_error,
    setup_logging,
)

SCOPES = [YOUTUBE]
DEFAULT_VIDEO_ID = "SZj6rAYkYOg"


def insert_playlist(youtube, title: str) -> dict:
    body = {
        "snippet": {
            "title": title,
            "description": "A private playlist created with the YouTube API v3",
        },
        "status": {"privacyStatus": "private"},
    }
    playlist = youtube.playlists().insert(part="snippet,status", body=body).execute()
    snippet = playlist.get("snippet", {})
    print(f"New Playlist name: {snippet.get('title', '')}")
    print(f" - Privacy: {playlist.get('status', {}).get('privacyStatus', '')}")
    print(f" - Description: {snippet.get('description', '')}")
    print(f" - Posted: {snippet.get('publishedAt', '')}")
    print(f" - Channel: {snippet.get('channelId', '')}\n")
    return playlist


def insert_playlist_item(youtube, playlist_id: str, video_id: str) -> dict:
    body = {
        "snippet": {
            "title": "First video in the test playlist",
            "playlistId": playlist_id,
            "resourceId": {"kind": "youtube#video", "videoId": video_id},
        }
    }
    item = youtube.playlistItems().insert(part="snippet,contentDetails", body=body).execute()
    snippet = item.get("snippet", {})
    print(f"New PlaylistItem name: {snippet.get('title', '')}")
    print(f" - Video id: {snippet.get('resourceId', {}).get('videoId', '')}")
    print(f" - Posted: {snippet.get('publishedAt', '')}")
    print(f" - Channel: {snippet.get('channelId', '')}")
    return item


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a private playlist and add a video to it")
    parser.add_argument(
        "--video-id",
        default=DEFAULT_VIDEO_ID,
        help=f"Video to add (default: {DEFAULT_VIDEO_ID})",
    )
    parser.add_argument("--title", help="Playlist title (default: Test Playlist <now>)")
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    title = args.title or f"Test Playlist {datetime.now().strftime('%Y-%m-%d %H:%M')}"
    try:
        creds = authorize_from_args(args, SCOPES, "playlistupdates")
        youtube = build_service("youtube", "v3", creds)
        playlist = insert_playlist(youtube, title)
        insert_playlist_item(youtube, playlist["id"], args.video_id)
    except SAMPLE_ERRORS as exc:
        return report_error(exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
