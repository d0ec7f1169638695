#!/usr/bin/env python3
import argparse
import sys
from datetime import datetime
from pathlib import Path

from googleapiclient.http import MediaFileUpload

from youtube_common import (
    SAMPLE_ERRORS,
    YOUTUBE_UPLOAD,
    SampleError,
    add_auth_arguments,
    authorize_from_args,
    build_service,
    print_header,
    report_error,
    setup_logging,
)

SCOPES = [YOUTUBE_UPLOAD]
DEFAULT_TAGS = ["test", "example", "python", "YouTube Data API V3", "erase me"]


class UploadError(SampleError):
    pass


def build_body(title: str, description: str, privacy_status: str, tags: list[str]) -> dict:
    return {
        "snippet": {
            "title": title,
            "description": description,
            "tags": tags,
        },
        "status": {"privacyStatus": privacy_status},
    }


def upload_video(youtube, video_path: str, body: dict) -> dict:
    media = MediaFileUpload(video_path, mimetype="video/*", chunksize=8 * 1024 * 1024, resumable=True)
    request = youtube.videos().insert(
        part="snippet,statistics,status",
        body=body,
        media_body=media,
    )

    print("Initiation Started")
    response = None
    while response is None:
        status, response = request.next_chunk()
        if status:
            print(f"Upload percentage: {status.progress():.2f}")
    print("Upload Completed!")

    if not response.get("id"):
        raise UploadError("Upload failed: missing video id")
    return response


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Upload a video to YouTube")
    parser.add_argument("video", help="Path to video file")
    parser.add_argument("--title", help="Video title (default: Test Upload via Python on <now>)")
    parser.add_argument("--description", help="Video description")
    parser.add_argument("--tags", help="Comma-separated tags")
    parser.add_argument(
        "--privacy-status",
        choices=["private", "unlisted", "public"],
        default="public",
        help="Privacy status (default: public)",
    )
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    video_path = Path(args.video)
    if not video_path.exists():
        print(f"Video not found: {video_path}", file=sys.stderr)
        return 1

    now = datetime.now().strftime("%Y-%m-%d %H:%M")
    tags = DEFAULT_TAGS
    if args.tags:
        tags = [t.strip() for t in args.tags.split(",") if t.strip()]
    body = build_body(
        args.title or f"Test Upload via Python on {now}",
        args.description or f"Video uploaded via YouTube Data API V3 using the Python library on {now}",
        args.privacy_status,
        tags,
    )

    print(f"Uploading: {video_path}")
    try:
        creds = authorize_from_args(args, SCOPES, "uploadvideo")
        youtube = build_service("youtube", "v3", creds)
        video = upload_video(youtube, str(video_path), body)
    except SAMPLE_ERRORS as exc:
        return report_error(exc)

    snippet = video.get("snippet", {})
    print_header("Returned Video")
    print(f"  - Id: {video['id']}")
    print(f"  - Title: {snippet.get('title', '')}")
    print(f"  - Tags: {snippet.get('tags', [])}")
    print(f"  - Privacy Status: {video.get('status', {}).get('privacyStatus', '')}")
    print(f"  - Video Count: {video.get('statistics', {}).get('viewCount', '')}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
