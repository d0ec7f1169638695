#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path

from googleapiclient.http import MediaFileUpload

from youtube_common import (
    SAMPLE_ERRORS,
    YOUTUBE,
    add_auth_arguments,
    authorize_from_args,
    build_service,
    print_header,
    report_error,
    setup_logging,
)

SCOPES = [YOUTUBE]


def set_thumbnail(youtube, video_id: str, image_path: str) -> dict:
    media = MediaFileUpload(image_path, mimetype="image/png", resumable=True)
    request = youtube.thumbnails().set(videoId=video_id, media_body=media)
    response = None
    while response is None:
        status, response = request.next_chunk()
        if status:
            print(f"Upload percentage: {status.progress():.2f}")
    print("Upload Completed!")
    return response


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Set a custom thumbnail on a YouTube video")
    parser.add_argument("video_id", help="Video to update")
    parser.add_argument("image", help="Path to a PNG image")
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    image = Path(args.image)
    if not image.exists():
        print(f"Image not found: {image}", file=sys.stderr)
        return 1

    print(f"You chose {args.video_id} to upload a thumbnail.")
    print(f"You chose {image} to upload.")
    try:
        creds = authorize_from_args(args, SCOPES, "uploadthumbnail")
        youtube = build_service("youtube", "v3", creds)
        resp = set_thumbnail(youtube, args.video_id, str(image))
    except SAMPLE_ERRORS as exc:
        return report_error(exc)

    items = resp.get("items", [])
    url = items[0].get("default", {}).get("url", "") if items else ""
    print_header("Uploaded Thumbnail")
    print(f"  - Url: {url}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
