#!/usr/bin/env python3
import argparse
from pathlib import Path

from googleapiclient.http import MediaIoBaseDownload

from youtube_common import (
    SAMPLE_ERRORS,
    YT_ANALYTICS_MONETARY_READONLY,
    add_auth_arguments,
    authorize_from_args,
    build_service,
    print_header,
    print_separator,
    prompt,
    report_error,
    setup_logging,
)

SCOPES = [YT_ANALYTICS_MONETARY_READONLY]


def list_reporting_jobs(reporting) -> list[dict]:
    jobs = reporting.jobs().list().execute().get("jobs", [])
    if not jobs:
        print("No jobs found.")
        return []

    print_header("Reporting Jobs")
    for job in jobs:
        print(f"  - Id: {job.get('id', '')}")
        print(f"  - Name: {job.get('name', '')}")
        print(f"  - Report Type Id: {job.get('reportTypeId', '')}")
        print_separator()
    return jobs


def retrieve_reports(reporting, job_id: str) -> list[dict]:
    reports = reporting.jobs().reports().list(jobId=job_id).execute().get("reports", [])
    if not reports:
        print("No reports found.")
        return []

    print(f"\n============= Reports for the job {job_id} =============\n")
    for report in reports:
        print(f"  - Id: {report.get('id', '')}")
        print(f"  - From: {report.get('startTime', '')}")
        print(f"  - To: {report.get('endTime', '')}")
        print(f"  - Download Url: {report.get('downloadUrl', '')}")
        print_separator()
    return reports


def download_report(reporting, report_url: str, output: Path) -> Path:
    request = reporting.media().download_media(resourceName="")
    request.uri = report_url
    try:
        with output.open("wb") as fh:
            downloader = MediaIoBaseDownload(fh, request, chunksize=1024 * 1024)
            done = False
            while not done:
                status, done = downloader.next_chunk()
                if status:
                    print(f"Download {int(status.progress() * 100)}%")
    except BaseException:
        output.unlink(missing_ok=True)
        raise
    return output


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List and download YouTube Reporting API reports")
    parser.add_argument("--job-id", help="Job to list reports for (prompted if omitted)")
    parser.add_argument("--download-url", help="Report URL to download (prompted if omitted)")
    parser.add_argument("--output", type=Path, default=Path("report"), help="Download path (default: ./report)")
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        creds = authorize_from_args(args, SCOPES, "retrievereports")
        reporting = build_service("youtubereporting", "v1", creds)

        if not list_reporting_jobs(reporting):
            return 1
        job_id = args.job_id or prompt("Please enter the job id for the report retrieval: ")
        print(f"You chose {job_id} as the job Id for the report retrieval.")
        if not retrieve_reports(reporting, job_id):
            return 1

        report_url = args.download_url or prompt("Please enter the report URL to download: ")
        print(f"You chose {report_url} as the URL to download.")
        path = download_report(reporting, report_url, args.output)
    except SAMPLE_ERRORS as exc:
        return report_error(exc)

    print(f"Report saved to {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
