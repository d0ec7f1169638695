#!/usr/bin/env python3
import argparse

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
DEFAULT_JOB_NAME = "pythonTestJob"


def list_report_types(reporting) -> list[dict]:
    resp = reporting.reportTypes().list().execute()
    report_types = resp.get("reportTypes", [])
    if not report_types:
        print("No report types found.")
        return []

    print_header("Report Types")
    for report_type in report_types:
        print(f"  - Id: {report_type.get('id', '')}")
        print(f"  - Name: {report_type.get('name', '')}")
        print_separator()
    return report_types


def create_reporting_job(reporting, report_type_id: str, name: str) -> dict:
    job = reporting.jobs().create(body={"reportTypeId": report_type_id, "name": name}).execute()
    print_header("Created reporting job")
    print(f"  - ID: {job.get('id', '')}")
    print(f"  - Name: {job.get('name', '')}")
    print(f"  - Report Type Id: {job.get('reportTypeId', '')}")
    print(f"  - Create Time: {job.get('createTime', '')}")
    print_separator()
    return job


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a YouTube Reporting API job")
    parser.add_argument("--name", help=f"Job name (prompted if omitted, default: {DEFAULT_JOB_NAME})")
    parser.add_argument("--report-type-id", help="Report type id (prompted if omitted)")
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        creds = authorize_from_args(args, SCOPES, "createreportingjob")
        reporting = build_service("youtubereporting", "v1", creds)

        name = args.name or prompt(f"Please enter the name for the job [{DEFAULT_JOB_NAME}]: ", DEFAULT_JOB_NAME)
        print(f"You chose {name} as the name for the job.")
        if not list_report_types(reporting):
            return 1

        report_type_id = args.report_type_id or prompt("Please enter the reportTypeId for the job: ")
        if not report_type_id:
            print("Report type id can't be empty!")
            return 1
        print(f"You chose {report_type_id} as the report type Id for the job.")
        create_reporting_job(reporting, report_type_id, name)
    except SAMPLE_ERRORS as exc:
        return report_error(exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
