from __future__ import annotations

import csv
import io
from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_int
from ..core.exceptions import ValidationError
from ..container import Container
from .model import ReportOutput


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    def _day_arg() -> date:
        value = request.args.get("date")
        return parse_iso_date(value) if value else date.today()

    def _month_args() -> tuple[int, int]:
        today = date.today()
        year = require_int(request.args.get("year") or today.year, "year")
        month = require_int(request.args.get("month") or today.month, "month")
        return year, month

    def _text_response(output: ReportOutput):
        return app.response_class(output.text, mimetype="text/plain")

    def _csv_response(output: ReportOutput):
        """Same rows as the report file, sent as an attachment."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=list(output.columns), lineterminator="\n")
        writer.writeheader()
        for row in output.rows:
            writer.writerow(row)

        return app.response_class(
            out.getvalue().encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={output.csv_path.name}"},
        )

    def _bad_request(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.route("/reports/daily", methods=["GET"], endpoint="report_daily")
    def report_daily():
        try:
            return _text_response(reports.daily_report(_day_arg()))
        except ValidationError as e:
            return _bad_request(e)

    @app.route("/reports/daily.csv", methods=["GET"], endpoint="report_daily_csv")
    def report_daily_csv():
        try:
            return _csv_response(reports.daily_report(_day_arg()))
        except ValidationError as e:
            return _bad_request(e)

    @app.route("/reports/weekly", methods=["GET"], endpoint="report_weekly")
    def report_weekly():
        try:
            return _text_response(reports.weekly_report(_day_arg()))
        except ValidationError as e:
            return _bad_request(e)

    @app.route("/reports/weekly.csv", methods=["GET"], endpoint="report_weekly_csv")
    def report_weekly_csv():
        try:
            return _csv_response(reports.weekly_report(_day_arg()))
        except ValidationError as e:
            return _bad_request(e)

    @app.route("/reports/monthly", methods=["GET"], endpoint="report_monthly")
    def report_monthly():
        try:
            return _text_response(reports.monthly_report(*_month_args()))
        except ValidationError as e:
            return _bad_request(e)

    @app.route("/reports/monthly.csv", methods=["GET"], endpoint="report_monthly_csv")
    def report_monthly_csv():
        try:
            return _csv_response(reports.monthly_report(*_month_args()))
        except ValidationError as e:
            return _bad_request(e)
