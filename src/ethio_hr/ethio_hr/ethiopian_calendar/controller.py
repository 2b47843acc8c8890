from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.request_args import arg_bool, arg_date, arg_int, require_arg_date
from ..common.responses import error_response, ok
from ..common.validators import require_date_range, require_month
from ..container import Container


def register(app: Flask, container: Container) -> None:
    calendar = container.calendar_service

    @app.route("/api/calendar/ethiopian", methods=["GET"], endpoint="api_calendar_ethiopian")
    def api_calendar_ethiopian():
        try:
            day = arg_date(request.args, "date") or now_local().date()
            return ok(calendar.ethiopian_date_info(day))
        except Exception as e:
            return error_response(e)

    @app.route("/api/calendar/gregorian", methods=["GET"], endpoint="api_calendar_gregorian")
    def api_calendar_gregorian():
        try:
            year = arg_int(request.args, "year")
            month = arg_int(request.args, "month")
            day = arg_int(request.args, "day")
            gregorian = calendar.to_gregorian(year, month, day)
            return ok(calendar.ethiopian_date_info(gregorian))
        except Exception as e:
            return error_response(e)

    @app.route("/api/calendar/holidays", methods=["GET"], endpoint="api_calendar_holidays")
    def api_calendar_holidays():
        try:
            year = arg_int(request.args, "year", now_local().year)
            month = request.args.get("month")
            include_working = arg_bool(request.args, "includeWorking", True)

            if month:
                m, year = require_month(month, year)
                holidays = calendar.holidays_in_month(year, m)
            else:
                holidays = calendar.holidays_for_year(year)
            if not include_working:
                holidays = [h for h in holidays if not h.is_working_day]
            return ok({"year": year, "holidays": [h.to_dict() for h in holidays], "count": len(holidays)})
        except Exception as e:
            return error_response(e)

    @app.route("/api/calendar/is-working-day", methods=["GET"], endpoint="api_calendar_is_working_day")
    def api_calendar_is_working_day():
        try:
            day = require_arg_date(request.args, "date")
            holiday = calendar.is_holiday(day)
            return ok(
                {
                    "date": day.isoformat(),
                    "isWorkingDay": calendar.is_working_day(day),
                    "holiday": holiday.to_dict() if holiday else None,
                }
            )
        except Exception as e:
            return error_response(e)

    @app.route("/api/calendar/working-days", methods=["GET"], endpoint="api_calendar_working_days")
    def api_calendar_working_days():
        try:
            start, end = require_date_range(arg_date(request.args, "start"), arg_date(request.args, "end"))
            return ok(
                {
                    "start": start.isoformat(),
                    "end": end.isoformat(),
                    "workingDays": calendar.working_days_between(start, end),
                }
            )
        except Exception as e:
            return error_response(e)

    @app.route("/api/calendar/next-working-day", methods=["GET"], endpoint="api_calendar_next_working_day")
    def api_calendar_next_working_day():
        try:
            day = require_arg_date(request.args, "date")
            return ok(calendar.ethiopian_date_info(calendar.next_working_day(day)))
        except Exception as e:
            return error_response(e)

    @app.route("/api/calendar/previous-working-day", methods=["GET"], endpoint="api_calendar_previous_working_day")
    def api_calendar_previous_working_day():
        try:
            day = require_arg_date(request.args, "date")
            return ok(calendar.ethiopian_date_info(calendar.previous_working_day(day)))
        except Exception as e:
            return error_response(e)

    @app.route("/api/calendar/month", methods=["GET"], endpoint="api_calendar_month")
    def api_calendar_month():
        try:
            today = now_local().date()
            m, y = require_month(
                request.args.get("month", today.month),
                request.args.get("year", today.year),
            )
            return ok(calendar.calendar_month(y, m))
        except Exception as e:
            return error_response(e)
