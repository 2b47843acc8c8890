from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.responses import error_response, ok
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    def _ids_from_args():
        raw = request.args.get("employeeIds")
        if not raw:
            return None
        return [p for p in (s.strip() for s in raw.split(",")) if p]

    def _period_from_args():
        today = now_local().date()
        return request.args.get("month", today.month), request.args.get("year", today.year)

    @app.route("/api/payroll/calculate", methods=["POST"], endpoint="api_payroll_calculate")
    def api_payroll_calculate():
        try:
            data = request.get_json(silent=True) or {}
            employee_ids = data.get("employeeIds")
            if employee_ids is not None and not isinstance(employee_ids, list):
                raise ValidationError("employeeIds must be a list")
            run = container.payroll_service.compute_payroll(data.get("month"), data.get("year"), employee_ids)
            return ok(run.to_dict())
        except Exception as e:
            return error_response(e)

    @app.route("/api/payroll/estimate", methods=["GET"], endpoint="api_payroll_estimate")
    def api_payroll_estimate():
        try:
            month, year = _period_from_args()
            run = container.payroll_service.compute_unadjusted_payroll(month, year, _ids_from_args())
            return ok(run.to_dict())
        except Exception as e:
            return error_response(e)

    @app.route("/api/payroll/export.csv", methods=["GET"], endpoint="api_payroll_export_csv")
    def api_payroll_export_csv():
        try:
            month, year = _period_from_args()
            run = container.payroll_service.compute_payroll(month, year, _ids_from_args())
        except Exception as e:
            return error_response(e)

        csv_bytes = container.payroll_service.to_csv(run).encode("utf-8-sig")
        filename = f"payroll_{run.period.year}_{run.period.month:02d}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
