from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import now_local
from ..container import Container
from ..insights.service import InsightFailure, InsightReport


def register(app: Flask, container: Container) -> None:
    payroll = container.payroll_service
    dashboard = container.dashboard_service

    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_reports")
    def payroll_reports():
        return jsonify(
            {
                "reports": [r.to_dict() for r in payroll.reports()],
                "totals": payroll.totals(),
            }
        )

    @app.route("/api/payroll/<employee_id>", methods=["GET"], endpoint="payroll_report")
    def payroll_report(employee_id: str):
        # Inactive and unknown employees have no report; that is not an error.
        report = payroll.report_for(employee_id)
        return jsonify({"report": report.to_dict() if report else None})

    @app.route("/api/payroll.csv", methods=["GET"], endpoint="payroll_csv")
    def payroll_csv():
        filename = f"AttendFlow_Active_Payroll_{now_local():%Y-%m-%d}.csv"
        return app.response_class(
            payroll.export_csv().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard_view():
        today = now_local().date()
        return jsonify(
            {
                "stats": dashboard.overview(today=today),
                "locations": [a.to_dict() for a in dashboard.location_analytics(today=today)],
            }
        )

    @app.route("/api/employees/<employee_id>/stats", methods=["GET"], endpoint="employee_stats")
    def employee_stats(employee_id: str):
        return jsonify(dashboard.employee_stats(employee_id))

    @app.route("/api/insights", methods=["GET"], endpoint="insights")
    def insights():
        result = container.insight_service.get_insights(container.ledger.list_records())
        if isinstance(result, InsightReport):
            return jsonify({"available": True, "insights": result.to_dict()})
        if isinstance(result, InsightFailure):
            return jsonify({"available": False, "message": "Insights are unavailable right now."})
        return jsonify({"available": False, "message": result.reason})
