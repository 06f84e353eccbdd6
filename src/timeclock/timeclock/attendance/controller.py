from __future__ import annotations

import logging
from dataclasses import asdict

from flask import Flask, g, jsonify, request, send_file

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.web import owner_required
from ..core.enums import PunchStatus, status_label
from ..core.exceptions import PersistenceError, ValidationError
from ..container import Container
from ..preferences.model import Preferences
from ..reports.service import RecordFilter
from ..spreadsheets.reader import read_rows
from ..spreadsheets.writer import build_records_workbook, build_template_workbook

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _parse_filter() -> RecordFilter:
        try:
            statuses = frozenset(PunchStatus(s) for s in request.args.getlist("status") if s and s != "all")
        except ValueError:
            raise ValidationError("Status inválido")

        try:
            start = parse_iso_date(request.args["start"]) if request.args.get("start") else None
            end = parse_iso_date(request.args["end"]) if request.args.get("end") else None
        except ValueError:
            raise ValidationError("Data inválida (AAAA-MM-DD)")

        return RecordFilter(
            statuses=statuses,
            search=(request.args.get("q") or "").strip() or None,
            name=request.args.get("name") if request.args.get("name") not in (None, "", "all") else None,
            department=request.args.get("department") if request.args.get("department") not in (None, "", "all") else None,
            start=start,
            end=end,
        )

    def _to_ui(record, prefs: Preferences) -> dict:
        doc = record.to_document()
        doc.update(
            {
                "entry_display": record.entry_display,
                "exit_display": record.exit_display,
                "entry_status_label": status_label(record.entry_status),
                "exit_status_label": status_label(record.exit_status),
                "entry_color": prefs.color_for(record.entry_status),
                "exit_color": prefs.color_for(record.exit_status),
            }
        )
        return doc

    @app.route("/api/records/upload", methods=["POST"], endpoint="records_upload")
    @owner_required
    def records_upload():
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            return jsonify({"success": False, "message": "Nenhum arquivo enviado"}), 400

        try:
            rows = read_rows(upload.stream, upload.filename)
            result = container.attendance_service.import_rows(g.owner_id, rows)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError as e:
            return jsonify({"success": False, "message": str(e)}), 500
        except Exception:
            logger.exception("Unexpected error importing %s", upload.filename)
            return jsonify({"success": False, "message": "Não foi possível processar o arquivo."}), 500

        return jsonify({"success": True, "count": result.count, "message": result.message}), 201

    @app.route("/api/records", methods=["GET"], endpoint="records_list")
    @owner_required
    def records_list():
        try:
            record_filter = _parse_filter()
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        data = container.report_service.build_report(g.owner_id, record_filter)
        prefs = container.preferences_service.get_config(g.owner_id)
        return jsonify(
            {
                "success": True,
                "records": [_to_ui(r, prefs) for r in data.records],
                "summary": asdict(data.summary),
                "names": data.names,
                "departments": data.departments,
            }
        )

    @app.route("/api/records", methods=["DELETE"], endpoint="records_clear")
    @owner_required
    def records_clear():
        try:
            removed = container.attendance_service.clear_records(g.owner_id)
        except Exception:
            logger.exception("Failed to clear records for owner %s", g.owner_id)
            return jsonify({"success": False, "message": "Erro ao limpar registros"}), 500
        return jsonify({"success": True, "removed": removed, "message": "Registros limpos."})

    @app.route("/api/records/export.xlsx", methods=["GET"], endpoint="records_export")
    @owner_required
    def records_export():
        try:
            record_filter = _parse_filter()
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        data = container.report_service.build_report(g.owner_id, record_filter)
        prefs = container.preferences_service.get_config(g.owner_id)
        output = build_records_workbook(data.records, prefs.colors)
        return send_file(output, mimetype=XLSX_MIMETYPE, as_attachment=True, download_name="registros_de_ponto.xlsx")

    @app.route("/api/records/template.xlsx", methods=["GET"], endpoint="records_template")
    def records_template():
        output = build_template_workbook()
        return send_file(output, mimetype=XLSX_MIMETYPE, as_attachment=True, download_name="novo_modelo_registros.xlsx")

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @owner_required
    def dashboard():
        metrics = container.report_service.build_dashboard(g.owner_id, today=now_local().date())
        return jsonify({"success": True, **metrics})
