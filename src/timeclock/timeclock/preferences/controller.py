from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.web import owner_required
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings", methods=["GET"], endpoint="settings_get")
    @owner_required
    def settings_get():
        prefs = container.preferences_service.get_config(g.owner_id)
        return jsonify({"success": True, **prefs.to_document()})

    @app.route("/api/settings", methods=["PUT", "POST"], endpoint="settings_save")
    @owner_required
    def settings_save():
        payload = request.get_json(silent=True)
        try:
            prefs = container.preferences_service.save_config(g.owner_id, payload)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "message": "Configurações salvas", **prefs.to_document()})

    @app.route("/api/settings", methods=["DELETE"], endpoint="settings_reset")
    @owner_required
    def settings_reset():
        prefs = container.preferences_service.reset_config(g.owner_id)
        return jsonify({"success": True, "message": "Configurações resetadas", **prefs.to_document()})
