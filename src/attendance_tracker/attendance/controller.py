from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import (
    ExportError,
    PersistenceError,
    StoreNotReadyError,
    SubjectIndexError,
    ValidationError,
)
from ..export.service import XLSX_MIMETYPE
from ..subjects.model import Profile, Subject

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    store = container.attendance_store
    exports = container.export_service

    def _fail(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def handle_domain_errors(view):
        """Map store errors to JSON responses; the store state is already consistent."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return _fail(str(e), 400)
            except SubjectIndexError as e:
                return _fail(str(e), 404)
            except StoreNotReadyError as e:
                return _fail(str(e), 409)
            except ExportError as e:
                return _fail(str(e), 409)
            except PersistenceError:
                return _fail("Failed to save data. Please try again.", 503)
            except Exception:
                logger.exception("Unhandled error in %s", view.__name__)
                return _fail("Internal error", 500)

        return wrapper

    def _subject_json(s: Subject) -> dict:
        return {
            "name": s.name,
            "present": s.present,
            "absent": s.absent,
            "percentage": store.compute_subject_percentage(s),
        }

    def _profile_json(p: Profile) -> dict:
        totals = store.compute_total_attendance()
        return {
            "success": True,
            "state": store.state.value,
            "name": p.name,
            "subjects": [_subject_json(s) for s in p.subjects],
            "totals": {"present": totals.present, "total": totals.total, "percentage": totals.percentage},
        }

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    @app.route("/api/profile", methods=["GET"], endpoint="get_profile")
    @handle_domain_errors
    def get_profile():
        body = _profile_json(store.profile)
        body["load_failed"] = bool(app.config.get("STARTUP_LOAD_FAILED"))
        return jsonify(body)

    @app.route("/api/profile/name", methods=["PUT", "POST"], endpoint="set_name")
    @handle_domain_errors
    def set_name():
        profile = store.set_name(str(_json_body().get("name") or ""))
        return jsonify(_profile_json(profile))

    @app.route("/api/subjects", methods=["GET"], endpoint="list_subjects")
    @handle_domain_errors
    def list_subjects():
        query = request.args.get("q", "")
        matched = {s.name for s in store.filter_subjects(query)}
        items = []
        # "index" is the position in the full list, which is what mutations take.
        for i, s in enumerate(store.profile.subjects):
            if s.name in matched:
                item = _subject_json(s)
                item["index"] = i
                items.append(item)
        return jsonify({"success": True, "query": query, "subjects": items})

    @app.route("/api/subjects", methods=["POST"], endpoint="add_subject")
    @handle_domain_errors
    def add_subject():
        profile = store.add_subject(str(_json_body().get("name") or ""))
        return jsonify(_profile_json(profile)), 201

    @app.route("/api/subjects/<int:index>/attendance", methods=["POST"], endpoint="record_attendance")
    @handle_domain_errors
    def record_attendance(index: int):
        present = _json_body().get("present")
        if not isinstance(present, bool):
            raise ValidationError("'present' must be true or false")
        profile = store.record_attendance(index, present)
        return jsonify(_profile_json(profile))

    @app.route("/api/subjects/<int:index>", methods=["DELETE"], endpoint="delete_subject")
    @handle_domain_errors
    def delete_subject(index: int):
        confirmed = request.args.get("confirm", "").lower() in {"1", "true", "yes"}
        profile = store.delete_subject(index, confirmed=confirmed)
        return jsonify(_profile_json(profile))

    @app.route("/api/totals", methods=["GET"], endpoint="get_totals")
    @handle_domain_errors
    def get_totals():
        totals = store.compute_total_attendance()
        return jsonify({"success": True, "present": totals.present, "total": totals.total, "percentage": totals.percentage})

    @app.route("/api/export.csv", methods=["GET"], endpoint="export_csv")
    @handle_domain_errors
    def export_csv():
        quoted = request.args.get("quoted", "").lower() in {"1", "true", "yes"}
        content = store.export_csv(quoted=quoted)
        filename = exports.next_filename("csv")
        logger.info("CSV export served as %s", filename)
        return app.response_class(
            content.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/export.xlsx", methods=["GET"], endpoint="export_xlsx")
    @handle_domain_errors
    def export_xlsx():
        content = exports.xlsx_bytes()
        filename = exports.next_filename("xlsx")
        return app.response_class(
            content,
            mimetype=XLSX_MIMETYPE,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
