from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import g, jsonify, request, session

OWNER_HEADER = "X-User-Id"


def current_owner() -> Optional[str]:
    """Owner reference of the request (session first, then header). Not verified."""
    owner = session.get("user_id") or request.headers.get(OWNER_HEADER)
    if owner is None:
        return None
    owner = str(owner).strip()
    return owner or None


def owner_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        owner = current_owner()
        if not owner:
            return jsonify({"success": False, "message": "Usuário não identificado"}), 401
        g.owner_id = owner
        return view(*args, **kwargs)

    return wrapper
