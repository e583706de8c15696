"""Firestore client factory (REST-based, no firebase-admin).

Built at app startup from either FIREBASE_SERVICE_ACCOUNT_KEY (JSON string)
or FIREBASE_SERVICE_ACCOUNT_PATH (file path). Uses the Firestore REST API
with google-auth to keep the install small.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from app.infrastructure.firebase._rest_client import (
    FirestoreRESTClient,
    _get_credentials,
)

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


def _load_key_dict(settings: Settings) -> dict[str, Any]:
    """Return service account dict from env key or file path.

    Raises:
        ValueError: If neither is set, the key is not JSON, or the file is missing.
    """
    secret = settings.firebase_service_account_key
    key_json = secret.get_secret_value() if secret else None
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    path = settings.firebase_service_account_path
    if path:
        resolved = Path(path).expanduser().resolve()
        if not resolved.is_file():
            raise ValueError(
                f"FIREBASE_SERVICE_ACCOUNT_PATH file not found: {path} (resolved: {resolved})"
            )
        with open(resolved, encoding="utf-8") as f:
            return json.load(f)
    raise ValueError("Firestore backend requires FIREBASE_SERVICE_ACCOUNT_KEY or _PATH")


def create_firestore_client(settings: Settings) -> FirestoreRESTClient:
    """Build the Firestore client (REST API + google-auth).

    Returns:
        A client owning its HTTP connection pool; close it with aclose().

    Raises:
        ValueError: If credentials are missing or malformed.
    """
    key_dict = _load_key_dict(settings)
    project_id = key_dict.get("project_id")
    if not project_id:
        raise ValueError("Firebase service account JSON missing 'project_id'")
    client = FirestoreRESTClient(project_id, _get_credentials(key_dict))
    logger.info("Firestore client initialized for project %s", project_id)
    return client
