"""
Google Authentication - credentials and the shared Firestore client
"""
import os
import json
import logging
from typing import Optional
from google.oauth2 import service_account
from google.cloud import firestore

from fintracker.core.config import FIREBASE_CREDENTIALS, FIREBASE_KEY_FILE, FIRESTORE_PROJECT

logger = logging.getLogger(__name__)

DATASTORE_SCOPES = ['https://www.googleapis.com/auth/datastore']


def load_service_account(
    raw_json: Optional[str], key_file: Optional[str]
) -> Optional[service_account.Credentials]:
    """
    Service-account credentials from the inline JSON, else from the key file.
    Returns None when neither is configured.
    """
    if raw_json:
        return service_account.Credentials.from_service_account_info(
            json.loads(raw_json), scopes=DATASTORE_SCOPES
        )
    if key_file and os.path.exists(key_file):
        return service_account.Credentials.from_service_account_file(key_file, scopes=DATASTORE_SCOPES)
    return None


def build_firestore_client(
    credentials: Optional[service_account.Credentials], project: Optional[str]
) -> Optional[firestore.Client]:
    """
    Client for the service account, or for Application Default Credentials
    when only a project is configured.
    """
    if credentials is not None:
        return firestore.Client(project=project or credentials.project_id, credentials=credentials)
    if project:
        return firestore.Client(project=project)

    logger.warning("No Firebase credentials or FIRESTORE_PROJECT configured")
    return None


class GoogleAuth:
    """Process-wide Firestore client, built on first use"""

    _firestore_client = None

    @classmethod
    def get_firestore_client(cls) -> Optional[firestore.Client]:
        if cls._firestore_client is not None:
            return cls._firestore_client

        try:
            credentials = load_service_account(FIREBASE_CREDENTIALS, FIREBASE_KEY_FILE)
            cls._firestore_client = build_firestore_client(credentials, FIRESTORE_PROJECT)
        except Exception as e:
            logger.error(f"Could not create Firestore client: {e}", exc_info=True)
            return None

        return cls._firestore_client

    @classmethod
    def reset(cls) -> None:
        cls._firestore_client = None
