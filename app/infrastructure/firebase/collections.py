"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when the first document is written. Documents are keyed by the canonical
(lowercase, hyphenated) id string; soft delete is the is_deleted field.
"""

COLLECTION_CATEGORIES = "categories"
COLLECTION_TIPS = "tips"
COLLECTION_USERS = "users"
