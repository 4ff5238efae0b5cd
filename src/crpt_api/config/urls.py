from __future__ import annotations


def get_create_document_url(base_url: str) -> str:
    return f"{base_url.rstrip('/')}/api/v3/lk/documents/create"
