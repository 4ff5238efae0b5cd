from __future__ import annotations

import base64
import json
import logging
from typing import Optional

from ..config.urls import get_create_document_url
from ..core.domain.enums import DocumentFormat, DocumentType
from ..core.ports.document_port import DocumentRegistryPort
from .http_client import HttpClient
from .schemas import Document, RequestBody

logger = logging.getLogger(__name__)


def encode_document(document: Document) -> str:
    """Serialize the document to JSON and return it base64-encoded (standard alphabet, padded)."""
    raw = json.dumps(document.to_wire(), ensure_ascii=False).encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


class DocumentAdapter(DocumentRegistryPort):
    def __init__(self, http_client: HttpClient, base_url: str, product_group: Optional[str] = None) -> None:
        self._http = http_client
        self._url = get_create_document_url(base_url)
        self._product_group = product_group

    def build_request_body(
        self,
        document: Document,
        signature: str,
        *,
        document_type: DocumentType = DocumentType.LP_INTRODUCE_GOODS,
        document_format: DocumentFormat = DocumentFormat.MANUAL,
    ) -> RequestBody:
        if not signature:
            raise ValueError("signature must not be empty")
        return RequestBody(
            document_format=document_format,
            product_document=encode_document(document),
            product_group=self._product_group,
            signature=signature,
            type=document_type,
        )

    def create_document(
        self,
        document: Document,
        signature: str,
        *,
        document_type: DocumentType = DocumentType.LP_INTRODUCE_GOODS,
        document_format: DocumentFormat = DocumentFormat.MANUAL,
    ) -> str:
        body = self.build_request_body(
            document,
            signature,
            document_type=document_type,
            document_format=document_format,
        )
        logger.debug(f"POST {self._url} ({len(body.product_document)} base64 chars)")
        return self._http.post_json(self._url, body.to_wire())
