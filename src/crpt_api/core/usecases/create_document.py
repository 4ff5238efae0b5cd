from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..domain.enums import DocumentFormat, DocumentType
from ..ports.document_port import DocumentRegistryPort

if TYPE_CHECKING:
    from ...infra.schemas import Document

logger = logging.getLogger(__name__)


class CreateDocumentUseCase:
    def __init__(self, registry: DocumentRegistryPort) -> None:
        self._registry = registry

    def execute(
        self,
        document: "Document",
        signature: str,
        *,
        document_type: DocumentType = DocumentType.LP_INTRODUCE_GOODS,
        document_format: DocumentFormat = DocumentFormat.MANUAL,
    ) -> str:
        logger.info(f"Registering document {document.doc_id or '<no id>'} as {document_type.value}")
        return self._registry.create_document(
            document,
            signature,
            document_type=document_type,
            document_format=document_format,
        )
