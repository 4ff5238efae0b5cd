from __future__ import annotations

from typing import Protocol, TYPE_CHECKING

from ..domain.enums import DocumentFormat, DocumentType

if TYPE_CHECKING:
    from ...infra.schemas import Document


class DocumentRegistryPort(Protocol):
    def create_document(
        self,
        document: "Document",
        signature: str,
        *,
        document_type: DocumentType = DocumentType.LP_INTRODUCE_GOODS,
        document_format: DocumentFormat = DocumentFormat.MANUAL,
    ) -> str:
        """Register the document and return the raw response body."""
        ...
