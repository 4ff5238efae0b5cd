from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.domain.enums import CertificateDocument, DocumentFormat, DocumentType, ProductionType


class _WireModel(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	def to_wire(self) -> dict:
		"""Dump with JSON field names, omitting unset optional fields.

		None-valued fields are left out rather than sent as null, and products
		is always sent (empty list when there are none).
		"""
		return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Description(_WireModel):
	participant_inn: Optional[str] = Field(None, alias="participantInn")


class Product(_WireModel):
	"""Single marked item in a goods introduction document"""
	certificate_document: Optional[CertificateDocument] = None
	certificate_document_date: Optional[str] = None
	certificate_document_number: Optional[str] = None
	owner_inn: Optional[str] = None
	producer_inn: Optional[str] = None
	production_date: Optional[str] = None
	tnved_code: Optional[str] = None
	uit_code: Optional[str] = None
	uitu_code: Optional[str] = None


class Document(_WireModel):
	"""Goods introduction document, serialized into RequestBody.product_document"""
	description: Optional[Description] = None
	doc_id: Optional[str] = None
	doc_status: Optional[str] = None
	doc_type: Optional[str] = None
	import_request: bool = Field(False, alias="importRequest")
	owner_inn: Optional[str] = None
	participant_inn: Optional[str] = None
	producer_inn: Optional[str] = None
	production_date: Optional[str] = None
	production_type: Optional[ProductionType] = None
	products: list[Product] = Field(default_factory=list)
	reg_date: Optional[str] = None
	reg_number: Optional[str] = None


class RequestBody(_WireModel):
	"""Envelope posted to the document creation endpoint"""
	document_format: DocumentFormat
	product_document: str
	product_group: Optional[str] = None
	signature: str
	type: DocumentType
