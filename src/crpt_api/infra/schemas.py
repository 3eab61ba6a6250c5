from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.domain.enums import DocumentType


class _Strict(BaseModel):
	model_config = ConfigDict(extra="forbid")


class Description(_Strict):
	"""Document description block"""
	participantInn: Optional[str] = None


class Product(_Strict):
	"""One product line of the document"""
	certificate_document: Optional[str] = None
	certificate_document_date: Optional[str] = None
	certificate_document_number: Optional[str] = None
	owner_inn: Optional[str] = None
	producer_inn: Optional[str] = None
	production_date: Optional[str] = None
	tnved_code: Optional[str] = None
	uit_code: Optional[str] = None
	uitu_code: Optional[str] = None


class Document(_Strict):
	"""Goods introduction document (LP_INTRODUCE_GOODS), serialized as-is to the request body"""
	description: Optional[Description] = None
	doc_id: Optional[str] = None
	doc_status: Optional[str] = None
	doc_type: str = DocumentType.LP_INTRODUCE_GOODS.value
	importRequest: bool = False
	owner_inn: Optional[str] = None
	participant_inn: Optional[str] = None
	producer_inn: Optional[str] = None
	production_date: Optional[str] = None
	production_type: Optional[str] = None
	products: list[Product] = Field(default_factory=list)
	reg_date: Optional[str] = None
	reg_number: Optional[str] = None


class CreateDocumentResponse(BaseModel):
	"""Success payload of the create endpoint; only the fields we read"""
	value: Optional[str] = None
