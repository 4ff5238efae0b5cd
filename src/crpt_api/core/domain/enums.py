from __future__ import annotations

from enum import Enum


class DocumentFormat(str, Enum):
    MANUAL = "MANUAL"
    XML = "XML"
    CSV = "CSV"


class DocumentType(str, Enum):
    LP_INTRODUCE_GOODS = "LP_INTRODUCE_GOODS"
    LP_INTRODUCE_GOODS_CSV = "LP_INTRODUCE_GOODS_CSV"
    LP_INTRODUCE_GOODS_XML = "LP_INTRODUCE_GOODS_XML"


class ProductionType(str, Enum):
    OWN_PRODUCTION = "OWN_PRODUCTION"
    CONTRACT_PRODUCTION = "CONTRACT_PRODUCTION"


class CertificateDocument(str, Enum):
    CONFORMITY_CERTIFICATE = "CONFORMITY_CERTIFICATE"
    CONFORMITY_DECLARATION = "CONFORMITY_DECLARATION"
