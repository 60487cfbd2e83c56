#!/usr/bin/env python3
"""SSL certificate models."""

from dataclasses import dataclass
from typing import List, Optional
from models.base import ForgeModel, ModelCollection


@dataclass(frozen=True)
class Certificate(ForgeModel):
    id: int
    server_id: Optional[int] = None
    site_id: Optional[int] = None
    domain: Optional[str] = None
    request_status: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    active: Optional[bool] = None
    expires_at: Optional[str] = None
    created_at: Optional[str] = None
    activation_error: Optional[str] = None


@dataclass(frozen=True)
class ObtainLetsEncryptCertificate(ForgeModel):
    domains: List[str]


@dataclass(frozen=True)
class CertificateCollection(ModelCollection):
    item_model = Certificate
    key = "certificates"
