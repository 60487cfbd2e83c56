#!/usr/bin/env python3
"""SSL certificates API façade."""

from api.base_resource import BaseResource
from api.endpoints import get, post, delete
from models.certificate import Certificate, CertificateCollection, ObtainLetsEncryptCertificate

CERTIFICATES = "/servers/{server_id}/sites/{site_id}/certificates"
CERTIFICATE = CERTIFICATES + "/{certificate_id}"
SITE_CTX = ("server_id", "site_id")

LIST_CERTIFICATES = get(CERTIFICATES, CertificateCollection, context=SITE_CTX)
GET_CERTIFICATE = get(CERTIFICATE, Certificate, "certificate", SITE_CTX)
OBTAIN_LETS_ENCRYPT = post(CERTIFICATES + "/letsencrypt", Certificate, "certificate", SITE_CTX)
ACTIVATE_CERTIFICATE = post(CERTIFICATE + "/activate")
DELETE_CERTIFICATE = delete(CERTIFICATE)
SIGNING_REQUEST = get(CERTIFICATE + "/csr")


class CertificatesAPI(BaseResource):

    async def list(self, server_id: int, site_id: int) -> CertificateCollection:
        return await self._send(LIST_CERTIFICATES, server_id=server_id, site_id=site_id)

    async def get(self, server_id: int, site_id: int, certificate_id: int) -> Certificate:
        return await self._send(GET_CERTIFICATE, server_id=server_id, site_id=site_id,
                                certificate_id=certificate_id)

    async def obtain_lets_encrypt(self, server_id: int, site_id: int,
                                  data: ObtainLetsEncryptCertificate) -> Certificate:
        """Request a Let's Encrypt certificate; issuance completes asynchronously upstream."""
        return await self._send(OBTAIN_LETS_ENCRYPT, data, server_id=server_id, site_id=site_id)

    async def activate(self, server_id: int, site_id: int, certificate_id: int) -> None:
        await self._call(ACTIVATE_CERTIFICATE, server_id=server_id, site_id=site_id,
                         certificate_id=certificate_id)

    async def delete(self, server_id: int, site_id: int, certificate_id: int) -> None:
        await self._call(DELETE_CERTIFICATE, server_id=server_id, site_id=site_id,
                         certificate_id=certificate_id)

    async def signing_request(self, server_id: int, site_id: int, certificate_id: int) -> str:
        response = await self._send(SIGNING_REQUEST, server_id=server_id, site_id=site_id,
                                    certificate_id=certificate_id)
        return response.text
