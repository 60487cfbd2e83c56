#!/usr/bin/env python3
"""SSL certificate tools."""

from models.certificate import ObtainLetsEncryptCertificate
from tools.operation_tool import array, destroy, read, write

SITE = ("server_id", "site_id")
CERTIFICATE = SITE + ("certificate_id",)

OPERATIONS = [
    read("list-certificates-tool", "certificates.list",
         "List SSL certificates of a site with status, activation and expiry.", ids=SITE),
    read("get-certificate-tool", "certificates.get",
         "Get one SSL certificate.", ids=CERTIFICATE),
    write("obtain-lets-encrypt-certificate-tool", "certificates.obtain_lets_encrypt",
          "Request a free Let's Encrypt certificate. DNS for every domain must already point at the server.",
          ids=SITE, payload=ObtainLetsEncryptCertificate,
          params=(array("domains", "Domains to include", required=True, min_items=1,
                        item_schema={"type": "string", "minLength": 1}),),
          message="Certificate requested."),
    write("activate-certificate-tool", "certificates.activate",
          "Make a certificate the active certificate of its site.",
          ids=CERTIFICATE, message="Certificate {certificate_id} activated.", idempotent=True),
    destroy("delete-certificate-tool", "certificates.delete",
            "Delete a certificate. Deleting the active certificate disables HTTPS for the site.",
            ids=CERTIFICATE, message="Certificate {certificate_id} deleted."),
    read("get-certificate-signing-request-tool", "certificates.signing_request",
         "Get the certificate signing request (CSR) of a certificate.", ids=CERTIFICATE, key="csr"),
]
