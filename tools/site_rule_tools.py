#!/usr/bin/env python3
"""Redirect rule, security rule and webhook tools."""

from models.site_rules import CreateRedirectRule, CreateSecurityRule, CreateWebhook
from tools.operation_tool import array, destroy, read, string, write

SITE = ("server_id", "site_id")
CREDENTIAL = {
    "type": "object",
    "properties": {"username": {"type": "string", "minLength": 1}, "password": {"type": "string", "minLength": 1}},
    "required": ["username", "password"],
}

OPERATIONS = [
    read("list-redirect-rules-tool", "redirect_rules.list", "List redirect rules of a site.", ids=SITE),
    read("get-redirect-rule-tool", "redirect_rules.get", "Get one redirect rule.", ids=SITE + ("rule_id",)),
    write("create-redirect-rule-tool", "redirect_rules.create",
          "Redirect a path of the site to another URL.",
          ids=SITE, payload=CreateRedirectRule,
          params=(
              string("from", "Path to redirect, e.g. /old", required=True, min_length=1),
              string("to", "Target URL", required=True, min_length=1),
              string("type", "Redirect kind", enum=("redirect", "permanent")),
          )),
    destroy("delete-redirect-rule-tool", "redirect_rules.delete", "Delete a redirect rule.",
            ids=SITE + ("rule_id",), message="Redirect rule {rule_id} deleted."),
    read("list-security-rules-tool", "security_rules.list",
         "List HTTP basic-auth rules of a site.", ids=SITE),
    read("get-security-rule-tool", "security_rules.get", "Get one security rule.", ids=SITE + ("rule_id",)),
    write("create-security-rule-tool", "security_rules.create",
          "Protect a path of the site with HTTP basic authentication.",
          ids=SITE, payload=CreateSecurityRule,
          params=(
              string("name", "Rule name", required=True, min_length=1),
              string("path", "Protected path; the whole site when omitted"),
              array("credentials", "Username/password pairs", required=True, min_items=1,
                    item_schema=CREDENTIAL),
          )),
    destroy("delete-security-rule-tool", "security_rules.delete", "Delete a security rule.",
            ids=SITE + ("rule_id",), message="Security rule {rule_id} deleted."),
    read("list-webhooks-tool", "webhooks.list", "List deployment webhooks of a site.", ids=SITE),
    read("get-webhook-tool", "webhooks.get", "Get one deployment webhook.", ids=SITE + ("webhook_id",)),
    write("create-webhook-tool", "webhooks.create",
          "Call a URL after every deployment of the site.",
          ids=SITE, payload=CreateWebhook,
          params=(string("url", "URL to call", required=True, min_length=1),)),
    destroy("delete-webhook-tool", "webhooks.delete", "Delete a deployment webhook.",
            ids=SITE + ("webhook_id",), message="Webhook {webhook_id} deleted."),
]
