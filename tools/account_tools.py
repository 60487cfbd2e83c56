#!/usr/bin/env python3
"""Account tools: the authenticated user, provider credentials and regions."""

from tools.operation_tool import read

OPERATIONS = [
    read("get-user-tool", "account.user", "Get the Forge user the API token belongs to."),
    read("list-credentials-tool", "account.credentials",
         "List server provider credentials; their IDs are used by create-server-tool."),
    read("list-regions-tool", "account.regions",
         "List provider regions and sizes available for new servers."),
]
