#!/usr/bin/env python3
"""Deployment and site command tools."""

from models.site import ExecuteSiteCommand
from tools.operation_tool import array, destroy, read, string, write

SITE = ("server_id", "site_id")

OPERATIONS = [
    write("deploy-site-tool", "sites.deploy",
          "Trigger a deployment of a site's repository using its deployment script. "
          "Check get-deployment-log-tool for the outcome.",
          ids=SITE, message="Deployment of site {site_id} triggered."),
    read("get-deployment-script-tool", "sites.deployment_script",
         "Read the deployment script of a site.", ids=SITE, key="script"),
    write("update-deployment-script-tool", "sites.update_deployment_script",
          "Replace the deployment script of a site.",
          ids=SITE, args=("content",),
          params=(string("content", "Full deployment script", required=True, min_length=1),),
          message="Deployment script for site {site_id} updated.", idempotent=True),
    read("get-deployment-log-tool", "sites.deployment_log",
         "Read the log of the most recent deployment of a site.", ids=SITE, key="log"),
    write("enable-quick-deploy-tool", "sites.enable_quick_deploy",
          "Deploy automatically whenever the configured branch receives a push.",
          ids=SITE, message="Quick deploy enabled for site {site_id}.", idempotent=True),
    destroy("disable-quick-deploy-tool", "sites.disable_quick_deploy",
            "Stop deploying automatically on push.",
            ids=SITE, message="Quick deploy disabled for site {site_id}."),
    write("reset-deployment-state-tool", "sites.reset_deployment_state",
          "Reset a deployment stuck in the deploying state.",
          ids=SITE, message="Deployment state of site {site_id} reset.", idempotent=True),
    read("list-deployment-history-tool", "sites.deployment_history",
         "List past deployments of a site with commit, author and status.", ids=SITE),
    read("get-deployment-history-deployment-tool", "sites.deployment_history_deployment",
         "Get one past deployment of a site.", ids=SITE + ("deployment_id",)),
    read("get-deployment-history-output-tool", "sites.deployment_history_output",
         "Get the output of one past deployment.", ids=SITE + ("deployment_id",), key="output"),
    write("set-deployment-failure-emails-tool", "sites.set_deployment_failure_emails",
          "Set the addresses notified when a deployment fails.",
          ids=SITE, args=("emails",),
          params=(array("emails", "Email addresses", required=True,
                        item_schema={"type": "string", "format": "email"}),),
          message="Deployment failure emails for site {site_id} updated.", idempotent=True),
    write("execute-site-command-tool", "sites.execute_command",
          "Run a shell command in a site's directory, e.g. php artisan migrate --force.",
          ids=SITE, payload=ExecuteSiteCommand,
          params=(string("command", "Command to run", required=True, min_length=1),)),
    read("list-command-history-tool", "sites.command_history",
         "List commands previously run on a site.", ids=SITE),
    read("get-site-command-tool", "sites.get_command",
         "Get one site command with its output.", ids=SITE + ("command_id",)),
]
