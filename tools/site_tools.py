#!/usr/bin/env python3
"""Site management, git and site configuration tools."""

from models.site import CreateSite, InstallGitRepository, UpdateGitRepository, UpdateSite
from tools.operation_tool import array, boolean, destroy, obj, read, string, write

PROJECT_TYPES = ("php", "html", "symfony", "symfony_dev", "symfony_four")
GIT_PROVIDERS = ("github", "gitlab", "gitlab-custom", "bitbucket", "custom")
SITE = ("server_id", "site_id")

OPERATIONS = [
    read("list-sites-tool", "sites.list",
         "List all sites on a server with their domain, repository, deployment status and PHP version.",
         ids=("server_id",)),
    read("get-site-tool", "sites.get",
         "Get details of one site, including repository, quick deploy state and deployment URL.",
         ids=SITE),
    write("create-site-tool", "sites.create",
          "Create a new site on a server. Installation continues asynchronously.",
          ids=("server_id",), payload=CreateSite,
          params=(
              string("domain", "Site domain, e.g. example.com", required=True, min_length=1, max_length=255),
              string("project_type", "Project type", required=True, enum=PROJECT_TYPES),
              array("aliases", "Additional domains"),
              string("directory", "Web directory relative to the site root, e.g. /public"),
              boolean("isolated", "Run the site as its own isolated user"),
              string("username", "Isolated user name"),
              string("database", "Database to create with the site"),
              string("php_version", "PHP version slug, e.g. php83"),
              string("nginx_template", "Nginx template ID to use"),
          )),
    write("update-site-tool", "sites.update",
          "Update a site's name, web directory, PHP version, aliases or wildcard setting. "
          "Omitted fields are left unchanged.",
          ids=SITE, payload=UpdateSite,
          params=(
              string("name", "New domain name", nullable=True),
              string("directory", "Web directory", nullable=True),
              string("php_version", "PHP version slug", nullable=True),
              array("aliases", "Additional domains", nullable=True),
              boolean("wildcards", "Serve wildcard subdomains", nullable=True),
          ),
          idempotent=True),
    destroy("delete-site-tool", "sites.delete",
            "Delete a site and its files from the server. Irreversible.",
            ids=SITE, message="Site {site_id} deleted."),
    write("install-git-repository-tool", "sites.install_git_repository",
          "Attach a git repository to a site and clone it.",
          ids=SITE, payload=InstallGitRepository,
          params=(
              string("provider", "Git provider", required=True, enum=GIT_PROVIDERS),
              string("repository", "Repository, e.g. acme/app", required=True, min_length=1),
              string("branch", "Branch to deploy", default="main"),
              boolean("composer", "Run composer install after cloning"),
          )),
    write("update-git-repository-tool", "sites.update_git_repository",
          "Change the repository or branch of a site.",
          ids=SITE, payload=UpdateGitRepository,
          params=(
              string("provider", "Git provider", required=True, enum=GIT_PROVIDERS),
              string("repository", "Repository, e.g. acme/app", required=True, min_length=1),
              string("branch", "Branch to deploy", required=True, min_length=1),
          ),
          message="Git repository for site {site_id} updated.", idempotent=True),
    destroy("destroy-git-repository-tool", "sites.destroy_git_repository",
            "Detach the git repository from a site and remove its files.",
            ids=SITE, message="Git repository removed from site {site_id}."),
    write("create-deploy-key-tool", "sites.create_deploy_key",
          "Create a site-specific deploy key. Add the returned key to the repository.",
          ids=SITE, key="deploy_key"),
    destroy("destroy-deploy-key-tool", "sites.delete_deploy_key",
            "Remove the site-specific deploy key.",
            ids=SITE, message="Deploy key removed from site {site_id}."),
    write("change-php-version-tool", "sites.change_php_version",
          "Switch the PHP version serving a site.",
          ids=SITE, args=("version",),
          params=(string("version", "PHP version slug, e.g. php83", required=True, min_length=1),),
          message="Site {site_id} now uses {version}.", idempotent=True),
    read("get-nginx-config-tool", "sites.get_nginx_config",
         "Read the nginx configuration file of a site.", ids=SITE, key="content"),
    write("update-nginx-config-tool", "sites.update_nginx_config",
          "Replace the nginx configuration of a site. Invalid configuration can take the site offline; "
          "run test-nginx-tool afterwards.",
          ids=SITE, args=("content",), params=(string("content", "Full nginx configuration", required=True,
                                                      min_length=1),),
          message="Nginx configuration for site {site_id} updated.", idempotent=True),
    read("get-env-file-tool", "sites.get_env_file",
         "Read the .env file of a site. The content contains secrets.", ids=SITE, key="content"),
    write("update-env-file-tool", "sites.update_env_file",
          "Replace the .env file of a site.",
          ids=SITE, args=("content",), params=(string("content", "Full .env content", required=True),),
          message="Environment file for site {site_id} updated.", idempotent=True),
    read("list-aliases-tool", "sites.list_aliases", "List the alias domains of a site.",
         ids=SITE, key="aliases"),
    write("update-aliases-tool", "sites.update_aliases",
          "Replace the alias domains of a site.",
          ids=SITE, args=("aliases",), params=(array("aliases", "Alias domains", required=True),),
          message="Aliases for site {site_id} updated.", idempotent=True),
    read("get-load-balancing-tool", "sites.get_load_balancing",
         "Get the upstream servers of a load-balanced site.", ids=SITE, key="balancing"),
    write("update-load-balancing-tool", "sites.update_load_balancing",
          "Set the upstream servers and balancing method of a load-balanced site.",
          ids=SITE, args=("servers", "method"),
          params=(
              array("servers", "Upstream servers: objects with id, weight, port, backup", required=True,
                    min_items=1, item_schema={"type": "object"}),
              string("method", "Balancing method", enum=("round_robin", "least_conn", "ip_hash"),
                     default="round_robin"),
          ),
          message="Load balancing for site {site_id} updated.", idempotent=True),
    read("get-packages-auth-tool", "sites.get_packages_auth",
         "Get the composer package repository credentials of a site.", ids=SITE, key="credentials"),
    write("update-packages-auth-tool", "sites.update_packages_auth",
          "Set composer package repository credentials (auth.json) for a site.",
          ids=SITE, args=("packages",),
          params=(obj("packages", "Map of repository host to {username, password}", required=True),),
          message="Package credentials for site {site_id} updated.", idempotent=True),
    write("install-wordpress-tool", "sites.install_wordpress",
          "Install WordPress on a site using an existing database and database user.",
          ids=SITE, args=("database", "user"),
          params=(
              string("database", "Database name", required=True, min_length=1),
              string("user", "Database user name", required=True, min_length=1),
          ),
          message="WordPress installation started on site {site_id}."),
    destroy("uninstall-wordpress-tool", "sites.uninstall_wordpress",
            "Remove WordPress from a site.", ids=SITE, message="WordPress removed from site {site_id}."),
    write("install-phpmyadmin-tool", "sites.install_phpmyadmin",
          "Install phpMyAdmin on a site using an existing database and database user.",
          ids=SITE, args=("database", "user"),
          params=(
              string("database", "Database name", required=True, min_length=1),
              string("user", "Database user name", required=True, min_length=1),
          ),
          message="phpMyAdmin installation started on site {site_id}."),
    destroy("uninstall-phpmyadmin-tool", "sites.uninstall_phpmyadmin",
            "Remove phpMyAdmin from a site.", ids=SITE, message="phpMyAdmin removed from site {site_id}."),
    read("get-site-log-tool", "sites.log", "Read the application log of a site.", ids=SITE, key="log"),
    destroy("clear-site-log-tool", "sites.clear_log", "Clear the application log of a site.",
            ids=SITE, message="Log for site {site_id} cleared."),
]
