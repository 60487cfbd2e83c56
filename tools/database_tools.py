#!/usr/bin/env python3
"""Database and database user tools."""

from models.database import CreateDatabase, CreateDatabaseUser, UpdateDatabaseUser
from tools.operation_tool import array, destroy, read, string, write

OPERATIONS = [
    read("list-databases-tool", "databases.list", "List databases on a server.", ids=("server_id",)),
    read("get-database-tool", "databases.get", "Get one database.", ids=("server_id", "database_id")),
    write("create-database-tool", "databases.create",
          "Create a database, optionally with a user that has access to it.",
          ids=("server_id",), payload=CreateDatabase,
          params=(
              string("name", "Database name", required=True, min_length=1, max_length=255),
              string("user", "Database user to create", max_length=255),
              string("password", "Password of the new user", min_length=8),
          ),
          message="Database created."),
    destroy("delete-database-tool", "databases.delete",
            "Drop a database. All data in it is lost.",
            ids=("server_id", "database_id"), message="Database {database_id} deleted."),
    write("sync-databases-tool", "databases.sync",
          "Import databases created outside Forge into the Forge listing.",
          ids=("server_id",), message="Databases on server {server_id} synced.", idempotent=True),
    read("list-database-users-tool", "database_users.list", "List database users on a server.",
         ids=("server_id",)),
    read("get-database-user-tool", "database_users.get", "Get one database user.",
         ids=("server_id", "user_id")),
    write("create-database-user-tool", "database_users.create",
          "Create a database user with access to the given databases.",
          ids=("server_id",), payload=CreateDatabaseUser,
          params=(
              string("name", "User name", required=True, min_length=1, max_length=255),
              string("password", "Password", required=True, min_length=8),
              array("databases", "IDs of databases the user may access", items="integer"),
          ),
          message="Database user created."),
    write("update-database-user-tool", "database_users.update",
          "Change which databases a user can access. Omitted fields are left unchanged.",
          ids=("server_id", "user_id"), payload=UpdateDatabaseUser,
          params=(
              string("name", "User name", max_length=255),
              string("password", "New password", min_length=8),
              array("databases", "IDs of databases the user may access", items="integer"),
          ),
          idempotent=True),
    destroy("delete-database-user-tool", "database_users.delete", "Delete a database user.",
            ids=("server_id", "user_id"), message="Database user {user_id} deleted."),
]
