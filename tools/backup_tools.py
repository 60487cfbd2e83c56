#!/usr/bin/env python3
"""Database backup configuration tools."""

from models.backup import CreateBackupConfiguration, UpdateBackupConfiguration
from tools.operation_tool import array, destroy, integer, obj, read, string, write

BACKUP_PROVIDERS = ("s3", "spaces", "custom")
FREQUENCIES = ("hourly", "daily", "weekly", "custom")
CONFIGURATION = ("server_id", "configuration_id")

OPERATIONS = [
    read("list-backup-configurations-tool", "backups.list_configurations",
         "List database backup configurations of a server.", ids=("server_id",)),
    read("get-backup-configuration-tool", "backups.get_configuration",
         "Get one backup configuration with its recent backups.", ids=CONFIGURATION),
    write("create-backup-configuration-tool", "backups.create_configuration",
          "Schedule database backups to S3, DigitalOcean Spaces or a custom S3-compatible store.",
          ids=("server_id",), payload=CreateBackupConfiguration,
          params=(
              string("provider", "Storage provider", required=True, enum=BACKUP_PROVIDERS),
              obj("credentials", "Provider credentials (endpoint, region, bucket, access_key, secret_key)"),
              string("frequency", "Backup frequency", enum=FREQUENCIES),
              array("databases", "IDs of databases to back up", items="integer", min_items=1),
              integer("retention", "Number of backups to keep", minimum=1),
              string("directory", "Directory inside the bucket"),
              string("email", "Address notified on failure"),
              integer("day", "Day of week for weekly backups (0 = Sunday)", minimum=0, maximum=6),
              string("time", "Time of day for daily and weekly backups, e.g. 04:00"),
          )),
    write("update-backup-configuration-tool", "backups.update_configuration",
          "Change a backup configuration. Omitted fields are left unchanged.",
          ids=CONFIGURATION, payload=UpdateBackupConfiguration,
          params=(
              string("provider", "Storage provider", enum=BACKUP_PROVIDERS),
              obj("credentials", "Provider credentials"),
              string("frequency", "Backup frequency", enum=FREQUENCIES),
              array("databases", "IDs of databases to back up", items="integer"),
              integer("retention", "Number of backups to keep", minimum=1),
              string("directory", "Directory inside the bucket"),
              string("email", "Address notified on failure"),
              integer("day", "Day of week for weekly backups", minimum=0, maximum=6),
              string("time", "Time of day, e.g. 04:00"),
          ),
          idempotent=True),
    destroy("delete-backup-configuration-tool", "backups.delete_configuration",
            "Delete a backup configuration. Stored archives are not removed from the bucket.",
            ids=CONFIGURATION, message="Backup configuration {configuration_id} deleted."),
    write("restore-backup-tool", "backups.restore",
          "Restore a backup archive into its database, overwriting current data.",
          ids=CONFIGURATION + ("backup_id",), destructive=True,
          message="Restore of backup {backup_id} started."),
    destroy("delete-backup-tool", "backups.delete", "Delete one backup archive.",
            ids=CONFIGURATION + ("backup_id",), message="Backup {backup_id} deleted."),
]
