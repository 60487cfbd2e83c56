#!/usr/bin/env python3
"""Database backup configurations API façade."""

from api.base_resource import BaseResource
from api.endpoints import get, post, put, delete
from models.backup import (
    BackupConfiguration, BackupConfigurationCollection,
    CreateBackupConfiguration, UpdateBackupConfiguration,
)

SERVER_CTX = ("server_id",)
CONFIGURATIONS = "/servers/{server_id}/backup-configurations"
CONFIGURATION = CONFIGURATIONS + "/{configuration_id}"
BACKUP = CONFIGURATION + "/backups/{backup_id}"

LIST_CONFIGURATIONS = get(CONFIGURATIONS, BackupConfigurationCollection, context=SERVER_CTX)
GET_CONFIGURATION = get(CONFIGURATION, BackupConfiguration, "backup", SERVER_CTX)
CREATE_CONFIGURATION = post(CONFIGURATIONS, BackupConfiguration, "backup", SERVER_CTX)
UPDATE_CONFIGURATION = put(CONFIGURATION, BackupConfiguration, "backup", SERVER_CTX)
DELETE_CONFIGURATION = delete(CONFIGURATION)
RESTORE_BACKUP = post(BACKUP)
DELETE_BACKUP = delete(BACKUP)


class BackupsAPI(BaseResource):

    async def list_configurations(self, server_id: int) -> BackupConfigurationCollection:
        return await self._send(LIST_CONFIGURATIONS, server_id=server_id)

    async def get_configuration(self, server_id: int, configuration_id: int) -> BackupConfiguration:
        return await self._send(GET_CONFIGURATION, server_id=server_id, configuration_id=configuration_id)

    async def create_configuration(self, server_id: int, data: CreateBackupConfiguration) -> BackupConfiguration:
        return await self._send(CREATE_CONFIGURATION, data, server_id=server_id)

    async def update_configuration(self, server_id: int, configuration_id: int,
                                   data: UpdateBackupConfiguration) -> BackupConfiguration:
        return await self._send(UPDATE_CONFIGURATION, data, server_id=server_id,
                                configuration_id=configuration_id)

    async def delete_configuration(self, server_id: int, configuration_id: int) -> None:
        await self._call(DELETE_CONFIGURATION, server_id=server_id, configuration_id=configuration_id)

    async def restore(self, server_id: int, configuration_id: int, backup_id: int) -> None:
        """Restore one backup archive into its database."""
        await self._call(RESTORE_BACKUP, server_id=server_id, configuration_id=configuration_id,
                         backup_id=backup_id)

    async def delete(self, server_id: int, configuration_id: int, backup_id: int) -> None:
        await self._call(DELETE_BACKUP, server_id=server_id, configuration_id=configuration_id,
                         backup_id=backup_id)
