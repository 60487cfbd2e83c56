#!/usr/bin/env python3
"""Database backup models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from models.base import ForgeModel, ModelCollection, UNSET


@dataclass(frozen=True)
class Backup(ForgeModel):
    id: int
    server_id: Optional[int] = None
    backup_configuration_id: Optional[int] = None
    status: Optional[str] = None
    restore_status: Optional[str] = None
    archive_path: Optional[str] = None
    size: Optional[int] = None
    uuid: Optional[str] = None
    duration: Optional[int] = None
    last_backup_time: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class BackupConfiguration(ForgeModel):
    id: int
    server_id: Optional[int] = None
    day_of_week: Optional[int] = None
    time: Optional[str] = None
    provider: Optional[str] = None
    provider_name: Optional[str] = None
    frequency: Optional[str] = None
    retention: Optional[int] = None
    databases: List[Dict[str, Any]] = field(default_factory=list)
    backups: List[Dict[str, Any]] = field(default_factory=list)
    last_backup_time: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class CreateBackupConfiguration(ForgeModel):
    provider: str
    credentials: Any = UNSET
    frequency: Any = UNSET
    databases: Any = UNSET
    retention: Any = UNSET
    directory: Any = UNSET
    email: Any = UNSET
    day: Any = UNSET
    time: Any = UNSET


@dataclass(frozen=True)
class UpdateBackupConfiguration(ForgeModel):
    provider: Any = UNSET
    credentials: Any = UNSET
    frequency: Any = UNSET
    databases: Any = UNSET
    retention: Any = UNSET
    directory: Any = UNSET
    email: Any = UNSET
    day: Any = UNSET
    time: Any = UNSET


@dataclass(frozen=True)
class BackupConfigurationCollection(ModelCollection):
    item_model = BackupConfiguration
    key = "backups"
