#!/usr/bin/env python3
"""Database and database user models."""

from dataclasses import dataclass, field
from typing import Any, List, Optional
from models.base import ForgeModel, ModelCollection, UNSET


@dataclass(frozen=True)
class Database(ForgeModel):
    id: int
    server_id: Optional[int] = None
    name: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class CreateDatabase(ForgeModel):
    name: str
    user: Any = UNSET
    password: Any = UNSET


@dataclass(frozen=True)
class DatabaseCollection(ModelCollection):
    item_model = Database
    key = "databases"


@dataclass(frozen=True)
class DatabaseUser(ForgeModel):
    id: int
    server_id: Optional[int] = None
    name: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    databases: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class CreateDatabaseUser(ForgeModel):
    name: str
    password: str
    databases: Any = UNSET


@dataclass(frozen=True)
class UpdateDatabaseUser(ForgeModel):
    name: Any = UNSET
    password: Any = UNSET
    databases: Any = UNSET


@dataclass(frozen=True)
class DatabaseUserCollection(ModelCollection):
    item_model = DatabaseUser
    key = "users"
