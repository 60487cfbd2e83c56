#!/usr/bin/env python3
"""Long-running and scheduled process models: jobs, daemons and queue workers."""

from dataclasses import dataclass
from typing import Any, Optional
from models.base import ForgeModel, ModelCollection, UNSET


@dataclass(frozen=True)
class Job(ForgeModel):
    id: int
    server_id: Optional[int] = None
    command: Optional[str] = None
    user: Optional[str] = None
    frequency: Optional[str] = None
    cron: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class CreateJob(ForgeModel):
    command: str
    frequency: str
    user: Any = UNSET
    minute: Any = UNSET
    hour: Any = UNSET
    day: Any = UNSET
    month: Any = UNSET
    weekday: Any = UNSET


@dataclass(frozen=True)
class JobCollection(ModelCollection):
    item_model = Job
    key = "jobs"


@dataclass(frozen=True)
class Daemon(ForgeModel):
    id: int
    server_id: Optional[int] = None
    command: Optional[str] = None
    user: Optional[str] = None
    status: Optional[str] = None
    directory: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class CreateDaemon(ForgeModel):
    command: str
    directory: Any = UNSET
    user: Any = UNSET
    processes: Any = UNSET
    startsecs: Any = UNSET


@dataclass(frozen=True)
class DaemonCollection(ModelCollection):
    item_model = Daemon
    key = "daemons"


@dataclass(frozen=True)
class Worker(ForgeModel):
    id: int
    server_id: Optional[int] = None
    site_id: Optional[int] = None
    connection: Optional[str] = None
    command: Optional[str] = None
    queue: Optional[str] = None
    timeout: Optional[int] = None
    sleep: Optional[int] = None
    tries: Optional[int] = None
    processes: Optional[int] = None
    environment: Optional[str] = None
    daemon: Optional[int] = None
    status: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class CreateWorker(ForgeModel):
    connection: str
    queue: Any = UNSET
    timeout: Any = UNSET
    sleep: Any = UNSET
    tries: Any = UNSET
    processes: Any = UNSET
    daemon: Any = UNSET
    force: Any = UNSET


@dataclass(frozen=True)
class WorkerCollection(ModelCollection):
    item_model = Worker
    key = "workers"
