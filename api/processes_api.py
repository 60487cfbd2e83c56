#!/usr/bin/env python3
"""Scheduled jobs, daemons and queue workers API façades."""

from api.base_resource import BaseResource
from api.endpoints import get, post, delete
from models.process import (
    CreateDaemon, CreateJob, CreateWorker, Daemon, DaemonCollection,
    Job, JobCollection, Worker, WorkerCollection,
)

SERVER_CTX = ("server_id",)
SITE_CTX = ("server_id", "site_id")
JOBS = "/servers/{server_id}/jobs"
JOB = JOBS + "/{job_id}"
DAEMONS = "/servers/{server_id}/daemons"
DAEMON = DAEMONS + "/{daemon_id}"
WORKERS = "/servers/{server_id}/sites/{site_id}/workers"
WORKER = WORKERS + "/{worker_id}"

LIST_JOBS = get(JOBS, JobCollection, context=SERVER_CTX)
GET_JOB = get(JOB, Job, "job", SERVER_CTX)
CREATE_JOB = post(JOBS, Job, "job", SERVER_CTX)
DELETE_JOB = delete(JOB)
JOB_OUTPUT = get(JOB + "/output")

LIST_DAEMONS = get(DAEMONS, DaemonCollection, context=SERVER_CTX)
GET_DAEMON = get(DAEMON, Daemon, "daemon", SERVER_CTX)
CREATE_DAEMON = post(DAEMONS, Daemon, "daemon", SERVER_CTX)
RESTART_DAEMON = post(DAEMON + "/restart")
DELETE_DAEMON = delete(DAEMON)

LIST_WORKERS = get(WORKERS, WorkerCollection, context=SITE_CTX)
GET_WORKER = get(WORKER, Worker, "worker", SITE_CTX)
CREATE_WORKER = post(WORKERS, Worker, "worker", SITE_CTX)
RESTART_WORKER = post(WORKER + "/restart")
DELETE_WORKER = delete(WORKER)
WORKER_OUTPUT = get(WORKER + "/output")


class JobsAPI(BaseResource):
    """Scheduled (cron) jobs."""

    async def list(self, server_id: int) -> JobCollection:
        return await self._send(LIST_JOBS, server_id=server_id)

    async def get(self, server_id: int, job_id: int) -> Job:
        return await self._send(GET_JOB, server_id=server_id, job_id=job_id)

    async def create(self, server_id: int, data: CreateJob) -> Job:
        return await self._send(CREATE_JOB, data, server_id=server_id)

    async def delete(self, server_id: int, job_id: int) -> None:
        await self._call(DELETE_JOB, server_id=server_id, job_id=job_id)

    async def get_output(self, server_id: int, job_id: int) -> str:
        response = await self._send(JOB_OUTPUT, server_id=server_id, job_id=job_id)
        return response.json("output", "")


class DaemonsAPI(BaseResource):
    """Supervisor-managed background processes."""

    async def list(self, server_id: int) -> DaemonCollection:
        return await self._send(LIST_DAEMONS, server_id=server_id)

    async def get(self, server_id: int, daemon_id: int) -> Daemon:
        return await self._send(GET_DAEMON, server_id=server_id, daemon_id=daemon_id)

    async def create(self, server_id: int, data: CreateDaemon) -> Daemon:
        return await self._send(CREATE_DAEMON, data, server_id=server_id)

    async def restart(self, server_id: int, daemon_id: int) -> None:
        await self._call(RESTART_DAEMON, server_id=server_id, daemon_id=daemon_id)

    async def delete(self, server_id: int, daemon_id: int) -> None:
        await self._call(DELETE_DAEMON, server_id=server_id, daemon_id=daemon_id)


class WorkersAPI(BaseResource):
    """Queue workers attached to a site."""

    async def list(self, server_id: int, site_id: int) -> WorkerCollection:
        return await self._send(LIST_WORKERS, server_id=server_id, site_id=site_id)

    async def get(self, server_id: int, site_id: int, worker_id: int) -> Worker:
        return await self._send(GET_WORKER, server_id=server_id, site_id=site_id, worker_id=worker_id)

    async def create(self, server_id: int, site_id: int, data: CreateWorker) -> Worker:
        return await self._send(CREATE_WORKER, data, server_id=server_id, site_id=site_id)

    async def restart(self, server_id: int, site_id: int, worker_id: int) -> None:
        await self._call(RESTART_WORKER, server_id=server_id, site_id=site_id, worker_id=worker_id)

    async def delete(self, server_id: int, site_id: int, worker_id: int) -> None:
        await self._call(DELETE_WORKER, server_id=server_id, site_id=site_id, worker_id=worker_id)

    async def get_output(self, server_id: int, site_id: int, worker_id: int) -> str:
        response = await self._send(WORKER_OUTPUT, server_id=server_id, site_id=site_id, worker_id=worker_id)
        return response.json("output", "")
