#!/usr/bin/env python3
"""Scheduled job, daemon and queue worker tools."""

from models.process import CreateDaemon, CreateJob, CreateWorker
from tools.operation_tool import boolean, destroy, integer, read, string, write

FREQUENCIES = ("minutely", "hourly", "nightly", "weekly", "monthly", "reboot", "custom")
SITE = ("server_id", "site_id")

OPERATIONS = [
    read("list-scheduled-jobs-tool", "jobs.list", "List scheduled (cron) jobs on a server.",
         ids=("server_id",)),
    read("get-scheduled-job-tool", "jobs.get", "Get one scheduled job.", ids=("server_id", "job_id")),
    write("create-scheduled-job-tool", "jobs.create",
          "Schedule a command. With frequency 'custom' supply minute, hour, day, month and weekday.",
          ids=("server_id",), payload=CreateJob,
          params=(
              string("command", "Command to run", required=True, min_length=1),
              string("frequency", "How often to run", required=True, enum=FREQUENCIES),
              string("user", "System user", default="forge"),
              string("minute", "Cron minute field"),
              string("hour", "Cron hour field"),
              string("day", "Cron day-of-month field"),
              string("month", "Cron month field"),
              string("weekday", "Cron day-of-week field"),
          )),
    destroy("delete-scheduled-job-tool", "jobs.delete", "Delete a scheduled job.",
            ids=("server_id", "job_id"), message="Scheduled job {job_id} deleted."),
    read("get-job-output-tool", "jobs.get_output", "Get the output of the last run of a scheduled job.",
         ids=("server_id", "job_id"), key="output"),
    read("list-daemons-tool", "daemons.list", "List supervisor daemons on a server.",
         ids=("server_id",)),
    read("get-daemon-tool", "daemons.get", "Get one daemon.", ids=("server_id", "daemon_id")),
    write("create-daemon-tool", "daemons.create",
          "Keep a long-running command alive under supervisor.",
          ids=("server_id",), payload=CreateDaemon,
          params=(
              string("command", "Command to run", required=True, min_length=1),
              string("directory", "Working directory"),
              string("user", "System user", default="forge"),
              integer("processes", "Number of processes", minimum=1),
              integer("startsecs", "Seconds the process must stay up to count as started", minimum=0),
          )),
    write("restart-daemon-tool", "daemons.restart", "Restart a daemon.",
          ids=("server_id", "daemon_id"), message="Daemon {daemon_id} restarting."),
    destroy("delete-daemon-tool", "daemons.delete", "Stop and delete a daemon.",
            ids=("server_id", "daemon_id"), message="Daemon {daemon_id} deleted."),
    read("list-workers-tool", "workers.list", "List queue workers of a site.", ids=SITE),
    read("get-worker-tool", "workers.get", "Get one queue worker.", ids=SITE + ("worker_id",)),
    write("create-worker-tool", "workers.create",
          "Start a queue worker for a site.",
          ids=SITE, payload=CreateWorker,
          params=(
              string("connection", "Queue connection, e.g. redis or database", required=True, min_length=1),
              string("queue", "Queue names, comma separated", default="default"),
              integer("timeout", "Seconds a job may run", minimum=0),
              integer("sleep", "Seconds to sleep when no job is available", minimum=0),
              integer("tries", "Maximum attempts per job", minimum=1),
              integer("processes", "Number of worker processes", minimum=1),
              boolean("daemon", "Run as a daemon (queue:work)"),
              boolean("force", "Run even in maintenance mode"),
          )),
    write("restart-worker-tool", "workers.restart", "Restart a queue worker.",
          ids=SITE + ("worker_id",), message="Worker {worker_id} restarting."),
    destroy("delete-worker-tool", "workers.delete", "Stop and delete a queue worker.",
            ids=SITE + ("worker_id",), message="Worker {worker_id} deleted."),
    read("get-worker-output-tool", "workers.get_output", "Get recent output of a queue worker.",
         ids=SITE + ("worker_id",), key="output"),
]
