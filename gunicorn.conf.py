"""
Gunicorn configuration for the LL(1) analysis API.

Environment overrides:
    LL1_BIND          bind address, default 0.0.0.0:5000
    LL1_WORKERS       worker processes, default one per core plus one
    LL1_WORKER_CLASS  sync (default) or gevent
    LL1_TIMEOUT       seconds before a busy worker is killed, default 30
"""

import multiprocessing
import os


def _env_int(name, default):
    return int(os.environ.get(name, default))


bind = os.environ.get("LL1_BIND", "0.0.0.0:5000")

# requests are CPU bound and short, so plain processes
worker_class = os.environ.get("LL1_WORKER_CLASS", "sync")
workers = _env_int("LL1_WORKERS", multiprocessing.cpu_count() + 1)
if worker_class == "gevent":
    worker_connections = 100

timeout = _env_int("LL1_TIMEOUT", 30)
graceful_timeout = timeout
keepalive = 2

max_requests = 2000
max_requests_jitter = 100

accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LL1_LOG_LEVEL", "info")

proc_name = "ll1_analysis_api"


def on_starting(server):
    server.log.info("LL(1) API on %s: %d %s workers", bind, workers, worker_class)


def worker_abort(worker):
    worker.log.warning("Worker %s aborted after %ss; request too large?", worker.pid, timeout)
