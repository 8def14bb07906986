"""
Gunicorn configuration for the surveillance API.

    gunicorn core.wsgi:application -c deployment/gunicorn/gunicorn_config.py
"""
import multiprocessing
import os

bind = os.getenv('GUNICORN_BIND', 'unix:/run/livestock-surveillance/gunicorn.sock')
workers = int(os.getenv('GUNICORN_WORKERS', multiprocessing.cpu_count() * 2 + 1))
worker_class = "sync"
worker_tmp_dir = "/dev/shm"
max_requests = 1000
max_requests_jitter = 100
# National overview aggregates the whole registry in one request
timeout = int(os.getenv('GUNICORN_TIMEOUT', 120))
keepalive = 5

# Logging
accesslog = os.getenv('GUNICORN_ACCESS_LOG', '-')
errorlog = os.getenv('GUNICORN_ERROR_LOG', '-')
loglevel = os.getenv('LOG_LEVEL', 'info').lower()
access_log_format = '%(h)s %(u)s %(t)s "%(r)s" %(s)s %(b)s %(D)s'

proc_name = "livestock-surveillance"
daemon = False


def when_ready(server):
    server.log.info(f"Surveillance API ready with {workers} workers on {bind}")


def worker_abort(worker):
    """Called when a worker times out, usually a slow rollup request."""
    worker.log.warning(f"Worker {worker.pid} aborted")
