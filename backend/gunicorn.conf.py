import os

# Server socket
bind = f"0.0.0.0:{os.environ.get('PORT', '8080')}"

# Computations are CPU-bound and short; a few threads per worker is enough
workers = int(os.environ.get("GUNICORN_WORKERS", "2"))
threads = int(os.environ.get("GUNICORN_THREADS", "4"))
worker_class = "gthread"
worker_tmp_dir = "/dev/shm"

# Long transit ranges are the slowest requests
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "60"))
graceful_timeout = 30
keepalive = 5

proc_name = "iruastro-api"

daemon = False
pidfile = None
preload_app = True

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()

# h: remote address, t: date/time, r: request line, s: status, b: size, D: microseconds
access_log_format = '%(h)s %(t)s "%(r)s" %(s)s %(b)s "%(a)s" %(D)s'

wsgi_app = "iruastro:create_app()"


def is_health_check(request):
    return request.path == "/healthz"


def when_ready(server):
    server.log.info(f"Gunicorn server ready - Workers: {workers}, Threads: {threads}")


def post_fork(server, worker):
    server.log.info(f"Worker {worker.pid} spawned")


def pre_request(worker, req):
    # Don't log health checks
    if is_health_check(req):
        return
    worker.log.debug(f"{req.method} {req.path}")


def worker_abort(worker):
    worker.log.error(f"Worker {worker.pid} timed out")


def on_exit(server):
    server.log.info("Shutting down Gunicorn server")
