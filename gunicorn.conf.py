"""
Gunicorn configuration for Captain's Log production deployment.

Usage:
    gunicorn captainslog.main:app -c gunicorn.conf.py
"""

import multiprocessing
import os

# Bind to all interfaces; PORT is set by most PaaS hosts
bind = f"0.0.0.0:{os.getenv('PORT', '8000')}"

# Worker processes: CPU cores * 2 + 1 (Gunicorn recommendation)
workers = int(os.getenv("WEB_CONCURRENCY", multiprocessing.cpu_count() * 2 + 1))

# Use Uvicorn's ASGI worker for FastAPI
worker_class = "uvicorn.workers.UvicornWorker"

# Request timeout (seconds); the digest endpoint sends mail inline
timeout = 120

# Keep-alive connections (seconds)
keepalive = 5

# Logging
accesslog = "-"  # stdout
errorlog = "-"   # stderr
loglevel = "info"
