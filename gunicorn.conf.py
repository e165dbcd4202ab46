"""Gunicorn configuration for production deployment."""

bind = '0.0.0.0:8000'

# SQLite serializes writers, so keep the worker count small
workers = 2
threads = 4
worker_class = 'gthread'

timeout = 30

# Logging
accesslog = '-'
errorlog = '-'
loglevel = 'info'

proc_name = 'lunchly'
preload_app = True
