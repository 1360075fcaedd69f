import logging
import os

DB_PATH = os.getenv("ZENTASK_DB_PATH", "todo.db")
STORAGE_KEY = os.getenv("ZENTASK_STORAGE_KEY", "zenTasks")
LOG_LEVEL = getattr(logging, os.getenv("ZENTASK_LOG_LEVEL", "INFO").upper(), logging.INFO)

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
