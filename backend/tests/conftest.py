"""Root conftest — shared test configuration."""

import os

# Pin defaults before ogiri.main builds its module-level app
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("STATIC_DIR", "__no_static_dir__")
