"""Root conftest: pins client settings before hms_client.config is imported."""
from __future__ import annotations

import os

_TEST_ENV = {
    "API_URL": "http://testserver",
    "API_TOKEN": "",
    "REALTIME_URL": "http://testserver",
    "SEARCH_DEBOUNCE_SECONDS": "0.05",
    "LOG_LEVEL": "DEBUG",
}

for key, value in _TEST_ENV.items():
    os.environ.setdefault(key, value)
