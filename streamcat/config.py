import os
import json

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SOURCE_URLS = ["http://www.scala-lang.org", "http://www.scala-tools.org"]

OUTPUT_PATH = os.getenv("OUTPUT_PATH", "/tmp/streamcat.out")
SOURCE_URLS = json.loads(os.getenv("SOURCE_URLS") or json.dumps(DEFAULT_SOURCE_URLS))
if not isinstance(SOURCE_URLS, list) or not all(isinstance(u, str) for u in SOURCE_URLS):
    raise ValueError(f"SOURCE_URLS must be a JSON list of strings, got {SOURCE_URLS!r}")

HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT")) if os.getenv("HTTP_TIMEOUT") else None
CHECK_STATUS = os.getenv("CHECK_STATUS", "").lower() in ("1", "true", "yes", "on")

LOG_LOCATION = os.getenv("LOG_LOCATION", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
