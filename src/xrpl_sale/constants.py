"""
Constants for the XRPL.Sale client.
"""

# SDK version
VERSION = "1.0.0"

# API environments
PRODUCTION_URL = "https://api.xrpl.sale/v1"
TESTNET_URL = "https://api-testnet.xrpl.sale/v1"

# Request configuration (seconds)
DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRY_DELAY = 1.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_BACKOFF_FACTOR = 2.0

# Connection pool
CONNECTION_LIMIT = 100
CONNECTION_LIMIT_PER_HOST = 20
DNS_CACHE_TTL = 300

# Statuses retried with exponential backoff
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)

# Headers
USER_AGENT = f"XRPL.Sale-Python-SDK/{VERSION}"
API_KEY_HEADER = "X-API-Key"
SIGNATURE_HEADER = "X-XRPL-Sale-Signature"
SIGNATURE_PREFIX = "sha256="

# Framework integration
DEFAULT_WEBHOOK_PATH = "/webhooks/xrplsale"

# Status codes recorded by the performance monitor
SUCCESS_STATUS_CODE = 200
ERROR_STATUS_CODE = 500
