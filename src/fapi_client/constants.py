"""
Constants for the futures client.
"""

# API Configuration
DEFAULT_BASE_URL = "https://fapi.asterdex.com"
DEFAULT_STREAM_URL = "wss://fstream.asterdex.com/ws"
DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRY_DELAY = 1.0
DEFAULT_MAX_RETRIES = 3

# Authentication Configuration
DEFAULT_RECV_WINDOW = 5000  # milliseconds
API_KEY_HEADER = "X-MBX-APIKEY"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
USER_AGENT = "fapi-client/0.1"

# Business error codes are signed 16-bit integers
ERROR_CODE_MIN = -32768
ERROR_CODE_MAX = 32767

# Endpoints
ORDER_ENDPOINT = "/fapi/v1/order"
OPEN_ORDERS_ENDPOINT = "/fapi/v1/openOrders"
ALL_OPEN_ORDERS_ENDPOINT = "/fapi/v1/allOpenOrders"
ALL_ORDERS_ENDPOINT = "/fapi/v1/allOrders"
POSITION_RISK_ENDPOINT = "/fapi/v2/positionRisk"
BALANCE_ENDPOINT = "/fapi/v2/balance"
LEVERAGE_ENDPOINT = "/fapi/v1/leverage"
POSITION_SIDE_ENDPOINT = "/fapi/v1/positionSide/dual"
LISTEN_KEY_ENDPOINT = "/fapi/v1/listenKey"
SERVER_TIME_ENDPOINT = "/fapi/v1/time"
KLINES_ENDPOINT = "/fapi/v1/klines"
MARK_PRICE_ENDPOINT = "/fapi/v1/premiumIndex"
OPEN_INTEREST_ENDPOINT = "/fapi/v1/openInterest"
