"""Internal constants shared across the library."""

IP_ECHO_URL = "https://api.ipify.org/"
GEO_URL = "http://ipwho.is/"
PASS_TIMES_URL = "https://iss-flyover.herokuapp.com/json/"
USER_AGENT = "isspass/1.0 (+aiohttp)"

HTTP_OK = 200
DEFAULT_REQUEST_TIMEOUT: float = 10.0

# Longest body excerpt carried in error messages.
BODY_EXCERPT_LIMIT = 200
