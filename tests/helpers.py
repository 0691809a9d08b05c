from utils.constants import CORS_HEADERS


def assert_cors_headers(response):
    """Assert every CORS header is present with its expected value."""
    for key, value in CORS_HEADERS.items():
        assert response.headers.get(key) == value, f"Header '{key}' missing or wrong: {response.headers.get(key)!r}"

def assert_error_envelope(response, status_code, error):
    """Assert a JSON failure envelope with the given status and message."""
    assert response.status_code == status_code, f"Expected {status_code}, got {response.status_code}: {response.text}"
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"success": False, "error": error}
