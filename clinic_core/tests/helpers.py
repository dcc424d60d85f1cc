# clinic_core/tests/helpers.py


def data(response):
    """Unwrap the {"data": ...} success envelope, failing loudly on an error body."""
    assert "data" in response.data, response.data
    return response.data["data"]


def error(response) -> str:
    assert "error" in response.data, response.data
    return response.data["error"]
