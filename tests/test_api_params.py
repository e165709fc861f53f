"""
Tests for the FastAPI integration.

Builds the application with a test router whose routes bind typed
parameters from every request source, then checks success responses,
the error response wire contract, and the centralized error handlers.
"""

from fastapi import APIRouter
from fastapi.testclient import TestClient

from typedparams.core.config import settings
from typedparams.domain.params.builtin import (
    BOOLEAN_PARAM,
    INT_PARAM,
    NON_EMPTY_STRING_PARAM,
    UUID_PARAM,
)
from typedparams.domain.params.entities import TypedParameter
from typedparams.interfaces.params.dependencies import (
    PARAMETER_ERROR_RESPONSES,
    cookie_param,
    form_param,
    header_param,
    path_param,
    query_param,
)
from typedparams.main import create_app

ITEM_NOT_FOUND = INT_PARAM.replace(error_status=lambda: 404)
PLAIN_TEXT_INT = INT_PARAM.replace(media_type=lambda: "text/plain")
PROBLEM_JSON_INT = INT_PARAM.replace(media_type=lambda: "application/problem+json")

router = APIRouter(prefix="/demo")


@router.get("/items/{item_id}")
def read_item(
    item_id: TypedParameter[int] = path_param(ITEM_NOT_FOUND, "item_id"),
) -> dict:
    return {"item_id": item_id.get()}


@router.get("/search", responses=PARAMETER_ERROR_RESPONSES)
def search(
    page: TypedParameter[int] = query_param(INT_PARAM, "page"),
    exact: TypedParameter[bool] = query_param(BOOLEAN_PARAM, "exact", "exact match flag"),
) -> dict:
    return {"page": page.get(), "exact": exact.get()}


@router.get("/plain")
def plain(count: TypedParameter[int] = query_param(PLAIN_TEXT_INT, "count")) -> dict:
    return {"count": count.get()}


@router.get("/problem")
def problem(count: TypedParameter[int] = query_param(PROBLEM_JSON_INT, "count")) -> dict:
    return {"count": count.get()}


@router.get("/trace")
def trace(
    request_id: TypedParameter = header_param(UUID_PARAM, "X-Request-Id"),
) -> dict:
    return {"request_id": str(request_id)}


@router.get("/session")
def session(
    token: TypedParameter[str] = cookie_param(NON_EMPTY_STRING_PARAM, "session"),
) -> dict:
    return {"session": token.get()}


@router.post("/signup")
def signup(
    email: TypedParameter[str] = form_param(NON_EMPTY_STRING_PARAM, "email"),
) -> dict:
    return {"email": email.get()}


@router.get("/boom")
def boom() -> dict:
    raise RuntimeError("database password is hunter2")


app = create_app(routers=[router])
client = TestClient(app)
PREFIX = f"{settings.api_prefix}/demo"


class TestQueryParam:
    """Tests for query_param()."""

    def test_valid_values_are_bound(self) -> None:
        response = client.get(f"{PREFIX}/search", params={"page": "3", "exact": "true"})

        assert response.status_code == 200
        assert response.json() == {"page": 3, "exact": True}

    def test_invalid_value_returns_error_body(self) -> None:
        """Rejected values produce the {code, message} JSON body."""
        response = client.get(f"{PREFIX}/search", params={"page": "abc", "exact": "true"})

        assert response.status_code == 400
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {
            "code": 400,
            "message": "query param page is invalid: "
            "invalid literal for int() with base 10: 'abc'",
        }

    def test_missing_value_is_rejected(self) -> None:
        response = client.get(f"{PREFIX}/search", params={"page": "1"})

        assert response.status_code == 400
        assert response.json()["message"] == 'exact match flag must be "true" or "false".'


class TestPathParam:
    """Tests for path_param()."""

    def test_valid_value(self) -> None:
        response = client.get(f"{PREFIX}/items/17")

        assert response.status_code == 200
        assert response.json() == {"item_id": 17}

    def test_status_override(self) -> None:
        """A parameter type with a 404 policy answers 404."""
        response = client.get(f"{PREFIX}/items/seventeen")

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == 404
        assert body["message"].startswith("path param item_id is invalid: ")


class TestHeaderParam:
    """Tests for header_param()."""

    def test_valid_header(self) -> None:
        request_id = "3f2504e0-4f89-11d3-9a0c-0305e82c3301"

        response = client.get(f"{PREFIX}/trace", headers={"x-request-id": request_id})

        assert response.status_code == 200
        assert response.json() == {"request_id": request_id}

    def test_invalid_header(self) -> None:
        response = client.get(f"{PREFIX}/trace", headers={"X-Request-Id": "nope"})

        assert response.status_code == 400
        assert response.json() == {
            "code": 400,
            "message": "header X-Request-Id must be a valid UUID.",
        }


class TestCookieParam:
    """Tests for cookie_param()."""

    def test_valid_cookie(self) -> None:
        response = client.get(f"{PREFIX}/session", headers={"Cookie": "session=abc123"})

        assert response.status_code == 200
        assert response.json() == {"session": "abc123"}

    def test_missing_cookie(self) -> None:
        response = client.get(f"{PREFIX}/session")

        assert response.status_code == 400
        assert response.json()["message"] == "cookie session must not be empty."


class TestFormParam:
    """Tests for form_param()."""

    def test_valid_form_field(self) -> None:
        response = client.post(f"{PREFIX}/signup", data={"email": " a@example.com "})

        assert response.status_code == 200
        assert response.json() == {"email": "a@example.com"}

    def test_blank_form_field(self) -> None:
        response = client.post(f"{PREFIX}/signup", data={"email": "   "})

        assert response.status_code == 400
        assert response.json() == {
            "code": 400,
            "message": "form field email must not be empty.",
        }

    def test_missing_form_field(self) -> None:
        response = client.post(f"{PREFIX}/signup", data={"other": "x"})

        assert response.status_code == 400
        assert response.json()["message"] == "form field email must not be empty."


class TestErrorRendering:
    """Tests for media type handling of rejected parameters."""

    def test_plain_text_media_type(self) -> None:
        """Non-JSON media types get the bare message."""
        response = client.get(f"{PREFIX}/plain", params={"count": "x"})

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text.startswith("query param count is invalid: ")

    def test_structured_json_media_type(self) -> None:
        """+json media types keep the JSON body."""
        response = client.get(f"{PREFIX}/problem", params={"count": "x"})

        assert response.status_code == 400
        assert response.headers["content-type"] == "application/problem+json"
        assert response.json()["code"] == 400


class TestUnexpectedErrors:
    """Tests for the catch-all handler."""

    def test_internal_error_hides_details(self) -> None:
        safe_client = TestClient(app, raise_server_exceptions=False)

        response = safe_client.get(f"{PREFIX}/boom")

        assert response.status_code == 500
        assert response.json() == {"code": 500, "message": "Internal server error"}
        assert "hunter2" not in response.text


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health(self) -> None:
        response = client.get(f"{settings.api_prefix}/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["version"] == settings.version
        assert body["param_types"]["int"] == "IntParam"
        assert body["param_types"]["uuid"] == "UUIDParam"
        assert set(body["param_types"]) == {
            "int", "float", "bool", "uuid", "date", "datetime", "string"
        }


class TestOpenApi:
    """Tests for the documented error response."""

    def test_error_schema_documented(self) -> None:
        schema = client.get("/openapi.json").json()

        responses = schema["paths"][f"{PREFIX}/search"]["get"]["responses"]
        assert "400" in responses
        assert "ErrorMessageSchema" in schema["components"]["schemas"]

    def _parameters(self, path: str, method: str = "get") -> dict[str, str]:
        schema = client.get("/openapi.json").json()
        operation = schema["paths"][f"{PREFIX}{path}"][method]
        return {p["name"]: p["in"] for p in operation.get("parameters", [])}

    def test_query_params_documented(self) -> None:
        """Bound query values appear as operation parameters."""
        assert self._parameters("/search") == {"page": "query", "exact": "query"}

    def test_path_param_documented(self) -> None:
        assert self._parameters("/items/{item_id}") == {"item_id": "path"}

    def test_header_and_cookie_documented(self) -> None:
        assert self._parameters("/trace") == {"X-Request-Id": "header"}
        assert self._parameters("/session") == {"session": "cookie"}

    def test_form_field_documented(self) -> None:
        schema = client.get("/openapi.json").json()

        operation = schema["paths"][f"{PREFIX}/signup"]["post"]
        assert "application/x-www-form-urlencoded" in operation["requestBody"]["content"]
