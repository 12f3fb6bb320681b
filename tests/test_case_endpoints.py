import pathlib
import sys

import pytest
from fastapi.testclient import TestClient

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from casekit.errors import NoValidWords  # noqa: E402
from casekit.main import app  # noqa: E402
from casekit.routers.case import camel_case, convert_case, dot_case  # noqa: E402
from casekit.schemas.case import ConvertRequest, StyledConvertRequest  # noqa: E402


client = TestClient(app)


def test_health_endpoint():
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_camel_endpoint():
    res = client.post("/case/camel", json={"text": "Hello-WORLD_example"})
    assert res.status_code == 200
    assert res.json() == {"input": "Hello-WORLD_example", "style": "camel", "result": "helloWorldExample"}


def test_dot_endpoint():
    res = client.post("/case/dot", json={"text": "test function"})
    assert res.status_code == 200
    assert res.json()["result"] == "test.function"


def test_convert_endpoint_with_style():
    res = client.post("/case/convert", json={"text": "823", "style": "dot"})
    assert res.status_code == 200
    data = res.json()
    assert data["style"] == "dot"
    assert data["result"] == "823"


def test_convert_endpoint_rejects_unknown_style():
    res = client.post("/case/convert", json={"text": "test function", "style": "snake"})
    assert res.status_code == 422


def test_non_string_text_is_invalid_input_type():
    for body in ({"text": 42}, {"text": None}, {}):
        res = client.post("/case/camel", json=body)
        assert res.status_code == 400
        assert res.json() == {"detail": "Invalid input: expected a string.", "error": "invalid_input_type"}


def test_empty_text_has_no_valid_words():
    res = client.post("/case/dot", json={"text": "  -- "})
    assert res.status_code == 422
    data = res.json()
    assert data["error"] == "no_valid_words"
    assert data["detail"] == "Invalid input: no valid words found."


@pytest.mark.asyncio
async def test_router_handlers():
    response = await camel_case(ConvertRequest(text="test function"))
    assert response.result == "testFunction"
    response = await convert_case(StyledConvertRequest(text="Hello-WORLD_example", style="dot"))
    assert response.result == "hello.world.example"
    with pytest.raises(NoValidWords):
        await dot_case(ConvertRequest(text=""))
