from postman_openapi.generator.objects import dump
from postman_openapi.generator.responses import synthesize_responses
from postman_openapi.parser.base import Item

JSON_CONTENT = {"application/json": {}}


def _item(**fields) -> Item:
    return Item.model_validate({"name": "x", "request": "/x", **fields})


def _tests(*lines: str) -> list[dict]:
    return [{"listen": "test", "script": {"exec": list(lines)}}]


class TestSynthesizeResponses:
    def test_test_codes_win_over_samples(self):
        item = _item(
            event=_tests("pm.response.to.have.status(201);", "pm.response.to.have.status(400);"),
            response=[{"code": 200, "status": "OK"}],
        )
        assert dump(synthesize_responses(item)) == {
            "201": {"description": "Successful response", "content": JSON_CONTENT},
            "400": {"description": "Successful response", "content": JSON_CONTENT},
        }

    def test_first_sample_response(self):
        item = _item(response=[{"code": 404, "status": "Not Found"}, {"code": 200, "status": "OK"}])
        assert dump(synthesize_responses(item)) == {
            "404": {"description": "Not Found", "content": JSON_CONTENT},
        }

    def test_sample_without_code_or_status(self):
        item = _item(response=[{"name": "example", "body": "{}"}])
        assert dump(synthesize_responses(item)) == {
            "200": {"description": "Successful response", "content": JSON_CONTENT},
        }

    def test_default(self):
        assert dump(synthesize_responses(_item())) == {
            "200": {"description": "Successful response", "content": JSON_CONTENT},
        }
