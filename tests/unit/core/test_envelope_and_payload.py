import pytest
from rocketapi.core.domain.envelope import ResponseEnvelope
from rocketapi.core.domain.payload import Payload
from rocketapi.core.services.dispatcher import DispatchOutcome, classify

from tests.mocks.rocketapi_mocks import make_envelope


class TestResponseEnvelope:
    def test_fields_are_read_from_nested_response(self) -> None:
        raw = make_envelope(body={"a": 1})

        envelope = ResponseEnvelope.from_raw(raw)

        assert envelope.raw is raw
        assert envelope.status == "done"
        assert envelope.status_code == 200
        assert envelope.content_type == "application/json"
        assert envelope.body == {"a": 1}
        assert envelope.has_payload

    @pytest.mark.parametrize(
        "raw",
        [None, [], "text", {}, {"status": None, "response": []}],
    )
    def test_missing_or_mistyped_fields_coerce_to_zero_values(self, raw) -> None:
        envelope = ResponseEnvelope.from_raw(raw)

        assert envelope.status == ""
        assert envelope.status_code == 0
        assert envelope.content_type == ""
        assert envelope.body is None
        assert not envelope.is_done

    def test_boolean_status_code_is_not_an_integer(self) -> None:
        envelope = ResponseEnvelope.from_raw(
            {"status": "done", "response": {"status_code": True}}
        )

        assert envelope.status_code == 0


@pytest.mark.parametrize(
    ("raw", "outcome"),
    [
        (make_envelope(body={"a": 1}), DispatchOutcome.PAYLOAD),
        (make_envelope(), DispatchOutcome.PAYLOAD),
        (make_envelope(status_code=404), DispatchOutcome.NOT_FOUND),
        (make_envelope(status_code=500, content_type="text/html"), DispatchOutcome.BAD_RESPONSE),
        (make_envelope(status_code=200, content_type="text/plain"), DispatchOutcome.BAD_RESPONSE),
        (make_envelope(status_code=429), DispatchOutcome.BAD_RESPONSE),
        ({"status": "pending"}, DispatchOutcome.BAD_RESPONSE),
        (make_envelope(status="failed", status_code=404), DispatchOutcome.BAD_RESPONSE),
    ],
)
def test_classify(raw, outcome: DispatchOutcome) -> None:
    assert classify(ResponseEnvelope.from_raw(raw)) is outcome


class TestPayload:
    def test_absent_optional_values_are_omitted(self) -> None:
        payload = Payload(id=1).add("max_id", None).add("page", None)

        assert payload == {"id": 1}
        assert "max_id" not in payload

    def test_present_values_are_inserted_including_falsy_ones(self) -> None:
        payload = Payload(id=1).add("page", 0).add("can_support_threading", False).add("max_id", "")

        assert payload == {"id": 1, "page": 0, "can_support_threading": False, "max_id": ""}
