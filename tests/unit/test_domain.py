"""Domain: unit document parsing, download framing, collections, exceptions."""

import pytest

from unitfinder.domain.entities import UnitDocument
from unitfinder.domain.enums import Collection, UnitCollection
from unitfinder.domain.exceptions import (
    DocumentNotFoundException,
    UnitFinderException,
    UpstreamErrorException,
    UpstreamUnavailableException,
)


class TestUnitDocument:
    def test_from_dict(self) -> None:
        doc = UnitDocument.from_dict(
            {"id": "abc", "filename": "x.service", "package": "core/systemd", "content": "[Unit]\n"}
        )
        assert doc == UnitDocument("abc", "x.service", "core/systemd", "[Unit]\n")

    def test_from_dict_uses_requested_id_when_body_has_none(self) -> None:
        doc = UnitDocument.from_dict(
            {"filename": "x.service", "package": "p", "content": ""}, document_id="req-id"
        )
        assert doc.id == "req-id"

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"filename": "x.service", "package": "p"},
            {"filename": "x.service", "package": 3, "content": ""},
        ],
    )
    def test_from_dict_rejects_malformed(self, data: object) -> None:
        with pytest.raises(ValueError):
            UnitDocument.from_dict(data)

    def test_content_disposition(self) -> None:
        doc = UnitDocument("1", "x.service", "p", "")
        assert doc.content_disposition == 'attachment; filename="x.service"'

    def test_content_disposition_escapes_quotes_and_newlines(self) -> None:
        doc = UnitDocument("1", 'a"b\r\n.service', "p", "")
        assert doc.content_disposition == 'attachment; filename="a\\"b.service"'

    def test_content_disposition_non_ascii(self) -> None:
        doc = UnitDocument("1", "café.service", "p", "")
        value = doc.content_disposition
        assert value.isascii()
        assert "filename*=UTF-8''caf%C3%A9.service" in value


class TestCollections:
    def test_values(self) -> None:
        assert Collection.values() == ["packages", "services", "timers"]
        assert UnitCollection.values() == ["services", "timers"]

    def test_unit_type_tags(self) -> None:
        assert UnitCollection.SERVICES.unit_type == "service"
        assert UnitCollection.TIMERS.unit_type == "timer"

    def test_is_unit(self) -> None:
        assert not Collection.PACKAGES.is_unit
        assert Collection.SERVICES.is_unit


class TestExceptions:
    def test_base_defaults_error_code_to_class_name(self) -> None:
        exc = UnitFinderException("oops")
        assert exc.error_code == "UnitFinderException"
        assert exc.to_dict() == {"error": "UnitFinderException", "message": "oops", "details": {}}

    def test_not_found_details(self) -> None:
        exc = DocumentNotFoundException("services", "abc")
        assert exc.error_code == "DOCUMENT_NOT_FOUND"
        assert exc.details == {"collection": "services", "document_id": "abc"}

    def test_upstream_error_is_generic(self) -> None:
        exc = UpstreamErrorException(503)
        assert exc.status_code == 503
        assert exc.to_dict()["message"] == "Search engine error"

    def test_upstream_unavailable_hides_reason(self) -> None:
        exc = UpstreamUnavailableException("http://engine/indexes/x/search", "dns failure for engine")
        assert "dns failure" not in str(exc.to_dict())
        assert exc.reason == "dns failure for engine"
