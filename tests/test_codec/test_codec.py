"""Tests for the document wire codec."""

import json
from datetime import date

import pytest

from crptapi.codec import decode_document, encode_document, load_document
from crptapi.errors.exceptions import SerializationError
from crptapi.types import Description, Document, Product


class TestEncode:
    def test_wire_keys(self, sample_document):
        payload = json.loads(encode_document(sample_document))
        assert set(payload) == {
            "description",
            "doc_id",
            "doc_status",
            "doc_type",
            "importRequest",
            "owner_inn",
            "participant_inn",
            "producer_inn",
            "production_date",
            "production_type",
            "products",
            "reg_date",
            "reg_number",
        }
        assert set(payload["products"][0]) == {
            "certificate_document",
            "certificate_document_date",
            "certificate_document_number",
            "owner_inn",
            "producer_inn",
            "production_date",
            "tnved_code",
            "uit_code",
            "uitu_code",
        }

    def test_dates_are_iso(self, sample_document):
        payload = json.loads(encode_document(sample_document))
        assert payload["production_date"] == "2024-01-23"
        assert payload["products"][0]["certificate_document_date"] == "2023-12-01"

    def test_unset_fields_are_null(self):
        payload = json.loads(encode_document(Document()))
        assert payload["doc_id"] is None
        assert payload["products"] is None
        assert payload["importRequest"] is False

    def test_python_names_accepted(self):
        doc = Document(
            doc_id="x",
            import_request=True,
            description=Description(participant_inn="123"),
            products=[Product(uit_code="u1")],
            reg_date=date(2024, 2, 1),
        )
        payload = json.loads(encode_document(doc))
        assert payload["importRequest"] is True
        assert payload["description"] == {"participantInn": "123"}
        assert payload["products"][0]["uit_code"] == "u1"
        assert payload["reg_date"] == "2024-02-01"

    def test_mapping_input(self, sample_document_data):
        payload = json.loads(encode_document(sample_document_data))
        assert payload["doc_type"] == "LP_INTRODUCE_GOODS"

    def test_invalid_mapping_raises(self, sample_document_data):
        bad = dict(sample_document_data, reg_date="yesterday")
        with pytest.raises(SerializationError) as exc_info:
            encode_document(bad)
        assert exc_info.value.original is not None

    def test_non_document_raises(self):
        with pytest.raises(SerializationError):
            encode_document(["not", "a", "document"])


class TestRoundTrip:
    def test_full_document(self, sample_document):
        assert decode_document(encode_document(sample_document)) == sample_document

    def test_empty_document(self):
        assert decode_document(encode_document(Document())) == Document()

    def test_partial_document(self):
        doc = Document(doc_id="only-id", products=[Product(), Product(tnved_code="1")])
        assert decode_document(encode_document(doc)) == doc

    def test_bytes_input(self, sample_document):
        encoded = encode_document(sample_document).encode("utf-8")
        assert decode_document(encoded) == sample_document


class TestDecode:
    def test_malformed_json(self):
        with pytest.raises(SerializationError):
            decode_document("{not json")

    def test_wrong_type(self):
        with pytest.raises(SerializationError):
            decode_document('{"products": "nope"}')


class TestLoadDocument:
    def test_load_from_file(self, sample_document_file, sample_document):
        assert load_document(sample_document_file) == sample_document

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_document(tmp_path / "missing.json")

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[]")
        with pytest.raises(SerializationError):
            load_document(path)
