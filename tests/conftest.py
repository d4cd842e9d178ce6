import json

import pytest

from crptapi.types import Document


@pytest.fixture
def sample_document_data():
    """A fully populated document in wire form."""
    return {
        "description": {"participantInn": "7701234567"},
        "doc_id": "doc-0001",
        "doc_status": "DRAFT",
        "doc_type": "LP_INTRODUCE_GOODS",
        "importRequest": True,
        "owner_inn": "7701234567",
        "participant_inn": "7701234567",
        "producer_inn": "7709876543",
        "production_date": "2024-01-23",
        "production_type": "OWN_PRODUCTION",
        "products": [
            {
                "certificate_document": "CONFORMITY_CERTIFICATE",
                "certificate_document_date": "2023-12-01",
                "certificate_document_number": "RU-123",
                "owner_inn": "7701234567",
                "producer_inn": "7709876543",
                "production_date": "2024-01-23",
                "tnved_code": "6403990000",
                "uit_code": "010463003407001221SxMGorvNuq6Wk91fgh",
                "uitu_code": None,
            }
        ],
        "reg_date": "2024-01-24",
        "reg_number": "REG-42",
    }


@pytest.fixture
def sample_document(sample_document_data):
    return Document.model_validate(sample_document_data)


@pytest.fixture
def sample_document_file(tmp_path, sample_document_data):
    """Write the sample document to a JSON file and return its path."""
    path = tmp_path / "document.json"
    path.write_text(json.dumps(sample_document_data))
    return path
