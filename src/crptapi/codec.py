"""Document wire codec — one shared, stateless JSON encoder for all submissions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from crptapi.errors.exceptions import SerializationError
from crptapi.types import Document

logger = logging.getLogger(__name__)

# Stateless; shared by every submission.
_DOCUMENT_ADAPTER: TypeAdapter[Document] = TypeAdapter(Document)


def encode_document(document: Document | Mapping[str, Any]) -> str:
    """Serialize a document to its JSON wire form.

    Mappings are validated as wire-form documents first. Dates are written as
    ISO-8601 strings and unset fields as null.
    """
    try:
        if not isinstance(document, Document):
            document = _DOCUMENT_ADAPTER.validate_python(document)
        return _DOCUMENT_ADAPTER.dump_json(document, by_alias=True).decode("utf-8")
    except (ValidationError, TypeError, ValueError) as exc:
        logger.debug("Document encoding failed: %s", exc)
        raise SerializationError(f"Cannot encode document: {exc}", original=exc) from exc


def decode_document(data: str | bytes) -> Document:
    """Parse a JSON wire-form document."""
    try:
        return _DOCUMENT_ADAPTER.validate_json(data)
    except ValidationError as exc:
        raise SerializationError(f"Cannot decode document: {exc}", original=exc) from exc


def load_document(path: str | Path) -> Document:
    """Load a document from a JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Document file not found: {path}")

    return decode_document(path.read_bytes())
