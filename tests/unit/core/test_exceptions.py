"""Unit tests for the project-wide DRF exception handler."""

from __future__ import annotations

import pytest
from django.db.models import ProtectedError
from django.http import Http404
from pydantic import BaseModel, ValidationError
from rest_framework import exceptions

from modules.core.exceptions import exception_handler
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound

pytestmark = pytest.mark.unit


class _Payload(BaseModel):
    quantity: int


class TestDomainExceptions:
    def test_not_found_maps_to_404(self):
        response = exception_handler(ProductNotFound(7), {})
        assert response.status_code == 404
        assert response.data == {
            "type": "client_error",
            "errors": [
                {"code": "not_found", "detail": "Produto 7 não encontrado.", "attr": None}
            ],
        }

    def test_already_exists_maps_to_409(self):
        response = exception_handler(ProductAlreadyExists("Alface"), {})
        assert response.status_code == 409
        assert response.data["errors"][0]["code"] == "already_exists"

    def test_protected_maps_to_409(self):
        response = exception_handler(ProtectedError("in use", set()), {})
        assert response.status_code == 409
        assert response.data["errors"][0]["code"] == "protected"

    def test_pydantic_error_maps_to_400(self):
        with pytest.raises(ValidationError) as exc_info:
            _Payload(quantity="many")
        response = exception_handler(exc_info.value, {})
        assert response.status_code == 400
        assert response.data["type"] == "validation_error"
        assert response.data["errors"][0]["attr"] == "quantity"


class TestDRFExceptions:
    def test_field_errors_are_flattened(self):
        exc = exceptions.ValidationError({"category": ["bad choice"], "name": ["required"]})
        response = exception_handler(exc, {})
        assert response.status_code == 400
        assert response.data["type"] == "validation_error"
        assert {e["attr"] for e in response.data["errors"]} == {"category", "name"}

    def test_django_404_is_rendered(self):
        response = exception_handler(Http404(), {})
        assert response.status_code == 404
        assert response.data["errors"][0]["code"] == "not_found"
        assert response.data["errors"][0]["attr"] is None

    def test_unknown_exception_is_left_to_drf(self):
        assert exception_handler(RuntimeError("boom"), {}) is None
