"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions propagate to the project exception handler
(``modules.core.exceptions.exception_handler``), which maps them to
404 / 409 responses.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.batches.repositories.django_repository import BatchDjangoRepository
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.models import Category, Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ProductInWarehousesSerializer,
    ProductQuerySerializer,
    ProductSerializer,
)
from modules.products.services import ProductService


def _body(request: Request) -> Mapping[str, Any]:
    """Return the request body, rejecting JSON that is not an object."""
    if not isinstance(request.data, Mapping):
        raise ParseError("Request body must be a JSON object.")
    return request.data


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with the Django repositories (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            repository=ProductDjangoRepository(),
            batch_repository=BatchDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[
            OpenApiParameter("category", str, enum=Category.values, required=False),
        ]
    )
    def list(self, request: Request) -> Response:
        """GET /api/v1/products/?category=FS"""
        query = ProductQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        category = query.validated_data.get("category")
        if category is None:
            products = self._service.list_products()
        else:
            products = self._service.find_all_by_category(category)

        page = self.paginate_queryset(products)
        if page is not None:
            return self.get_paginated_response(ProductSerializer(page, many=True).data)
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        product = self._service.find_by_id(int(pk))
        return Response(ProductSerializer(product).data)

    @extend_schema(responses=ProductInWarehousesSerializer)
    @action(detail=True, methods=["get"], url_path="warehouses")
    def warehouses(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/warehouses/"""
        located = self._service.find_product_in_warehouse(int(pk))
        return Response(ProductInWarehousesSerializer(located).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        data = _body(request)
        dto = CreateProductDTO(
            name=data.get("name", ""),
            category=data.get("category", ""),
        )
        product = self._service.create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/"""
        data = _body(request)
        dto = UpdateProductDTO(
            name=data.get("name"),
            category=data.get("category"),
        )
        product = self._service.update_product(int(pk), dto)
        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        self._service.delete(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
