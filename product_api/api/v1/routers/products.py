# product_api/api/v1/routers/products.py

from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from product_api.api.deps import product_service
from product_api.api.v1.schemas.products import DeleteResult, ErrorResponse
from product_api.domain.models.product import Product, ProductCreate, ProductPatch
from product_api.domain.services.product_svc import ProductService

import logging
logger = logging.getLogger(__name__)

ServiceDep = Annotated[ProductService, Depends(product_service)]

router = APIRouter(
    prefix="/products",
    tags=["products"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)

NOT_FOUND = {404: {"model": ErrorResponse}}


async def list_products(svc: ServiceDep) -> List[Product]:
    """Return every stored product. Order is not guaranteed."""
    return await svc.list_products()


async def get_product(product_id: str, svc: ServiceDep) -> Product:
    return await svc.get_product(product_id)


async def create_product(payload: ProductCreate, svc: ServiceDep) -> Product:
    return await svc.create_product(payload)


async def update_product(product_id: str, payload: ProductPatch, svc: ServiceDep) -> Product:
    """Apply the fields present in the body; id and timestamps are never changed by the client."""
    return await svc.update_product(product_id, payload)


async def delete_product(product_id: str, svc: ServiceDep) -> DeleteResult:
    await svc.delete_product(product_id)
    return DeleteResult(message="Product deleted", id=product_id)


# (methods, path, handler, response model, success status, extra responses)
ROUTES = [
    (["GET"], "", list_products, List[Product], status.HTTP_200_OK, {}),
    (["POST"], "", create_product, Product, status.HTTP_201_CREATED, {}),
    # "/products/" is answered directly instead of redirecting to "/products"
    (["GET"], "/", list_products, List[Product], status.HTTP_200_OK, {}),
    (["POST"], "/", create_product, Product, status.HTTP_201_CREATED, {}),
    (["GET"], "/{product_id}", get_product, Product, status.HTTP_200_OK, NOT_FOUND),
    (["PUT"], "/{product_id}", update_product, Product, status.HTTP_200_OK, NOT_FOUND),
    (["PATCH"], "/{product_id}", update_product, Product, status.HTTP_200_OK, NOT_FOUND),
    (["DELETE"], "/{product_id}", delete_product, DeleteResult, status.HTTP_200_OK, NOT_FOUND),
]

for methods, path, endpoint, response_model, status_code, responses in ROUTES:
    router.add_api_route(
        path,
        endpoint,
        methods=methods,
        response_model=response_model,
        status_code=status_code,
        responses=responses,
        name=f"{endpoint.__name__}_{methods[0].lower()}" + ("_slash" if path == "/" else ""),
        include_in_schema=path != "/",
    )
