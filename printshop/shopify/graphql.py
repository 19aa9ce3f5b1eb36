import logging
from typing import Any, Dict, Optional, Union

from .errors import ShopifyUserError
from .queries import (
    CREATE_PRODUCT_MUTATION,
    DELETE_PRODUCT_MUTATION,
    GET_PRODUCT_QUERY,
    UPDATE_PRODUCT_MUTATION,
)
from .transport import GraphqlClient

logger = logging.getLogger(__name__)

ProductId = Union[int, str]


def product_gid(product_id: ProductId) -> str:
    product_id = str(product_id)
    if product_id.startswith("gid://"):
        return product_id
    return f"gid://shopify/Product/{product_id}"


def _check_user_errors(operation: str, payload: Dict[str, Any]) -> None:
    user_errors = payload.get("userErrors") or []
    if user_errors:
        raise ShopifyUserError(operation, user_errors)


class GraphqlProductService:
    """Product CRUD through the Admin GraphQL API."""

    def __init__(self, client: GraphqlClient):
        self.client = client

    def create_product(self, product_data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            data = self.client.query(CREATE_PRODUCT_MUTATION, {"input": product_data})
            payload = data["productCreate"]
            _check_user_errors("productCreate", payload)
        except Exception as e:
            logger.error("Failed to create product: %s", e)
            raise
        product = payload["product"]
        logger.info("Product created successfully: %s", product.get("id"))
        return product

    def get_product_by_id(self, product_id: ProductId) -> Optional[Dict[str, Any]]:
        try:
            data = self.client.query(GET_PRODUCT_QUERY, {"id": product_gid(product_id)})
        except Exception as e:
            logger.error("Failed to retrieve product with ID %s: %s", product_id, e)
            raise
        product = data.get("product")
        if product is None:
            logger.warning("Product with ID %s not found", product_id)
        else:
            logger.info("Product retrieved successfully: %s", product.get("title"))
        return product

    def update_product(self, product_id: ProductId, update_data: Dict[str, Any]) -> Dict[str, Any]:
        product_input = dict(update_data, id=product_gid(product_id))
        try:
            data = self.client.query(UPDATE_PRODUCT_MUTATION, {"input": product_input})
            payload = data["productUpdate"]
            _check_user_errors("productUpdate", payload)
        except Exception as e:
            logger.error("Failed to update product with ID %s: %s", product_id, e)
            raise
        logger.info("Product updated successfully: %s", product_id)
        return payload["product"]

    def delete_product(self, product_id: ProductId) -> bool:
        try:
            data = self.client.query(
                DELETE_PRODUCT_MUTATION, {"input": {"id": product_gid(product_id)}}
            )
            _check_user_errors("productDelete", data["productDelete"])
        except Exception as e:
            logger.error("Failed to delete product with ID %s: %s", product_id, e)
            raise
        logger.info("Product with ID %s deleted successfully.", product_id)
        return True
