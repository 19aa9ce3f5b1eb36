"""Shopify Admin API adapters (REST and GraphQL) for product records."""

from .errors import (
    ShopifyConfigError,
    ShopifyError,
    ShopifyGraphqlError,
    ShopifyHttpError,
    ShopifyUserError,
)
from .graphql import GraphqlProductService
from .rest import RestProductService
from .transport import GraphqlClient, RestClient, RestResponse

__all__ = [
    "GraphqlClient",
    "GraphqlProductService",
    "RestClient",
    "RestProductService",
    "RestResponse",
    "ShopifyConfigError",
    "ShopifyError",
    "ShopifyGraphqlError",
    "ShopifyHttpError",
    "ShopifyUserError",
]
