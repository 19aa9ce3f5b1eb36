"""
HTTP clients for the Shopify Admin API.

`RestClient` and `GraphqlClient` wrap a `requests.Session` carrying the
access token. They raise on HTTP and GraphQL-level errors and leave retries,
throttling and timeouts to the caller.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import parse_qs, urlparse

import requests

from ..config import ShopifyConfig
from .errors import ShopifyConfigError, ShopifyGraphqlError, ShopifyHttpError


logger = logging.getLogger(__name__)


@dataclass
class RestResponse:
    body: Dict[str, Any]
    # Opaque cursor for the next page, taken from the Link header.
    next_page_info: Optional[str] = None


def build_session(config: ShopifyConfig) -> requests.Session:
    if not config.shop_domain or not config.access_token:
        raise ShopifyConfigError("Missing SHOPIFY_SHOP_NAME or SHOPIFY_ACCESS_TOKEN")
    session = requests.Session()
    session.headers.update({
        "Content-Type": "application/json",
        "Accept": "application/json",
        "X-Shopify-Access-Token": config.access_token,
    })
    return session


def next_page_info(response: requests.Response) -> Optional[str]:
    url = response.links.get("next", {}).get("url")
    if not url:
        return None
    values = parse_qs(urlparse(url).query).get("page_info")
    return values[0] if values else None


def _raise_for_status(method: str, url: str, resp: requests.Response) -> None:
    if resp.status_code < 400:
        return
    try:
        body = resp.json()
    except ValueError:
        body = resp.text
    logger.debug("%s %s -> %s", method, url, resp.status_code)
    raise ShopifyHttpError(resp.status_code, body)


class RestClient:
    def __init__(self, config: ShopifyConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or build_session(config)

    def _request(
        self,
        method: str,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> RestResponse:
        url = f"{self.config.base_url}/{path.lstrip('/')}"
        resp = self.session.request(method, url, params=query, json=data)
        _raise_for_status(method, url, resp)
        body = resp.json() if resp.content else {}
        return RestResponse(body=body, next_page_info=next_page_info(resp))

    def get(self, path: str, query: Optional[Dict[str, Any]] = None) -> RestResponse:
        return self._request("GET", path, query=query)

    def post(self, path: str, data: Dict[str, Any]) -> RestResponse:
        return self._request("POST", path, data=data)

    def put(self, path: str, data: Dict[str, Any]) -> RestResponse:
        return self._request("PUT", path, data=data)

    def delete(self, path: str) -> RestResponse:
        return self._request("DELETE", path)


class GraphqlClient:
    def __init__(self, config: ShopifyConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or build_session(config)
        self.endpoint = f"{config.base_url}/graphql.json"

    def query(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """POST a query or mutation and return its `data` object."""
        payload = {"query": query, "variables": variables or {}}
        resp = self.session.post(self.endpoint, json=payload)
        _raise_for_status("POST", self.endpoint, resp)

        body = resp.json()
        if body.get("errors"):
            raise ShopifyGraphqlError(body["errors"])
        return body.get("data") or {}
