from typing import Any, Dict, List


class ShopifyError(RuntimeError):
    """Base class for failures talking to the Shopify Admin API."""


class ShopifyConfigError(ShopifyError):
    pass


class ShopifyHttpError(ShopifyError):
    def __init__(self, status: int, body: Any) -> None:
        super().__init__(f"Shopify HTTP {status}: {body}")
        self.status = status
        self.body = body


class ShopifyGraphqlError(ShopifyError):
    def __init__(self, errors: List[Dict[str, Any]]) -> None:
        messages = "; ".join(str(e.get("message", e)) for e in errors)
        super().__init__(f"GraphQL errors: {messages}")
        self.errors = errors


class ShopifyUserError(ShopifyError):
    """Mutation rejected with a non-empty `userErrors` list."""

    def __init__(self, operation: str, user_errors: List[Dict[str, Any]]) -> None:
        messages = "; ".join(
            f"{'.'.join(e.get('field') or []) or '-'}: {e.get('message')}" for e in user_errors
        )
        super().__init__(f"{operation} userErrors: {messages}")
        self.operation = operation
        self.user_errors = user_errors
