import base64
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from .transport import RestClient

logger = logging.getLogger(__name__)

ProductId = Union[int, str]


class RestProductService:
    """Product CRUD, listing and image upload through the Admin REST API."""

    def __init__(self, client: RestClient):
        self.client = client

    def create_product(self, product_data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            resp = self.client.post("products.json", {"product": product_data})
        except Exception as e:
            logger.error("Failed to create product: %s", e)
            raise
        product = resp.body["product"]
        logger.info("Product created successfully: %s", product.get("id"))
        return product

    def get_product_by_id(self, product_id: ProductId) -> Dict[str, Any]:
        try:
            resp = self.client.get(f"products/{product_id}.json")
        except Exception as e:
            logger.error("Failed to retrieve product with ID %s: %s", product_id, e)
            raise
        product = resp.body["product"]
        logger.info("Product retrieved successfully: %s", product.get("title"))
        return product

    def update_product(self, product_id: ProductId, update_data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            resp = self.client.put(f"products/{product_id}.json", {"product": update_data})
        except Exception as e:
            logger.error("Failed to update product with ID %s: %s", product_id, e)
            raise
        logger.info("Product updated successfully: %s", product_id)
        return resp.body["product"]

    def delete_product(self, product_id: ProductId) -> bool:
        try:
            self.client.delete(f"products/{product_id}.json")
        except Exception as e:
            logger.error("Failed to delete product with ID %s: %s", product_id, e)
            raise
        logger.info("Product with ID %s deleted successfully.", product_id)
        return True

    def get_all_products(self, limit: int = 10) -> List[Dict[str, Any]]:
        """Fetch every product, one page at a time, in the order received."""
        products: List[Dict[str, Any]] = []
        query: Dict[str, Any] = {"limit": limit}
        pages = 0
        try:
            while True:
                resp = self.client.get("products.json", query=query)
                products.extend(resp.body.get("products", []))
                pages += 1
                if not resp.next_page_info:
                    break
                # Shopify rejects other filters alongside page_info.
                query = {"limit": limit, "page_info": resp.next_page_info}
        except Exception as e:
            logger.error("Failed to retrieve products (page %d): %s", pages + 1, e)
            raise
        logger.info("Retrieved %d products across %d page(s)", len(products), pages)
        return products

    def update_product_images(
        self,
        product_id: ProductId,
        image_filenames: Iterable[str],
        images_dir: Path = Path("static/output-images"),
    ) -> Dict[str, Any]:
        """Attach local image files to a product as base64 attachments."""
        try:
            images = [
                {"attachment": base64.b64encode((images_dir / name).read_bytes()).decode("ascii")}
                for name in image_filenames
            ]
            resp = self.client.post(f"products/{product_id}/images.json", {"images": images})
        except Exception as e:
            logger.error("Failed to update images for product with ID %s: %s", product_id, e)
            raise
        logger.info("Product images updated successfully: %s (%d file(s))", product_id, len(images))
        return resp.body
