import os
import unittest
from dataclasses import fields
from pathlib import Path
from unittest.mock import patch

from printshop.config import DEFAULT_MAX_BYTES, RenderConfig, ShopifyConfig


class TestRenderConfig(unittest.TestCase):

    def test_defaults(self):
        render = RenderConfig()
        self.assertEqual(render.canvas_size, (2048, 2048))
        self.assertEqual(render.max_bytes, 19 * 1024 * 1024)
        self.assertEqual(render.max_bytes, DEFAULT_MAX_BYTES)
        self.assertEqual(render.shadow.final_blur, 300)
        self.assertEqual(render.shadow_layers, 7)

    def test_wall_image_selects_image_background(self):
        render = RenderConfig.from_dict({
            "wall_image_path": "static/background-images/blank-wall.jpg",
            "wall_height_inches": 144,
        })
        self.assertEqual(render.background, "image")
        self.assertEqual(render.wall_image_path, Path("static/background-images/blank-wall.jpg"))

    def test_explicit_background_wins(self):
        render = RenderConfig.from_dict({"background": "transparent", "wall_image_path": "wall.jpg"})
        self.assertEqual(render.background, "transparent")

    def test_image_background_requires_wall_height(self):
        with self.assertRaises(ValueError):
            RenderConfig(background="image", wall_image_path=Path("wall.jpg"))

    def test_unknown_background(self):
        with self.assertRaises(ValueError):
            RenderConfig(background="plaid")


class TestShopifyConfig(unittest.TestCase):

    def test_shop_domain_normalisation(self):
        for name in ("my-shop", "my-shop.myshopify.com", "https://my-shop.myshopify.com/"):
            with self.subTest(name=name):
                config = ShopifyConfig(access_token="t", shop_name=name)
                self.assertEqual(config.shop_domain, "my-shop.myshopify.com")

    def test_base_url(self):
        config = ShopifyConfig(access_token="t", shop_name="my-shop", api_version="2024-10")
        self.assertEqual(config.base_url, "https://my-shop.myshopify.com/admin/api/2024-10")

    def test_from_env(self):
        env = {
            "SHOPIFY_ACCESS_TOKEN": "shpat_123",
            "SHOPIFY_SHOP_NAME": "gallery",
            "SHOPIFY_API_VERSION": "2024-04",
        }
        with patch("printshop.config.load_dotenv"), patch.dict(os.environ, env, clear=True):
            config = ShopifyConfig.from_env()
        self.assertEqual(config.access_token, "shpat_123")
        self.assertEqual(config.shop_domain, "gallery.myshopify.com")
        self.assertEqual(config.api_version, "2024-04")

    def test_holds_only_what_the_clients_read(self):
        self.assertEqual(
            [f.name for f in fields(ShopifyConfig)],
            ["access_token", "shop_name", "api_version"],
        )

    def test_from_env_missing_values_are_not_validated(self):
        with patch("printshop.config.load_dotenv"), patch.dict(os.environ, {}, clear=True):
            config = ShopifyConfig.from_env()
        self.assertIsNone(config.access_token)
        self.assertEqual(config.shop_domain, "")


if __name__ == "__main__":
    unittest.main()
