import argparse
import json
import logging
import sys
from pathlib import Path

from printshop.config import ShopifyConfig
from printshop.shopify import GraphqlClient, GraphqlProductService, RestClient, RestProductService
from printshop.snapshots import write_json_to_file


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Read and write Shopify products over REST or GraphQL."
    )
    parser.add_argument(
        "--transport",
        choices=["rest", "graphql"],
        default="rest",
        help="API used for get/create/update/delete.",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the response to this JSON file.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("list", help="List all products (REST).")
    p.add_argument("--limit", type=int, default=10, help="Page size.")

    p = sub.add_parser("get", help="Fetch one product.")
    p.add_argument("product_id")

    p = sub.add_parser("create", help="Create a product from a JSON file.")
    p.add_argument("data", type=Path)

    p = sub.add_parser("update", help="Update a product from a JSON file.")
    p.add_argument("product_id")
    p.add_argument("data", type=Path)

    p = sub.add_parser("delete", help="Delete a product.")
    p.add_argument("product_id")

    p = sub.add_parser("upload-images", help="Attach rendered images to a product (REST).")
    p.add_argument("product_id")
    p.add_argument("filenames", nargs="+")
    p.add_argument(
        "--images-dir",
        type=Path,
        default=Path("static/output-images"),
        help="Folder holding the image files.",
    )
    return parser.parse_args()


def _read_json(path: Path):
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    config = ShopifyConfig.from_env()
    rest = RestProductService(RestClient(config))
    if args.transport == "graphql":
        products = GraphqlProductService(GraphqlClient(config))
    else:
        products = rest

    if args.command == "list":
        result = rest.get_all_products(limit=args.limit)
    elif args.command == "get":
        result = products.get_product_by_id(args.product_id)
    elif args.command == "create":
        result = products.create_product(_read_json(args.data))
    elif args.command == "update":
        result = products.update_product(args.product_id, _read_json(args.data))
    elif args.command == "delete":
        result = products.delete_product(args.product_id)
    else:
        result = rest.update_product_images(args.product_id, args.filenames, args.images_dir)

    if args.out:
        write_json_to_file(result, args.out)
        logging.info("Wrote %s", args.out)
    else:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
