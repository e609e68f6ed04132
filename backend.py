"""
Thin data-access layer over the hosted Supabase backend.

Every method is one request/response pair. Backend errors are not caught here:
they reach the caller unchanged, and views decide how to report them.
"""

import logging
import os
import uuid
from datetime import datetime, timezone

import httpx
from supabase import (
    AuthError,
    Client,
    ClientOptions,
    PostgrestAPIError,
    StorageException,
    create_client,
)
from werkzeug.utils import secure_filename

from models import Product, WRITABLE_FIELDS


logger = logging.getLogger(__name__)

IMAGE_FOLDER = "products"


class ProductNotFound(LookupError):

    def __init__(self, product_id):
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


# Failures a view is expected to catch, log and report to the user.
BACKEND_ERRORS = (
    AuthError,
    PostgrestAPIError,
    StorageException,
    httpx.HTTPError,
    ProductNotFound,
)


def create_backend_client(url, key) -> Client:
    # One client per request: sessions are restored from the visitor's
    # cookie, so the client itself must not refresh or persist anything.
    options = ClientOptions(auto_refresh_token=False, persist_session=False)
    return create_client(url, key, options=options)


class Backend:

    def __init__(self, client, table="products", bucket="products"):
        self.client = client
        self.table = table
        self.bucket = bucket

    # ---------- products ----------

    def list_products(self, category=None, page=1, limit=8):
        page = max(int(page), 1)
        start = (page - 1) * limit

        query = self.client.table(self.table).select("*")
        if category:
            query = query.eq("category", category)

        response = (
            query
            .order("created_at", desc=True)
            .range(start, start + limit - 1)
            .execute()
        )
        return [Product.from_row(row) for row in response.data]

    def list_categories(self):
        response = self.client.table(self.table).select("category").execute()
        # dict keeps first-seen order while dropping duplicates
        return list(dict.fromkeys(
            row["category"] for row in response.data if row.get("category")
        ))

    def create_product(self, data):
        payload = {field: data[field] for field in WRITABLE_FIELDS}
        response = self.client.table(self.table).insert(payload).execute()
        product = Product.from_row(response.data[0])
        logger.info(f"Created product {product.id} ({product.name})")
        return product

    def update_product(self, product_id, data):
        payload = {field: data[field] for field in WRITABLE_FIELDS if field in data}
        payload["updated_at"] = datetime.now(timezone.utc).isoformat()

        response = (
            self.client.table(self.table)
            .update(payload)
            .eq("id", product_id)
            .execute()
        )
        if not response.data:
            raise ProductNotFound(product_id)

        logger.info(f"Updated product {product_id}")
        return Product.from_row(response.data[0])

    def delete_product(self, product_id):
        response = (
            self.client.table(self.table)
            .delete()
            .eq("id", product_id)
            .execute()
        )
        if not response.data:
            raise ProductNotFound(product_id)

        logger.info(f"Deleted product {product_id}")

    # ---------- storage ----------

    def upload_product_image(self, filename, data, content_type=None):
        ext = os.path.splitext(secure_filename(filename or ""))[1].lower()
        path = f"{IMAGE_FOLDER}/{uuid.uuid4().hex}{ext}"

        file_options = {"content-type": content_type} if content_type else None
        bucket = self.client.storage.from_(self.bucket)
        bucket.upload(path, data, file_options)

        logger.info(f"Uploaded product image {path}")
        return bucket.get_public_url(path)

    # ---------- auth ----------

    def sign_in(self, email, password):
        response = self.client.auth.sign_in_with_password(
            {"email": email, "password": password}
        )
        return response.session

    def sign_out(self):
        self.client.auth.sign_out()
