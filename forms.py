"""
Admin product form and the dashboard's product list.

The form walks IDLE -> VALIDATING -> (UPLOADING) -> SUBMITTING -> IDLE and
records how the last submission ended in ``outcome``.
"""

import logging
import math
from enum import Enum

from backend import BACKEND_ERRORS
from models import CATEGORIES


logger = logging.getLogger(__name__)

FIELDS = ("name", "description", "price", "category")


class FormState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    UPLOADING = "uploading"
    SUBMITTING = "submitting"


def parse_price(raw):
    """Return the price as a number, or None when it is not a positive number."""
    try:
        value = float(str(raw).strip())
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return int(value) if value.is_integer() else value


def validate_product(t, data, has_image):
    """Check every field in one pass and return ``{field: message}``."""
    errors = {}

    if not (data.get("name") or "").strip():
        errors["name"] = t("admin.products.validation.nameRequired")

    if not (data.get("description") or "").strip():
        errors["description"] = t("admin.products.validation.descriptionRequired")

    price = (data.get("price") or "").strip()
    if not price:
        errors["price"] = t("admin.products.validation.priceRequired")
    elif parse_price(price) is None:
        errors["price"] = t("admin.products.validation.priceNumeric")

    if data.get("category") not in CATEGORIES:
        errors["category"] = t("admin.products.validation.categoryRequired")

    if not has_image:
        errors["image"] = t("admin.products.validation.imageRequired")

    return errors


class ProductForm:

    def __init__(self, t, product=None):
        self.t = t
        self.product = product
        self.state = FormState.IDLE
        self.outcome = None
        self.errors = {}
        self.failure = None
        self.values = self._initial_values()

    def _initial_values(self):
        if self.product is None:
            return {"name": "", "description": "", "price": "", "category": CATEGORIES[0]}
        p = self.product
        return {
            "name": p.name,
            "description": p.description,
            "price": str(p.price),
            "category": p.category,
        }

    @property
    def is_edit(self):
        return self.product is not None

    @property
    def image_url(self):
        return self.product.image_url if self.product else ""

    def reset(self):
        if self.product is None:
            self.values = self._initial_values()
        self.errors = {}

    def submit(self, backend, data, image=None):
        """Validate, upload the new image if any, then create or update.

        ``image`` is an uploaded file (anything with ``filename``, ``read()``
        and ``mimetype``). Returns the saved product, or None.
        """
        self.values = {field: (data.get(field) or "") for field in FIELDS}
        self.failure = None

        self.state = FormState.VALIDATING
        has_image = bool(image and image.filename) or bool(self.image_url)
        self.errors = validate_product(self.t, self.values, has_image)
        if self.errors:
            self.state = FormState.IDLE
            self.outcome = "invalid"
            return None

        image_url = self.image_url
        if image and image.filename:
            self.state = FormState.UPLOADING
            try:
                image_url = backend.upload_product_image(
                    image.filename, image.read(), image.mimetype
                )
            except BACKEND_ERRORS as e:
                logger.error(f"Error uploading image: {e}")
                return self._fail()

        payload = {
            "name": self.values["name"].strip(),
            "description": self.values["description"].strip(),
            "price": parse_price(self.values["price"]),
            "category": self.values["category"],
            "image_url": image_url,
        }

        self.state = FormState.SUBMITTING
        try:
            if self.is_edit:
                saved = backend.update_product(self.product.id, payload)
            else:
                saved = backend.create_product(payload)
        except BACKEND_ERRORS as e:
            logger.error(f"Error saving product: {e}")
            return self._fail()

        self.state = FormState.IDLE
        self.outcome = "success"
        self.reset()
        return saved

    def _fail(self):
        self.state = FormState.IDLE
        self.outcome = "failure"
        self.failure = self.t("common.error")
        return None


class ProductList:
    """The admin's local copies of product rows, newest first."""

    def __init__(self, products=None):
        self.products = list(products or [])

    def __iter__(self):
        return iter(self.products)

    def __len__(self):
        return len(self.products)

    def get(self, product_id):
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def save(self, product):
        for i, existing in enumerate(self.products):
            if existing.id == product.id:
                self.products[i] = product
                return
        self.products.insert(0, product)

    def delete(self, backend, product_id):
        backend.delete_product(product_id)
        self.products = [p for p in self.products if p.id != product_id]
