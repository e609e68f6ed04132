import math
from urllib.parse import quote


WHATSAPP_URL = "https://wa.me/{number}?text={text}"

# (thousands, decimal) separators, ASCII only
SEPARATORS = {
    "fr": (" ", ","),
    "en": (",", "."),
}


def format_price(value, language="fr"):
    """15000 -> "15 000" (fr) or "15,000" (en). Decimals only when needed."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        v = 0.0
    if not math.isfinite(v):
        v = 0.0

    s = f"{v:,.0f}" if v.is_integer() else f"{v:,.2f}"
    thousands, decimal = SEPARATORS.get(language, SEPARATORS["en"])
    return s.replace(",", "\0").replace(".", decimal).replace("\0", thousands)


def whatsapp_url(number, text):
    return WHATSAPP_URL.format(number=number, text=quote(text, safe=""))


def order_message(product, translator, product_url=""):
    return translator.t(
        "products.orderViaWhatsApp",
        productName=product.name,
        price=format_price(product.price, translator.language),
        productUrl=product_url,
    )


def order_url(number, product, translator, product_url=""):
    return whatsapp_url(number, order_message(product, translator, product_url))
