import os
from pathlib import Path

from dotenv import load_dotenv


BASE_DIR = Path(__file__).parent

load_dotenv(BASE_DIR / ".env")


class ConfigError(RuntimeError):
    pass


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "change_this_secret_key")

    # ---------- backend ----------
    SUPABASE_URL = os.getenv("SUPABASE_URL", "")
    SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")
    PRODUCTS_TABLE = "products"
    PRODUCTS_BUCKET = os.getenv("PRODUCTS_BUCKET", "products")

    # ---------- shop ----------
    SHOP_NAME = "Ummi's Collection"
    WHATSAPP_NUMBER = os.getenv("WHATSAPP_NUMBER", "237683998930")
    FACEBOOK_URL = "https://facebook.com/UmmulUmar"
    TIKTOK_URL = "https://tiktok.com/@ummie45"

    # ---------- listing ----------
    PAGE_SIZE = int(os.getenv("PAGE_SIZE", "8"))
    FEATURED_COUNT = 4
    ADMIN_PAGE_SIZE = 100
    EXPORT_LIMIT = 1000

    REQUIRED = ("SUPABASE_URL", "SUPABASE_ANON_KEY")

    @classmethod
    def validate(cls, values):
        missing = [name for name in cls.REQUIRED if not values.get(name)]
        if missing:
            raise ConfigError(
                "Missing backend settings: " + ", ".join(missing)
                + ". Please check your .env file."
            )
