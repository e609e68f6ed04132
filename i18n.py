"""
Translation store.

The dictionaries under ``translations/`` are nested by dotted path. A leaf is
either plain text or a per-language sub-object such as
``{"fr": "...", "en": "..."}``. Both shapes are normalized once, at load time,
into per-language entries so lookups never branch on the leaf type::

    store = TranslationStore(storage=session)
    store.initialize()
    store.t("home.welcome")                 # "Bienvenue chez Ummi's Collection"
    store.t("products.orderViaWhatsApp", productName="Robe", price="15 000",
            productUrl="https://...")
    store.t("does.not.exist")               # "does.not.exist"
"""

import logging

from translations.en import translations as EN
from translations.fr import translations as FR


logger = logging.getLogger(__name__)

LANGUAGES = {
    "fr": "Français",
    "en": "English",
}

DEFAULT_LANGUAGE = "fr"
STORAGE_KEY = "language"

DICTIONARIES = {
    "fr": FR,
    "en": EN,
}


# ---------- normalization ----------

def _is_language_leaf(value):
    return (
        isinstance(value, dict)
        and bool(value)
        and all(k in LANGUAGES for k in value)
        and all(isinstance(v, str) for v in value.values())
    )


def normalize(tree, language, prefix=""):
    """Flatten one language dictionary into ``{path: {lang: text}}``."""
    entries = {}
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, str):
            entries[path] = {language: value}
        elif _is_language_leaf(value):
            entries[path] = dict(value)
            # "home.shopNow.en" resolves to that exact text in any language
            for code, text in value.items():
                entries[f"{path}.{code}"] = {language: text}
        elif isinstance(value, dict):
            entries.update(normalize(value, language, path))
        else:
            logger.warning(f"Ignoring non-text translation leaf {path!r} ({language})")
    return entries


def compile_catalogs(dictionaries=None):
    dictionaries = dictionaries or DICTIONARIES
    return {lang: normalize(tree, lang) for lang, tree in dictionaries.items()}


CATALOGS = compile_catalogs()


# ---------- store ----------

class TranslationStore:

    def __init__(self, storage=None, catalogs=None, language=DEFAULT_LANGUAGE):
        self._storage = storage if storage is not None else {}
        self._catalogs = catalogs if catalogs is not None else CATALOGS
        self._language = language
        self._observers = []

    @property
    def language(self):
        return self._language

    def initialize(self):
        saved = self._storage.get(STORAGE_KEY)
        self._language = saved if saved in LANGUAGES else DEFAULT_LANGUAGE
        return self._language

    def set_language(self, language):
        if language not in LANGUAGES:
            raise ValueError(f"Unsupported language: {language!r}")

        previous = self._language
        self._language = language
        self._storage[STORAGE_KEY] = language

        # always persisted, observers only hear about actual changes
        if language != previous:
            for callback in list(self._observers):
                callback(language)

    # ---------- observers ----------

    def register_observer(self, callback):
        if callback not in self._observers:
            self._observers.append(callback)

    def unregister_observer(self, callback):
        if callback in self._observers:
            self._observers.remove(callback)

    # ---------- lookup ----------

    def lookup(self, path):
        entry = self._catalogs.get(self._language, {}).get(path)
        if entry is None:
            return path
        return entry.get(self._language) or entry.get(DEFAULT_LANGUAGE) or path

    def t(self, path, **params):
        text = self.lookup(path)
        for name, value in params.items():
            text = text.replace("{" + name + "}", str(value))
        return text

    __call__ = t
