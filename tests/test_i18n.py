import pytest

from i18n import CATALOGS, DEFAULT_LANGUAGE, TranslationStore, normalize


def test_default_language_is_french():
    store = TranslationStore()
    assert store.initialize() == DEFAULT_LANGUAGE == "fr"
    assert store.t("navigation.home") == "Accueil"


def test_lookup_follows_current_language():
    store = TranslationStore()
    store.initialize()
    assert store.lookup("products.title") == "Nos produits"

    store.set_language("en")
    assert store.lookup("products.title") == "Our Products"


def test_every_path_resolves_to_its_stored_text():
    for language in ("fr", "en"):
        store = TranslationStore(language=language)
        for path in CATALOGS[language]:
            text = store.lookup(path)
            assert text != path
            assert isinstance(text, str)


def test_missing_paths_return_the_path_in_both_languages():
    for language in ("fr", "en"):
        store = TranslationStore(language=language)
        assert store.lookup("does.not.exist") == "does.not.exist"
        assert store.lookup("products.category.shoes") == "products.category.shoes"
        # a namespace is not text
        assert store.lookup("products.category") == "products.category"
        assert store.lookup("") == ""


def test_language_sub_object_resolves_for_current_language():
    store = TranslationStore()
    assert store.lookup("home.shopNow") == "Commander via WhatsApp"
    store.set_language("en")
    assert store.lookup("home.shopNow") == "Order via WhatsApp"


def test_language_sub_object_falls_back_to_default_language():
    catalogs = {
        "en": normalize({"greeting": {"fr": "Bonjour"}}, "en"),
    }
    store = TranslationStore(catalogs=catalogs, language="en")
    assert store.lookup("greeting") == "Bonjour"


def test_normalize_keeps_both_leaf_shapes():
    entries = normalize({"a": {"b": "plain", "c": {"fr": "x", "en": "y"}}}, "fr")
    assert entries == {
        "a.b": {"fr": "plain"},
        "a.c": {"fr": "x", "en": "y"},
        "a.c.fr": {"fr": "x"},
        "a.c.en": {"fr": "y"},
    }


def test_language_sub_object_keys_can_be_named_directly():
    store = TranslationStore(language="en")
    assert store.lookup("home.shopNow.fr") == "Commander via WhatsApp"
    assert store.lookup("home.shopNow.en") == "Order via WhatsApp"
    store.set_language("fr")
    assert store.lookup("home.shopNow.en") == "Order via WhatsApp"


def test_switching_back_restores_french_and_is_idempotent():
    store = TranslationStore()
    store.set_language("en")
    store.set_language("fr")
    first = store.t("contact.title")
    store.set_language("fr")
    assert store.t("contact.title") == first == "Contactez-nous"


def test_language_is_persisted_and_restored():
    storage = {}
    TranslationStore(storage=storage).set_language("en")
    assert storage["language"] == "en"

    store = TranslationStore(storage=storage)
    assert store.initialize() == "en"


def test_invalid_saved_language_falls_back_to_default():
    store = TranslationStore(storage={"language": "hu"})
    assert store.initialize() == "fr"


def test_unsupported_language_is_rejected():
    store = TranslationStore()
    with pytest.raises(ValueError):
        store.set_language("de")
    assert store.language == "fr"


def test_observers_are_told_about_changes_only():
    store = TranslationStore()
    seen = []
    store.register_observer(seen.append)

    store.set_language("en")
    store.set_language("en")
    store.set_language("fr")
    assert seen == ["en", "fr"]

    store.unregister_observer(seen.append)
    store.set_language("en")
    assert seen == ["en", "fr"]


def test_placeholders_are_filled():
    store = TranslationStore(language="en")
    text = store.t(
        "products.orderViaWhatsApp",
        productName="Robe",
        price="15,000",
        productUrl="https://example.com/products",
    )
    assert text.startswith("Hello, I am interested in Robe from Ummi's Collection.")
    assert "15,000 FCFA" in text
    assert text.endswith("https://example.com/products")
