import logging


logger = logging.getLogger(__name__)

THEMES = ("light", "dark")
STORAGE_KEY = "theme"

# Client hint sent by browsers once the server asks for it with Accept-CH.
COLOR_SCHEME_HINT = "Sec-CH-Prefers-Color-Scheme"


def platform_preference(headers):
    return "dark" if headers.get(COLOR_SCHEME_HINT, "").strip('" ') == "dark" else "light"


class ThemeStore:
    """Light/dark preference persisted in the visitor's storage.

    Observers are told about every change; applying the theme to the page is
    their job.
    """

    def __init__(self, storage=None, platform="light"):
        self._storage = storage if storage is not None else {}
        self._platform = platform if platform in THEMES else "light"
        self._observers = []

    def get(self):
        saved = self._storage.get(STORAGE_KEY)
        if saved in THEMES:
            return saved
        return self._platform

    def set(self, theme):
        if theme not in THEMES:
            raise ValueError(f"Unsupported theme: {theme!r}")

        previous = self.get()
        self._storage[STORAGE_KEY] = theme

        # always persisted, observers only hear about actual changes
        if theme != previous:
            logger.debug(f"Theme changed: {previous} -> {theme}")
            for callback in list(self._observers):
                callback(theme)

    def toggle(self):
        theme = "dark" if self.get() == "light" else "light"
        self.set(theme)
        return theme

    def register_observer(self, callback):
        if callback not in self._observers:
            self._observers.append(callback)

    def unregister_observer(self, callback):
        if callback in self._observers:
            self._observers.remove(callback)
