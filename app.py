import logging
from functools import wraps

from flask import (
    Flask,
    abort,
    flash,
    g,
    redirect,
    render_template,
    request,
    send_file,
    session,
    url_for,
)

from auth import AuthSessionCache
from backend import BACKEND_ERRORS, Backend, create_backend_client
from config import Config
from exports import XLSX_MIMETYPE, products_pdf, products_workbook
from formatting import format_price, order_url
from forms import ProductForm, ProductList
from i18n import LANGUAGES, TranslationStore
from models import CATEGORIES
from theme import COLOR_SCHEME_HINT, ThemeStore, platform_preference


logger = logging.getLogger(__name__)


# ---------- logging ----------
def setup_logging(app):
    logging.basicConfig(
        level=logging.DEBUG if app.debug else logging.INFO,
        format="[%(asctime)s] %(levelname)s in %(module)s: %(message)s",
    )


# ---------- app factory ----------
def create_app(config=None, client_factory=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    # Missing backend settings are fatal: there is nothing to serve without them.
    Config.validate(app.config)

    setup_logging(app)

    if client_factory is None:
        def client_factory():
            return create_backend_client(
                app.config["SUPABASE_URL"], app.config["SUPABASE_ANON_KEY"]
            )
    app.extensions["backend_client_factory"] = client_factory

    register_request_hooks(app)
    register_routes(app)
    register_error_handlers(app)

    logger.info(f"{app.config['SHOP_NAME']} initialized")
    return app


# ---------- helpers ----------
def get_backend():
    if "backend" not in g:
        abort(500)
    return g.backend


def is_admin():
    auth = g.get("auth")
    return auth is not None and auth.is_authenticated


def admin_required(view):
    @wraps(view)
    def decorated(*args, **kwargs):
        if not is_admin():
            return redirect(url_for("login"))
        return view(*args, **kwargs)
    return decorated


def report_error(message, error):
    logger.error(f"{message}: {error}")
    flash(g.i18n.t("common.error"), "error")


# ---------- per-request state ----------
def register_request_hooks(app):

    @app.before_request
    def load_request_state():
        g.i18n = TranslationStore(storage=session)
        g.lang = g.i18n.initialize()

        g.theme_store = ThemeStore(
            storage=session,
            platform=platform_preference(request.headers),
        )
        g.theme = g.theme_store.get()

        # Observers live as long as the request.
        g.i18n.register_observer(apply_language)
        g.theme_store.register_observer(apply_theme)

        if request.endpoint == "static":
            return

        client = app.extensions["backend_client_factory"]()
        g.backend = Backend(
            client,
            table=app.config["PRODUCTS_TABLE"],
            bucket=app.config["PRODUCTS_BUCKET"],
        )
        g.auth = AuthSessionCache(client.auth, session)
        g.auth.load()

    @app.after_request
    def ask_for_color_scheme(response):
        response.headers["Accept-CH"] = COLOR_SCHEME_HINT
        response.headers["Vary"] = COLOR_SCHEME_HINT
        return response

    @app.teardown_request
    def release_request_state(exc):
        i18n = g.pop("i18n", None)
        if i18n is not None:
            i18n.unregister_observer(apply_language)

        theme_store = g.pop("theme_store", None)
        if theme_store is not None:
            theme_store.unregister_observer(apply_theme)

        auth = g.pop("auth", None)
        if auth is not None:
            auth.close()

    # ---------- inject globals ----------
    @app.context_processor
    def inject_globals():
        return {
            "t": g.i18n,
            "lang": g.lang,
            "languages": LANGUAGES,
            "theme": g.theme,
            "admin": is_admin(),
            "categories_all": CATEGORIES,
            "shop_name": app.config["SHOP_NAME"],
            "whatsapp_number": app.config["WHATSAPP_NUMBER"],
            "facebook_url": app.config["FACEBOOK_URL"],
            "tiktok_url": app.config["TIKTOK_URL"],
        }

    @app.template_filter("price")
    def price_filter(value):
        return format_price(value, g.lang)

    @app.template_global()
    def whatsapp_order_url(product):
        product_url = url_for("products", category=product.category, _external=True)
        return order_url(app.config["WHATSAPP_NUMBER"], product, g.i18n, product_url)


def apply_language(language):
    g.lang = language


def apply_theme(theme):
    g.theme = theme


# ---------- routes ----------
def register_routes(app):

    # ---------- main ----------
    @app.route("/")
    def index():
        featured = []
        try:
            featured = get_backend().list_products(limit=app.config["FEATURED_COUNT"])
        except BACKEND_ERRORS as e:
            logger.error(f"Error fetching featured products: {e}")

        return render_template("index.html", products=featured)

    # ---------- catalog ----------
    @app.route("/products")
    def products():
        backend = get_backend()
        category = request.args.get("category", "").strip()
        page = max(request.args.get("page", 1, type=int) or 1, 1)
        limit = app.config["PAGE_SIZE"]

        categories = []
        try:
            categories = backend.list_categories()
        except BACKEND_ERRORS as e:
            logger.error(f"Error fetching categories: {e}")

        # "load more" appends: page N shows every product from pages 1..N
        items = []
        has_more = False
        try:
            for p in range(1, page + 1):
                chunk = backend.list_products(category=category or None, page=p, limit=limit)
                items.extend(chunk)
                has_more = len(chunk) == limit
                if not has_more:
                    break
        except BACKEND_ERRORS as e:
            report_error("Error fetching products", e)
            has_more = False

        return render_template(
            "products.html",
            products=items,
            categories=categories,
            active_category=category,
            page=page,
            has_more=has_more,
        )

    @app.route("/contact")
    def contact():
        return render_template("contact.html")

    # ---------- preferences ----------
    @app.route("/set-language/<lang>")
    def set_language(lang):
        if lang in LANGUAGES:
            g.i18n.set_language(lang)
        return redirect(request.referrer or url_for("index"))

    @app.route("/toggle-theme")
    def toggle_theme():
        g.theme_store.toggle()
        return redirect(request.referrer or url_for("index"))

    # ---------- login ----------
    @app.route("/admin/login", methods=["GET", "POST"])
    def login():
        if is_admin():
            return redirect(url_for("dashboard"))

        message = None
        email = ""

        if request.method == "POST":
            email = request.form.get("email", "").strip()
            password = request.form.get("password", "")

            if not email or not password:
                message = g.i18n.t("admin.login.error")
            else:
                try:
                    get_backend().sign_in(email, password)
                    return redirect(url_for("dashboard"))
                except BACKEND_ERRORS as e:
                    logger.warning(f"Login error for {email}: {e}")
                    message = g.i18n.t("admin.login.error")

        return render_template("login.html", message=message, email=email)

    # ---------- logout ----------
    @app.route("/admin/logout")
    def logout():
        try:
            get_backend().sign_out()
        except BACKEND_ERRORS as e:
            logger.error(f"Error logging out: {e}")
        return redirect(url_for("login"))

    # ---------- dashboard ----------
    @app.route("/admin", methods=["GET", "POST"])
    @admin_required
    def dashboard():
        t = g.i18n
        backend = get_backend()

        products = ProductList()
        try:
            products = ProductList(backend.list_products(limit=app.config["ADMIN_PAGE_SIZE"]))
        except BACKEND_ERRORS as e:
            report_error("Error fetching products", e)

        form = None
        confirm_id = None

        if request.method == "POST":

            # ---------- ADD ----------
            if "add" in request.form:
                form = ProductForm(t)

            # ---------- EDIT ----------
            elif "edit" in request.form:
                product = products.get(request.form.get("id"))
                if product is None:
                    flash(t("common.error"), "error")
                else:
                    form = ProductForm(t, product)

            # ---------- SAVE ----------
            elif "save" in request.form:
                product_id = request.form.get("id")
                product = products.get(product_id) if product_id else None

                if product_id and product is None:
                    flash(t("common.error"), "error")
                else:
                    form = ProductForm(t, product)
                    saved = form.submit(backend, request.form, request.files.get("image"))

                    if saved is not None:
                        products.save(saved)
                        key = "update" if form.is_edit else "create"
                        flash(t(f"admin.products.success.{key}"), "success")
                        form = None
                    elif form.failure:
                        flash(form.failure, "error")

            # ---------- DELETE (ask) ----------
            elif "delete" in request.form:
                confirm_id = request.form.get("id")

            # ---------- DELETE (confirm) ----------
            elif "confirm" in request.form:
                try:
                    products.delete(backend, request.form.get("id"))
                    flash(t("admin.products.success.delete"), "success")
                except BACKEND_ERRORS as e:
                    report_error("Error deleting product", e)

        return render_template(
            "dashboard.html",
            products=products,
            form=form,
            confirm_id=confirm_id,
        )

    # ---------- exports ----------
    @app.route("/admin/export/excel")
    @admin_required
    def export_excel():
        try:
            items = get_backend().list_products(limit=app.config["EXPORT_LIMIT"])
        except BACKEND_ERRORS as e:
            report_error("Error exporting products", e)
            return redirect(url_for("dashboard"))

        return send_file(
            products_workbook(items, g.i18n),
            as_attachment=True,
            download_name="products.xlsx",
            mimetype=XLSX_MIMETYPE
        )

    @app.route("/admin/export/pdf")
    @admin_required
    def export_pdf():
        try:
            items = get_backend().list_products(limit=app.config["EXPORT_LIMIT"])
        except BACKEND_ERRORS as e:
            report_error("Error exporting products", e)
            return redirect(url_for("dashboard"))

        return send_file(
            products_pdf(items, g.i18n, app.config["SHOP_NAME"]),
            as_attachment=True,
            download_name="products.pdf",
            mimetype="application/pdf"
        )


# ---------- errors ----------
def register_error_handlers(app):

    @app.errorhandler(404)
    def not_found(error):
        return render_template("404.html"), 404


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=5000)
