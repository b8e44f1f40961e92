from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlencode

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from storefront.config import Settings, settings as default_settings
from storefront.constants import (
    FEATURED_QUOTES,
    MSG_ADDED,
    MSG_NEWSLETTER_OK,
    TAB_PATHS,
    TABS,
    THEMES,
)
from storefront.services.checkout import ReceiptNumbers, checkout
from storefront.services.membership import find_plan, join_membership, load_plans
from storefront.services.receipt_pdf import generate_receipt_pdf
from storefront.shop.catalog import Catalog, default_catalog
from storefront.utils.formatters import money, playlist_embed_url
from storefront.web.sessions import COOKIE_NAME, SessionStore, ShopSession

log = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"


def _redirect(path: str, msg: str | None = None) -> RedirectResponse:
    url = f"{path}?{urlencode({'msg': msg})}" if msg else path
    return RedirectResponse(url=url, status_code=303)


def _safe_next(path: Optional[str]) -> str:
    # only bounce back to our own tabs
    return path if path in TAB_PATHS.values() else "/"


def create_app(
    settings: Settings | None = None,
    catalog: Catalog | None = None,
) -> FastAPI:
    settings = settings or default_settings
    catalog = catalog if catalog is not None else default_catalog()
    plans = load_plans()

    app = FastAPI(title=f"{settings.site_name} Storefront")
    app.state.sessions = SessionStore(catalog, max_sessions=settings.max_sessions)
    app.state.receipt_numbers = ReceiptNumbers()

    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.globals["money"] = lambda v: money(v, settings.currency_symbol, settings.decimals)

    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.middleware("http")
    async def _session(request: Request, call_next):
        store: SessionStore = request.app.state.sessions
        shop = store.get(request.cookies.get(COOKIE_NAME))
        created = False
        if shop is None:
            # only state-changing requests get a stored session
            if request.method == "POST":
                shop, created = store.create(), True
            else:
                shop = store.transient()
        request.state.shop = shop
        response = await call_next(request)
        if created:
            response.set_cookie(COOKIE_NAME, shop.sid, httponly=True, samesite="lax")
        return response

    def _shop(request: Request) -> ShopSession:
        return request.state.shop

    def _render(request: Request, name: str, tab: str, ctx: dict[str, Any]) -> HTMLResponse:
        shop = _shop(request)
        base = {
            "settings": settings,
            "tabs": TABS,
            "tab_paths": TAB_PATHS,
            "active_tab": tab,
            "current_path": TAB_PATHS[tab],
            "theme": shop.theme,
            "cart_count": shop.cart.line_count(),
            "subscribed": shop.subscribed,
            "message": request.query_params.get("msg", ""),
        }
        base.update(ctx)
        return templates.TemplateResponse(request, name, base)

    # ---------------- tabs ----------------

    @app.get("/", response_class=HTMLResponse)
    def home(request: Request):
        return _render(
            request,
            "home.html",
            "Home",
            {"quotes": FEATURED_QUOTES, "products": catalog.entries()},
        )

    @app.get("/about", response_class=HTMLResponse)
    def about(request: Request):
        return _render(request, "about.html", "About", {})

    @app.get("/videos", response_class=HTMLResponse)
    def videos(
        request: Request,
        playlist1: Optional[str] = None,
        playlist2: Optional[str] = None,
    ):
        p1 = playlist1 if playlist1 is not None else settings.playlist_1
        p2 = playlist2 if playlist2 is not None else settings.playlist_2
        return _render(
            request,
            "videos.html",
            "Videos",
            {
                "playlists": [
                    {"field": "playlist1", "label": "Playlist ID #1", "id": p1, "url": playlist_embed_url(p1)},
                    {"field": "playlist2", "label": "Playlist ID #2", "id": p2, "url": playlist_embed_url(p2)},
                ],
            },
        )

    @app.get("/products", response_class=HTMLResponse)
    def products(request: Request):
        return _render(request, "products.html", "Products", {"products": catalog.entries()})

    @app.get("/membership", response_class=HTMLResponse)
    def membership(request: Request, plan: Optional[str] = None):
        chosen = find_plan(plans, plan)
        return _render(
            request,
            "membership.html",
            "Membership",
            {"plans": plans, "chosen": chosen},
        )

    @app.get("/cart", response_class=HTMLResponse)
    def cart_page(request: Request):
        shop = _shop(request)
        return _render(
            request,
            "cart.html",
            "Cart",
            {
                "lines": shop.cart.derive_lines(),
                "total": shop.cart.total(),
                "receipt": shop.last_receipt,
            },
        )

    # ---------------- cart actions ----------------

    @app.post("/cart/add")
    def cart_add(
        request: Request,
        product_id: Optional[str] = Form(None),
        qty: Optional[str] = Form(None),
        source: Optional[str] = Form(None),
    ):
        if product_id:
            _shop(request).cart.add(product_id, qty)
        # the Home page jumps straight to the cart, the Products page stays put
        if source == "products":
            return _redirect("/products", MSG_ADDED)
        return _redirect("/cart")

    @app.post("/cart/update")
    def cart_update(
        request: Request,
        product_id: Optional[str] = Form(None),
        qty: Optional[str] = Form(None),
    ):
        if product_id:
            _shop(request).cart.update(product_id, qty)
        return _redirect("/cart")

    @app.post("/cart/remove")
    def cart_remove(request: Request, product_id: Optional[str] = Form(None)):
        if product_id:
            _shop(request).cart.remove(product_id)
        return _redirect("/cart")

    @app.post("/cart/clear")
    def cart_clear(request: Request):
        _shop(request).cart.clear()
        return _redirect("/cart")

    @app.post("/cart/checkout")
    def cart_checkout(request: Request):
        shop = _shop(request)
        ok, msg, receipt = checkout(shop.cart, request.app.state.receipt_numbers, settings.currency)
        if ok:
            shop.last_receipt = receipt
        return _redirect("/cart", msg)

    @app.get("/cart/receipt.pdf")
    def cart_receipt(request: Request):
        receipt = _shop(request).last_receipt
        if receipt is None:
            raise HTTPException(status_code=404, detail="No receipt yet")
        pdf = generate_receipt_pdf(receipt, settings.site_name)
        return Response(
            content=pdf,
            media_type="application/pdf",
            headers={"Content-Disposition": f'inline; filename="receipt_{receipt.number}.pdf"'},
        )

    # ---------------- membership / newsletter / theme ----------------

    @app.post("/membership/join")
    def membership_join(
        request: Request,
        email: Optional[str] = Form(None),
        plan: Optional[str] = Form(None),
    ):
        chosen = find_plan(plans, plan)
        _, msg = join_membership(_shop(request).cart, email, chosen)
        return _redirect("/cart", msg)

    @app.post("/newsletter")
    def newsletter(
        request: Request,
        email: Optional[str] = Form(None),
        next: Optional[str] = Form(None),
    ):
        shop = _shop(request)
        shop.subscribed = True
        log.info("newsletter subscribe: %s", (email or "").strip())
        return _redirect(_safe_next(next), MSG_NEWSLETTER_OK)

    @app.post("/theme")
    def theme(request: Request, next: Optional[str] = Form(None)):
        shop = _shop(request)
        shop.theme = THEMES[1] if shop.theme == THEMES[0] else THEMES[0]
        return _redirect(_safe_next(next))

    log.info("storefront app created: %d products, %d plans", len(catalog), len(plans))
    return app


app = create_app()
