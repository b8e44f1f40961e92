"""
Route tests for the storefront web layer.

Uses the real app (catalog, session store, cart engine) through
FastAPI's TestClient. Each test client carries its own session cookie.
"""
from dataclasses import replace

from fastapi.testclient import TestClient

from storefront.utils.validators import MAX_QUANTITY
from storefront.web.main import create_app
from storefront.web.sessions import COOKIE_NAME


def _cart(app, client):
    sid = client.cookies.get(COOKIE_NAME)
    return app.state.sessions.get(sid).cart


class TestTabs:
    def test_every_tab_renders(self, test_client):
        for path, marker in [
            ("/", "Browse products"),
            ("/about", "About JonJon"),
            ("/videos", "Two channels, one mission"),
            ("/products", "Ready to check out?"),
            ("/membership", "Momentum on tap"),
            ("/cart", "Your cart is empty"),
        ]:
            response = test_client.get(path)
            assert response.status_code == 200, path
            assert marker in response.text, path

    def test_products_list_catalog_prices(self, test_client):
        response = test_client.get("/products")

        assert "Versioning Yourself" in response.text
        assert "$19.00" in response.text
        assert "$199.00" in response.text

    def test_browsing_does_not_store_sessions(self, app):
        for _ in range(20):
            response = TestClient(app).get("/about")
            assert response.status_code == 200
            assert COOKIE_NAME not in response.cookies

        assert len(app.state.sessions.sessions) == 0

    def test_first_action_sets_session_cookie(self, app):
        client = TestClient(app)
        response = client.post("/cart/add", data={"product_id": "sprint-7"}, follow_redirects=False)

        assert response.status_code == 303
        assert COOKIE_NAME in response.cookies
        assert len(app.state.sessions.sessions) == 1

    def test_session_store_is_bounded(self, settings, catalog):
        app = create_app(replace(settings, max_sessions=3), catalog)
        for _ in range(5):
            TestClient(app).post("/cart/add", data={"product_id": "sprint-7"})

        assert len(app.state.sessions.sessions) == 3

    def test_videos_use_default_and_custom_playlists(self, test_client):
        default = test_client.get("/videos")
        assert "videoseries?list=PLdefaultOne" in default.text

        custom = test_client.get("/videos", params={"playlist1": "PLmine", "playlist2": "PLyours"})
        assert "videoseries?list=PLmine" in custom.text
        assert "videoseries?list=PLyours" in custom.text

    def test_membership_preselects_requested_plan(self, test_client):
        response = test_client.get("/membership", params={"plan": "elite"})
        assert "Join Elite — $79.00/mo" in response.text

    def test_unknown_route_is_404(self, test_client):
        assert test_client.get("/nope").status_code == 404


class TestCartFlow:
    def test_add_from_home_lands_on_cart(self, app, test_client):
        response = test_client.post("/cart/add", data={"product_id": "ebook-versioning", "source": "home"})

        assert response.status_code == 200
        assert str(response.url).endswith("/cart")
        assert "Versioning Yourself" in response.text
        assert "Cart <span class=\"count\">(1)</span>" in response.text
        assert _cart(app, test_client).quantity_of("ebook-versioning") == 1

    def test_add_from_products_shows_toast(self, test_client):
        response = test_client.post("/cart/add", data={"product_id": "sprint-7", "source": "products"})

        assert "/products" in str(response.url)
        assert "Added to cart" in response.text

    def test_update_remove_and_totals(self, app, test_client):
        test_client.post("/cart/add", data={"product_id": "ebook-versioning"})
        test_client.post("/cart/add", data={"product_id": "ebook-versioning", "qty": "2"})
        page = test_client.get("/cart")
        assert "$57.00" in page.text

        page = test_client.post("/cart/update", data={"product_id": "ebook-versioning", "qty": "0"})
        assert _cart(app, test_client).quantity_of("ebook-versioning") == 1
        assert "$19.00" in page.text

        page = test_client.post("/cart/remove", data={"product_id": "ebook-versioning"})
        assert "Your cart is empty" in page.text

    def test_garbage_quantity_is_coerced_not_rejected(self, app, test_client):
        test_client.post("/cart/add", data={"product_id": "power-pack"})
        response = test_client.post("/cart/update", data={"product_id": "power-pack", "qty": "lots"})

        assert response.status_code == 200
        assert _cart(app, test_client).quantity_of("power-pack") == 1

    def test_update_after_remove_does_not_resurrect(self, app, test_client):
        test_client.post("/cart/add", data={"product_id": "power-pack"})
        test_client.post("/cart/remove", data={"product_id": "power-pack"})
        test_client.post("/cart/update", data={"product_id": "power-pack", "qty": "3"})

        assert _cart(app, test_client).items == ()

    def test_clear(self, app, test_client):
        test_client.post("/cart/add", data={"product_id": "power-pack"})
        test_client.post("/cart/add", data={"product_id": "sprint-7"})

        page = test_client.post("/cart/clear")

        assert "Your cart is empty" in page.text
        assert _cart(app, test_client).items == ()

    def test_sessions_do_not_share_carts(self, app, test_client):
        other = TestClient(app)
        other.post("/cart/clear")
        test_client.post("/cart/add", data={"product_id": "sprint-7"})

        assert _cart(app, other).items == ()
        assert _cart(app, test_client).quantity_of("sprint-7") == 1

    def test_huge_quantity_keeps_pages_working(self, app, test_client):
        test_client.post("/cart/add", data={"product_id": "ebook-versioning", "qty": "1e1000000"})
        test_client.post("/cart/add", data={"product_id": "sprint-7", "qty": "9" * 40})

        page = test_client.get("/cart")

        assert page.status_code == 200
        assert test_client.get("/about").status_code == 200
        cart = _cart(app, test_client)
        assert cart.quantity_of("ebook-versioning") == 1
        assert cart.quantity_of("sprint-7") == MAX_QUANTITY

    def test_missing_product_id_is_a_noop(self, app, test_client):
        for path in ("/cart/add", "/cart/update", "/cart/remove"):
            response = test_client.post(path, data={"qty": "2"})
            assert response.status_code == 200, path
            assert "Your cart is empty" in response.text

        assert _cart(app, test_client).items == ()


class TestCheckoutRoutes:
    def test_empty_checkout_rejected(self, app, test_client):
        response = test_client.post("/cart/checkout")

        assert "Cart is empty" in response.text
        assert _cart(app, test_client).items == ()

    def test_checkout_clears_and_offers_receipt(self, app, test_client):
        test_client.post("/cart/add", data={"product_id": "clarity-1on1"})

        response = test_client.post("/cart/checkout")

        assert "Checkout complete" in response.text
        assert "R-000001" in response.text
        assert _cart(app, test_client).items == ()

        pdf = test_client.get("/cart/receipt.pdf")
        assert pdf.status_code == 200
        assert pdf.headers["content-type"] == "application/pdf"
        assert pdf.content.startswith(b"%PDF")

    def test_receipt_missing_is_404(self, test_client):
        assert test_client.get("/cart/receipt.pdf").status_code == 404


class TestMembershipRoutes:
    def test_join_with_valid_email(self, app, test_client):
        response = test_client.post("/membership/join", data={"email": "you@example.com", "plan": "elite"})

        assert str(response.url).endswith("/cart") or "/cart?" in str(response.url)
        assert "Welcome to Elite, you@example.com!" in response.text
        assert _cart(app, test_client).quantity_of("membership-elite") == 1
        # not a catalog product, so the cart still shows as empty
        assert "Your cart is empty" in response.text

    def test_join_with_invalid_email(self, app, test_client):
        response = test_client.post("/membership/join", data={"email": "nope", "plan": "pro"})

        assert "Enter a valid email" in response.text
        assert _cart(app, test_client).items == ()

    def test_join_without_fields(self, app, test_client):
        response = test_client.post("/membership/join", data={})

        assert response.status_code == 200
        assert "Enter a valid email" in response.text


class TestNewsletterAndTheme:
    def test_newsletter_subscribe_returns_to_page(self, test_client):
        response = test_client.post("/newsletter", data={"email": "x@y.z", "next": "/about"})

        assert "/about" in str(response.url)
        assert "Boom. You’re in." in response.text
        assert 'name="email" placeholder="you@example.com"' not in response.text

    def test_newsletter_ignores_foreign_next(self, test_client):
        response = test_client.post("/newsletter", data={"email": "x@y.z", "next": "https://evil.example"})

        assert response.url.path == "/"

    def test_theme_toggles(self, test_client):
        page = test_client.post("/theme", data={"next": "/products"})
        assert '<html lang="en" class="dark">' in page.text
        assert "Light mode" in page.text

        page = test_client.post("/theme", data={"next": "/products"})
        assert '<html lang="en" class="">' in page.text
        assert "Dark mode" in page.text
