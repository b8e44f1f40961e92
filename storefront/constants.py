TABS = ["Home", "About", "Videos", "Products", "Membership", "Cart"]

# tab -> route
TAB_PATHS = {
    "Home": "/",
    "About": "/about",
    "Videos": "/videos",
    "Products": "/products",
    "Membership": "/membership",
    "Cart": "/cart",
}

FEATURED_QUOTES = [
    {"q": "We judge ourselves by our intentions. Others judge us by our actions.", "a": "— JonJon"},
    {"q": "If you’re not uncomfortable, you’re not growing.", "a": "— JonJon"},
    {"q": "Profit can turn pain into pride. Control turns chaos into clarity.", "a": "— JonJon"},
]

# prices are strings so the catalog builds exact Decimals
PRODUCTS = [
    {
        "id": "ebook-versioning",
        "title": "Versioning Yourself (E‑book)",
        "description": "A fast, practical blueprint to become a new version of you—on demand.",
        "price": "19.00",
        "badge": "New",
        "category": "ebook",
    },
    {
        "id": "sprint-7",
        "title": "7‑Day Cognitive Reframe Sprint",
        "description": "Daily micro‑lessons + prompts to break autopilot thinking.",
        "price": "99.00",
        "badge": "Popular",
        "category": "course",
    },
    {
        "id": "power-pack",
        "title": "Mindfulness Power Pack (Bundle)",
        "description": "Guided audios + worksheets for momentum in 30 minutes/day.",
        "price": "149.00",
        "badge": "Bundle",
        "category": "bundle",
    },
    {
        "id": "clarity-1on1",
        "title": "1:1 Clarity Call (60 min)",
        "description": "Get unstuck fast—direct feedback, reframes, and action steps.",
        "price": "199.00",
        "badge": "Limited",
        "category": "coaching",
    },
]

PLANS = [
    {
        "id": "starter",
        "name": "Starter",
        "price_monthly": "9.00",
        "blurb": "Weekly reframing prompts + private newsletter.",
        "features": ["Weekly prompts", "Private newsletter", "Member comments"],
    },
    {
        "id": "pro",
        "name": "Pro",
        "price_monthly": "29.00",
        "blurb": "Courses library + monthly live Q&A.",
        "features": ["All Starter", "Courses library", "Monthly live Q&A"],
        "popular": True,
    },
    {
        "id": "elite",
        "name": "Elite",
        "price_monthly": "79.00",
        "blurb": "Everything + quarterly 1:1 sprint with JonJon.",
        "features": ["All Pro", "Quarterly 1:1 sprint", "Beta access"],
    },
]

DEFAULT_PLAN_ID = "pro"
MEMBERSHIP_PREFIX = "membership-"

THEMES = ("light", "dark")

MSG_ADDED = "Added to cart"
MSG_CART_EMPTY = "Cart is empty"
MSG_CHECKOUT_OK = "Checkout complete — receipt sent!"
MSG_INVALID_EMAIL = "Enter a valid email"
MSG_NEWSLETTER_OK = "Boom. You’re in. Check your inbox for a welcome note."
