"""Default catalog and site content loaded into a fresh repository."""
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from storefront.models import SiteSettings

if TYPE_CHECKING:
    from storefront.services.catalog import CatalogRepository

_UNSPLASH = "https://images.unsplash.com/{photo}?ixlib=rb-4.0.3&auto=format&fit=crop&w={w}&h={h}&q=80"


def _image(photo: str, w: int = 600, h: int = 800) -> str:
    return _UNSPLASH.format(photo=photo, w=w, h=h)


TOP_LEVEL_CATEGORIES = [
    {"name": "Fashion", "slug": "fashion", "imageUrl": _image("photo-1532453288672-3a27e9be9efd", 500, 400)},
    {"name": "Skincare", "slug": "skincare", "imageUrl": _image("photo-1570172619644-dfd03ed5d881", 500, 400)},
    {"name": "Appliances", "slug": "appliances", "imageUrl": _image("photo-1574269909862-7e1d70bb8078", 500, 400)},
    {"name": "Utilities", "slug": "utilities", "imageUrl": _image("photo-1583947215259-38e31be8751f", 500, 400)},
]

FASHION_SUBCATEGORIES = [
    {"name": "Men", "slug": "men"},
    {"name": "Women", "slug": "women"},
    {"name": "Kids", "slug": "kids"},
]

SAMPLE_PRODUCTS = [
    # Fashion
    {"name": "Embroidered Senator Outfit",
     "description": "Elegant traditional Nigerian senator outfit with detailed embroidery, perfect for special occasions.",
     "price": 12500, "imageUrl": _image("photo-1591019052241-e4d95a5dc3fc"),
     "category": "Fashion", "subCategory": "Men", "isNew": True, "rating": 4.5, "reviewCount": 24},
    {"name": "Ankara Print Maxi Dress",
     "description": "Beautiful Ankara print maxi dress featuring vibrant Nigerian patterns and comfortable fit.",
     "price": 18500, "imageUrl": _image("photo-1614252235316-8c857d38b5f4"),
     "category": "Fashion", "subCategory": "Women", "isNew": True, "rating": 4.0, "reviewCount": 6},
    {"name": "Traditional Dashiki",
     "description": "Authentic Nigerian dashiki with colorful patterns, comfortable for everyday wear.",
     "price": 8500, "imageUrl": _image("photo-1522242436218-58a4ecf2e8a1"),
     "category": "Fashion", "subCategory": "Men", "rating": 4.2, "reviewCount": 15},
    {"name": "Kids Ankara Set",
     "description": "Adorable Ankara outfit set for children, featuring matching top and bottom with Nigerian patterns.",
     "price": 7500, "imageUrl": _image("photo-1622290291468-a28f7a7dc6a8"),
     "category": "Fashion", "subCategory": "Kids", "isNew": True, "rating": 4.7, "reviewCount": 12},
    {"name": "Traditional Head Wrap",
     "description": "Beautiful Nigerian gele head wrap for special occasions and celebrations.",
     "price": 6500, "imageUrl": _image("photo-1534271417223-b9dbfd8b7acd"),
     "category": "Fashion", "subCategory": "Women", "rating": 4.3, "reviewCount": 9},
    {"name": "Handmade Nigerian Sandals",
     "description": "Handcrafted leather sandals made by Nigerian artisans with traditional patterns.",
     "price": 11200, "imageUrl": _image("photo-1543163521-1bf539c55dd2"),
     "category": "Fashion", "subCategory": "Men", "rating": 4.4, "reviewCount": 18},
    # Skincare
    {"name": "Natural Shea Butter Moisturizer",
     "description": "Pure and natural shea butter moisturizer sourced from Nigeria, perfect for all skin types.",
     "price": 8750, "oldPrice": 10000, "imageUrl": _image("photo-1608248543803-ba4f8c70ae0b"),
     "category": "Skincare", "isBestSeller": True, "rating": 5.0, "reviewCount": 42},
    {"name": "Natural Hibiscus Facial Serum",
     "description": "Revitalizing facial serum made with natural hibiscus extract to brighten and rejuvenate your skin.",
     "price": 9200, "imageUrl": _image("photo-1599305445671-ac291c95aaa9"),
     "category": "Skincare", "isNew": True, "rating": 4.5, "reviewCount": 11},
    {"name": "African Black Soap",
     "description": "Traditional Nigerian black soap made with natural ingredients to cleanse and purify skin.",
     "price": 5500, "imageUrl": _image("photo-1614806687007-2215a9db3b1b"),
     "category": "Skincare", "isBestSeller": True, "rating": 4.8, "reviewCount": 37},
    {"name": "Aloe Vera Gel",
     "description": "Pure aloe vera gel sourced from Nigerian farms, perfect for soothing skin irritations.",
     "price": 6800, "imageUrl": _image("photo-1596776071613-1305b0b839ab"),
     "category": "Skincare", "rating": 4.6, "reviewCount": 23},
    {"name": "Moringa Oil Face Mask",
     "description": "Nourishing face mask with moringa oil to deeply hydrate and repair skin.",
     "price": 7200, "imageUrl": _image("photo-1596807307303-96382e7e3e9d"),
     "category": "Skincare", "isNew": True, "rating": 4.4, "reviewCount": 8},
    {"name": "Vitamin C Brightening Cream",
     "description": "Vitamin C enriched brightening cream to reduce dark spots and even skin tone.",
     "price": 8900, "imageUrl": _image("photo-1531895861208-8504b98fe814"),
     "category": "Skincare", "rating": 4.2, "reviewCount": 14},
    # Appliances
    {"name": "Multi-Function Blender Premium",
     "description": "High-powered multi-function blender for all your kitchen needs with multiple attachments.",
     "price": 25000, "imageUrl": _image("photo-1570222094114-d054a817e56b"),
     "category": "Appliances", "rating": 4.0, "reviewCount": 16},
    {"name": "Portable Air Conditioner - Energy Saving",
     "description": "Energy efficient portable air conditioner perfect for the Nigerian climate, low electricity consumption.",
     "price": 85000, "imageUrl": _image("photo-1585338447937-7082f8fc763d"),
     "category": "Appliances", "isNew": True, "rating": 4.0, "reviewCount": 3},
    {"name": "Electric Pressure Cooker",
     "description": "Modern electric pressure cooker to prepare Nigerian dishes quickly and efficiently.",
     "price": 32000, "imageUrl": _image("photo-1585664811087-47f65abbad64"),
     "category": "Appliances", "isBestSeller": True, "rating": 4.7, "reviewCount": 28},
    {"name": "Solar Powered Fan",
     "description": "Eco-friendly solar powered fan, perfect for Nigerian power outages and saving on electricity.",
     "price": 18000, "imageUrl": _image("photo-1565330502541-4937be8552e3"),
     "category": "Appliances", "rating": 4.3, "reviewCount": 19},
    # Utilities
    {"name": "Handwoven Storage Basket Set (3)",
     "description": "Set of three handwoven storage baskets made by Nigerian artisans, perfect for organizing your home.",
     "price": 15800, "imageUrl": _image("photo-1544967082-d9d25d867d66"),
     "category": "Utilities", "rating": 3.5, "reviewCount": 8},
    {"name": "Handcrafted Wall Hanging - Tribal",
     "description": "Beautiful handcrafted tribal wall hanging to add Nigerian cultural touch to your home decor.",
     "price": 12300, "imageUrl": _image("photo-1582582621959-48d27397dc69"),
     "category": "Utilities", "isNew": True, "rating": 4.0, "reviewCount": 2},
    {"name": "Decorative Throw Pillows",
     "description": "Set of decorative throw pillows with traditional Nigerian patterns to enhance your living space.",
     "price": 9500, "imageUrl": _image("photo-1588098245633-71fecf1ea0d7"),
     "category": "Utilities", "rating": 4.5, "reviewCount": 15},
    {"name": "African Print Table Runner",
     "description": "Colorful table runner with African prints to bring vibrant Nigerian aesthetics to your dining area.",
     "price": 7800, "imageUrl": _image("photo-1595570932563-43c551095842"),
     "category": "Utilities", "rating": 4.2, "reviewCount": 7},
]

ABOUT_HTML = """
<h2>Our Story</h2>
<p>Trossachs was founded in 2020 with a vision to provide high-quality Nigerian products to our customers both locally and abroad. We started as a small boutique in Lagos and have since grown to become one of Nigeria's leading e-commerce platforms.</p>

<h2>Our Mission</h2>
<p>Our mission is to showcase the best of Nigerian craftsmanship, design, and innovation while providing exceptional shopping experiences for our customers.</p>

<h2>Our Values</h2>
<ul>
  <li><strong>Quality:</strong> We carefully select every product to ensure the highest quality standards.</li>
  <li><strong>Authenticity:</strong> We celebrate and promote authentic Nigerian craftsmanship and culture.</li>
  <li><strong>Community:</strong> We support local artisans and businesses across Nigeria.</li>
</ul>
""".strip()

CONTACT_HTML = """
<h2>Get in Touch</h2>
<p>We're always eager to hear from our customers. Whether you have a question about our products, need assistance with an order, or want to explore business opportunities, we're here to help.</p>

<h2>Contact Information</h2>
<ul>
  <li><strong>Address:</strong> 123 Lagos Island, Lagos, Nigeria</li>
  <li><strong>Phone:</strong> +234 800 123 4567</li>
  <li><strong>Email:</strong> info@trossachs.ng</li>
  <li><strong>Business Hours:</strong> Monday to Friday, 9am to 5pm WAT</li>
</ul>

<h2>Customer Support</h2>
<p>Email: support@trossachs.ng</p>
""".strip()


def default_site_settings() -> SiteSettings:
    """Build a fresh copy of the default site settings."""
    return SiteSettings.model_validate({
        "logo": {"text": "Trossachs", "imageUrl": ""},
        "footer": {
            "companyName": "Trossachs Nigeria Ltd.",
            "address": "123 Lagos Island, Lagos, Nigeria",
            "phone": "+234 800 123 4567",
            "email": "info@trossachs.ng",
            "socialLinks": {
                "facebook": "https://facebook.com/trossachs",
                "twitter": "https://twitter.com/trossachs",
                "instagram": "https://instagram.com/trossachs",
                "linkedin": "https://linkedin.com/company/trossachs",
            },
            "copyright": "© 2023 Trossachs. All rights reserved.",
        },
        "heroCarousel": [
            {"id": 1, "imageUrl": _image("photo-1534271417223-b9dbfd8b7acd", 1200, 600),
             "title": "Traditional Nigerian Fashion",
             "subtitle": "Discover our collection of authentic Nigerian designs",
             "ctaText": "Shop Now", "ctaLink": "/category/fashion"},
            {"id": 2, "imageUrl": _image("photo-1608248543803-ba4f8c70ae0b", 1200, 600),
             "title": "Natural Skincare Products",
             "subtitle": "Authentic Nigerian ingredients for radiant skin",
             "ctaText": "Explore", "ctaLink": "/category/skincare"},
            {"id": 3, "imageUrl": _image("photo-1585664811087-47f65abbad64", 1200, 600),
             "title": "Modern Appliances",
             "subtitle": "Quality appliances for your Nigerian home",
             "ctaText": "Browse", "ctaLink": "/category/appliances"},
        ],
        "pages": {
            "about": {
                "title": "About Trossachs",
                "content": ABOUT_HTML,
                "metaDescription": "Learn about Trossachs, Nigeria's premium e-commerce platform offering authentic Nigerian fashion, skincare, appliances and more.",
                "lastUpdated": datetime(2023, 6, 15, tzinfo=timezone.utc),
            },
            "contact": {
                "title": "Contact Us",
                "content": CONTACT_HTML,
                "metaDescription": "Contact Trossachs for customer support, business inquiries, or questions about our Nigerian products.",
                "lastUpdated": datetime(2023, 5, 10, tzinfo=timezone.utc),
            },
        },
    })


def seed_catalog(catalog: "CatalogRepository") -> None:
    """Load default categories and sample products into ``catalog``."""
    parents = {}
    for data in TOP_LEVEL_CATEGORIES:
        category = catalog.create_category(data)
        parents[category.slug] = category.id

    for data in FASHION_SUBCATEGORIES:
        catalog.create_category({**data, "parentId": parents["fashion"]})

    for data in SAMPLE_PRODUCTS:
        catalog.create_product(data)
