"""빈 저장소 초기화에 사용하는 샘플 상품 10종."""

from storefront.schemas.product import PLACEHOLDER_IMAGE

SAMPLE_PRODUCTS: list[dict] = [
    {
        "name": "Premium Wireless Headphones",
        "price": 299.99,
        "image": PLACEHOLDER_IMAGE,
        "description": (
            "High-quality wireless headphones with noise cancellation and premium sound quality. "
            "Perfect for music lovers and professionals."
        ),
        "category": "Electronics",
        "discount": 20,
        "stock": 15,
        "rating": 4.8,
        "reviews": 124,
        "tags": ["Popular", "Hot Deal"],
        "approved": True,
    },
    {
        "name": "Smart Fitness Watch",
        "price": 199.99,
        "image": PLACEHOLDER_IMAGE,
        "description": "Advanced fitness tracking with heart rate monitoring, GPS, and smartphone integration.",
        "category": "Wearables",
        "discount": 15,
        "stock": 8,
        "rating": 4.6,
        "reviews": 89,
        "tags": ["New", "Limited Stock"],
        "approved": True,
    },
    {
        "name": "Organic Cotton T-Shirt",
        "price": 29.99,
        "image": PLACEHOLDER_IMAGE,
        "description": "Comfortable and sustainable organic cotton t-shirt available in multiple colors.",
        "category": "Clothing",
        "stock": 25,
        "rating": 4.4,
        "reviews": 67,
        "tags": ["Eco-Friendly"],
        "approved": True,
    },
    {
        "name": "Professional Camera Lens",
        "price": 899.99,
        "image": PLACEHOLDER_IMAGE,
        "description": "Professional-grade camera lens with superior optics and build quality.",
        "category": "Photography",
        "discount": 10,
        "stock": 5,
        "rating": 4.9,
        "reviews": 156,
        "tags": ["Professional", "Limited Stock"],
        "approved": True,
    },
    {
        "name": "Ergonomic Office Chair",
        "price": 449.99,
        "image": PLACEHOLDER_IMAGE,
        "description": "Comfortable ergonomic office chair with lumbar support and adjustable height.",
        "category": "Furniture",
        "stock": 12,
        "rating": 4.7,
        "reviews": 203,
        "tags": ["Popular"],
        "approved": True,
    },
    {
        "name": "Bluetooth Speaker",
        "price": 79.99,
        "image": PLACEHOLDER_IMAGE,
        "description": "Portable Bluetooth speaker with excellent sound quality and long battery life.",
        "category": "Electronics",
        "discount": 25,
        "stock": 20,
        "rating": 4.3,
        "reviews": 91,
        "tags": ["Hot Deal"],
        "approved": True,
    },
    {
        "name": "Gaming Mechanical Keyboard",
        "price": 159.99,
        "image": PLACEHOLDER_IMAGE,
        "description": "RGB backlit mechanical keyboard with tactile switches for gaming and productivity.",
        "category": "Electronics",
        "discount": 12,
        "stock": 18,
        "rating": 4.5,
        "reviews": 78,
        "tags": ["Gaming", "RGB"],
        "approved": True,
    },
    {
        "name": "Stainless Steel Water Bottle",
        "price": 24.99,
        "image": PLACEHOLDER_IMAGE,
        "description": "Insulated stainless steel water bottle that keeps drinks cold for 24 hours or hot for 12 hours.",
        "category": "Lifestyle",
        "stock": 35,
        "rating": 4.6,
        "reviews": 142,
        "tags": ["Eco-Friendly", "Insulated"],
        "approved": True,
    },
    {
        "name": "Wireless Charging Pad",
        "price": 39.99,
        "image": PLACEHOLDER_IMAGE,
        "description": "Fast wireless charging pad compatible with all Qi-enabled devices.",
        "category": "Electronics",
        "discount": 8,
        "stock": 22,
        "rating": 4.2,
        "reviews": 95,
        "tags": ["Wireless", "Fast Charging"],
        "approved": True,
    },
    {
        "name": "Yoga Mat Premium",
        "price": 79.99,
        "image": PLACEHOLDER_IMAGE,
        "description": "Non-slip premium yoga mat with excellent cushioning and durability.",
        "category": "Sports",
        "stock": 14,
        "rating": 4.7,
        "reviews": 186,
        "tags": ["Premium", "Non-slip"],
        "approved": True,
    },
]
