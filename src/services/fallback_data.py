# src/services/fallback_data.py

"""Static sample products served when live scraping comes back empty."""

from src.models.product import Product


def fallback_products() -> list[Product]:
    """Return the fixed sample search results, always in the same order."""
    return [
        Product(
            id="1",
            title="Apple iPhone 13 Pro Max",
            image="https://images.pexels.com/photos/1647976/pexels-photo-1647976.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=2",
            store_name="Apple Store",
            price="$1,099.00",
            rating="4.8",
            review_count="2,453",
            seller="Apple Inc.",
            link="https://www.apple.com/shop/buy-iphone/iphone-13-pro",
        ),
        Product(
            id="2",
            title="Samsung Galaxy S22 Ultra",
            image="https://images.pexels.com/photos/7055323/pexels-photo-7055323.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=2",
            store_name="Samsung",
            price="$1,199.99",
            rating="4.7",
            review_count="1,832",
            seller="Samsung Electronics",
            link="https://www.samsung.com/us/smartphones/galaxy-s22-ultra/",
        ),
        Product(
            id="3",
            title="Sony WH-1000XM4 Wireless Noise Cancelling Headphones",
            image="https://images.pexels.com/photos/3394664/pexels-photo-3394664.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=2",
            store_name="Sony",
            price="$348.00",
            rating="4.7",
            review_count="738",
            seller="Sony Electronics",
            link="https://electronics.sony.com/audio/headphones/headband/p/wh1000xm4-b",
        ),
        Product(
            id="4",
            title="Nike Air Max 270",
            image="https://images.pexels.com/photos/1102777/pexels-photo-1102777.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=2",
            store_name="Nike",
            price="$150.00",
            rating="4.5",
            review_count="428",
            seller="Nike Inc.",
            link="https://www.nike.com/t/air-max-270-mens-shoes-KkLcGR",
        ),
    ]


def fallback_product(product_id: str) -> Product:
    """Return the fixed sample detail record carrying *product_id*."""
    return Product(
        id=product_id,
        title="Apple MacBook Pro 16-inch",
        image="https://images.pexels.com/photos/18105/pexels-photo.jpg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=2",
        store_name="Apple Store",
        price="$2,399.00",
        rating="4.9",
        review_count="856",
        seller="Apple Inc.",
        link="https://www.apple.com/shop/buy-mac/macbook-pro",
        detailed_description=(
            "The Apple MacBook Pro features a brilliant Retina display, "
            "powerful processors, amazing graphics, and the versatile "
            "Touch Bar. It's our most powerful notebook. Pushed even "
            "further. The 16-inch MacBook Pro brings a whole new class "
            "of performance to the notebook. With up to 8 cores of "
            "processing power and an expansive 16-inch Retina display, "
            "it's the largest Retina display ever in a Mac notebook."
        ),
    )
