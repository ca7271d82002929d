from sqlalchemy import Column, Integer, MetaData, Numeric, String, Table, Text, func, insert, select
from storefront.core.config import get_settings
from storefront.db.session import build_engine

# Development layout only; in production the products table is owned elsewhere
metadata = MetaData()
products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("title", String(255), nullable=False),
    Column("price", Numeric(10, 2), nullable=False),
    Column("image_url", Text, nullable=False),
    Column("category", String(255)),
)

def seed_products():
    engine = build_engine(get_settings())
    print("Creating products table if needed...")
    metadata.create_all(engine, checkfirst=True)

    with engine.begin() as conn:
        # Check if products already exist to avoid duplicates
        count = conn.execute(select(func.count()).select_from(products)).scalar_one()
        if count:
            print(f"Database already contains {count} products. Skipping seed.")
        else:
            print("Seeding initial products...")
            conn.execute(insert(products), [
                {"title": "Classic Cotton Shirt", "price": 19.99, "image_url": "/images/shirt.png", "category": "tops"},
                {"title": "Slim Fit Jeans", "price": 49.50, "image_url": "/images/jeans.png", "category": "bottoms"},
                {"title": "Canvas Sneakers", "price": 35.00, "image_url": "/images/sneakers.png", "category": "shoes"},
                {"title": "Wool Beanie", "price": 12.75, "image_url": "/images/beanie.png", "category": "accessories"},
            ])
            print("Successfully seeded 4 products!")

    engine.dispose()

if __name__ == "__main__":
    seed_products()
