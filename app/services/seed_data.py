"""
Demo fixtures loaded into a fresh store on startup.

The same records are rebuilt on every start; only the due dates (relative to
now) and the response counts of the sample forum posts vary.
"""

import logging
import random
from datetime import timedelta

from app.core.clock import utcnow
from app.core.store import MemoryStore
from app.schemas.catalog import (
    FinancialOfferCreate,
    LearningResourceCreate,
    ProcurementCreate,
    SupplierCreate,
)
from app.schemas.forum_post import ForumPostCreate
from app.schemas.metric import MetricUpdate
from app.schemas.product import ProductCreate
from app.schemas.storefront import SetupStepsSchema, StorefrontUpdate
from app.schemas.user import UserCreate
from app.services.catalog_repository import (
    FinancialOfferRepository,
    LearningResourceRepository,
    ProcurementRepository,
    SupplierRepository,
)
from app.services.dashboard_repository import MetricsRepository, StorefrontRepository
from app.services.product_repository import ProductRepository
from app.services.user_repository import UserRepository

logger = logging.getLogger(__name__)

PRODUCT_IMAGE_URL = "https://images.unsplash.com/{}?ixlib=rb-1.2.1&auto=format&fit=crop&w=400&h=240&q=80"


def _seed_owner(store: MemoryStore) -> None:
    user = UserRepository.create(store, UserCreate(
        username="sophia_patel",
        password="password123",
        name="Sophia Patel",
        business_name="Eco Textiles Ltd",
        email="sophia@ecotextiles.com",
        phone="+91 9876543210",
    ))

    products = [
        ("Organic Cotton Fabric", "High-quality organic cotton fabric, sustainably sourced",
         45000, "photo-1620799140408-edc6dcb6d633"),
        ("Recycled Polyester Blend", "Eco-friendly recycled polyester blend for sustainable fashion",
         38000, "photo-1606522754091-a3bbf9ad4cb3"),
        ("Hemp Textile", "Natural hemp textile with excellent durability",
         52000, "photo-1581783342308-f792dbdd27c5"),
    ]
    for name, description, price, image in products:
        ProductRepository.create(store, ProductCreate(
            user_id=user.id,
            name=name,
            description=description,
            price=price,
            image=PRODUCT_IMAGE_URL.format(image),
        ))

    MetricsRepository.update(store, user.id, MetricUpdate(
        store_visits=2415,
        orders=48,
        connections=12,
        revenue=4258600,
    ))

    StorefrontRepository.update(store, user.id, StorefrontUpdate(
        completion_percentage=75,
        setup_steps=SetupStepsSchema(
            basic_info=True,
            products=True,
            logo=True,
            payment=False,
            shipping=False,
        ),
    ))


def _seed_catalogs(store: MemoryStore) -> None:
    suppliers = [
        SupplierCreate(name="EcoFibers Inc.", category="Raw Materials",
                       description="Sustainable textile raw materials supplier", cost_savings=20),
        SupplierCreate(name="GreenPackaging Co.", category="Packaging",
                       description="Eco-friendly packaging solutions", cost_savings=15),
        SupplierCreate(name="EthicalSource Logistics", category="Logistics",
                       description="Ethical and sustainable logistics services", cost_savings=10),
    ]
    for supplier in suppliers:
        SupplierRepository.create(store, supplier)

    now = utcnow()
    procurements = [
        ProcurementCreate(
            title="Sustainable Textiles for Government Uniforms",
            organization="Ministry of Textiles",
            description="Seeking suppliers of sustainable textiles for government uniform program",
            category="Government",
            due_date=now + timedelta(days=15),
        ),
        ProcurementCreate(
            title="Eco-Friendly Packaging Materials",
            organization="FashionRetail Inc.",
            description="Looking for eco-friendly packaging for clothing line",
            category="Corporate",
            due_date=now + timedelta(days=30),
        ),
    ]
    for procurement in procurements:
        ProcurementRepository.create(store, procurement)

    offers = [
        FinancialOfferCreate(type="loan", amount=50000000, interest_rate=850, term_months=24),
        FinancialOfferCreate(type="invoice_financing", amount=35000000, interest_rate=800, term_months=6),
        FinancialOfferCreate(type="equipment_loan", amount=75000000, interest_rate=900, term_months=36),
    ]
    for offer in offers:
        FinancialOfferRepository.create(store, offer)

    resources = [
        LearningResourceCreate(
            title="Supply Chain Management for Small Businesses",
            type="video",
            description="Learn the basics of supply chain management tailored for small businesses",
            duration=15,
            level="beginner",
        ),
        LearningResourceCreate(
            title="Guide to Digital Marketing for Product Visibility",
            type="article",
            description="Practical strategies to increase your product visibility online",
            duration=10,
            level="intermediate",
        ),
        LearningResourceCreate(
            title="How to Navigate International Trade Regulations",
            type="guide",
            description="Comprehensive guide to international trade regulations for small businesses",
            duration=25,
            level="advanced",
        ),
    ]
    for resource in resources:
        LearningResourceRepository.create(store, resource)


def _seed_forum(store: MemoryStore) -> None:
    posts = [
        ForumPostCreate(
            user_id=1,
            title="Tips for EU Export Compliance",
            content="I'm looking to export my textiles to the EU. What regulations should I be aware of?",
            tags=["Export", "Regulations"],
        ),
        ForumPostCreate(
            user_id=1,
            title="How I secured my first corporate contract",
            content="Sharing my experience securing a contract with a large corporation as a small business...",
            tags=["Success Story", "Procurement"],
        ),
        ForumPostCreate(
            user_id=1,
            title="Digital marketing on a small budget",
            content="What are your strategies for effective digital marketing with limited resources?",
            tags=["Marketing", "Digital"],
        ),
    ]
    # Sample posts look lived-in; posts created through the API start at 0.
    for post in posts:
        store.forum_posts.insert(**post.model_dump(), response_count=random.randint(1, 20))


def load_fixtures(store: MemoryStore) -> None:
    """Populate an empty store with the demo data set."""
    _seed_owner(store)
    _seed_catalogs(store)
    _seed_forum(store)
    logger.info(
        f"Seeded store: {store.users.count()} users, {store.products.count()} products, "
        f"{store.suppliers.count()} suppliers, {store.forum_posts.count()} forum posts"
    )
