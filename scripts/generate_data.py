"""
Synthetic Data Generator for the Groceteria backend

Seeds vendors, shoppers, catalog items, cart lines, orders and payments.
Everything goes through the domain services so the seeded rows obey the
same rules as rows created through the API.

Run: python scripts/generate_data.py
"""
import os
import sys
import random
from decimal import Decimal

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Setup Django
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

import django
django.setup()

from django.conf import settings
from faker import Faker

from apps.cart.models import CartLine
from apps.cart.services import CartService
from apps.catalog.models import Category, Item
from apps.catalog.services import ItemService
from apps.orders.models import Order
from apps.orders.services import OrderService
from apps.payments.gateway import SimulatedPaymentGateway
from apps.payments.models import Payment
from apps.payments.services import PaymentService
from apps.users.models import Gender, Role, User
from apps.users.services import UserService

fake = Faker('en_IN')

SEED_PASSWORD = "Groceteria@123"

ITEM_TEMPLATES = [
    ('Tomato', Category.VEGETABLES, 20, 45),
    ('Onion', Category.VEGETABLES, 25, 50),
    ('Potato', Category.VEGETABLES, 18, 35),
    ('Spinach', Category.VEGETABLES, 15, 30),
    ('Banana', Category.FRUITS, 40, 70),
    ('Alphonso Mango', Category.FRUITS, 300, 600),
    ('Apple', Category.FRUITS, 120, 220),
    ('Toned Milk', Category.DAIRYPRODUCTS, 25, 30),
    ('Paneer', Category.DAIRYPRODUCTS, 80, 120),
    ('Curd', Category.DAIRYPRODUCTS, 30, 60),
    ('Chicken Breast', Category.MEAT, 220, 350),
    ('Mutton Curry Cut', Category.MEAT, 600, 850),
    ('Basmati Rice', Category.GRAINSANDOILS, 90, 180),
    ('Sunflower Oil', Category.GRAINSANDOILS, 140, 210),
    ('Turmeric Powder', Category.SPICESANDSEASONINGS, 30, 80),
    ('Garam Masala', Category.SPICESANDSEASONINGS, 50, 110),
    ('Baking Soda', Category.BAKINGINGREDIENTS, 20, 45),
    ('Cocoa Powder', Category.BAKINGINGREDIENTS, 150, 300),
    ('Tomato Ketchup', Category.CONDIMENTS, 90, 160),
    ('Mango Pickle', Category.CONDIMENTS, 100, 220),
    ('Masala Chips', Category.SNACKS, 10, 50),
    ('Roasted Peanuts', Category.SNACKS, 40, 90),
    ('Aloe Vera Gel', Category.SKINCARE, 120, 250),
    ('Sunscreen SPF 50', Category.SKINCARE, 250, 500),
]


def profile(role):
    """Registration payload for one fake account."""
    return {
        'first_name': fake.first_name(),
        'last_name': fake.last_name(),
        'email': fake.unique.email(),
        'password': SEED_PASSWORD,
        'phone_number': fake.numerify('9#########'),
        'district': fake.city()[:50],
        'state': fake.state()[:50],
        'address': fake.street_address()[:200].ljust(10, '.'),
        'zipcode': fake.postcode()[:10],
        'gender': random.choice(Gender.values),
        'date_of_birth': fake.date_of_birth(minimum_age=18, maximum_age=75),
        'role': role,
    }


def generate_users(vendor_count=8, shopper_count=40):
    """Generate vendor and shopper accounts."""
    print(f"Generating {vendor_count} vendors and {shopper_count} shoppers...")
    service = UserService()

    vendors = [service.register(profile(Role.VENDOR)) for _ in range(vendor_count)]
    shoppers = [service.register(profile(Role.USER)) for _ in range(shopper_count)]

    # A few deactivated shoppers
    for shopper in random.sample(shoppers, k=max(1, shopper_count // 10)):
        service.toggle_active(shopper.id)

    print(f"Created {len(vendors)} vendors and {len(shoppers)} shoppers")
    return vendors, shoppers


def generate_items(vendors, count=120):
    """Generate catalog items listed by the vendors."""
    print(f"Generating {count} items...")
    service = ItemService()
    items = []

    for _ in range(count):
        name, category, low, high = random.choice(ITEM_TEMPLATES)
        data = {
            'name': f"{name} {fake.word().title()}"[:50],
            'image': f"https://cdn.groceteria.example/{fake.uuid4()}.jpg",
            'description': fake.sentence(nb_words=10)[:255],
            'mrp_price': Decimal(str(round(random.uniform(low, high), 2))),
            # About one in eight items starts out of stock
            'quantity': random.choice([0] + [random.randint(5, 500)] * 7),
            'category': category,
        }
        items.append(service.add(data, random.choice(vendors).id))

    print(f"Created {len(items)} items")
    return items


def generate_cart_lines(shoppers, items, per_shopper=4):
    """Fill shopper carts. Repeated picks merge into the existing line."""
    print("Generating cart lines...")
    service = CartService()

    for shopper in shoppers:
        if not shopper.is_active:
            continue
        for item in random.choices(items, k=random.randint(1, per_shopper)):
            service.add_to_cart(shopper.id, item.id, random.randint(1, 5))

    lines = CartLine.objects.count()
    print(f"Created {lines} cart lines")
    return lines


def generate_orders(shoppers, items, count=80):
    """Generate orders for random shoppers."""
    print(f"Generating {count} orders...")
    service = OrderService()
    orders = []

    for _ in range(count):
        shopper = random.choice(shoppers)
        basket = random.sample(items, k=random.randint(1, 5))
        total = sum((item.mrp_price * random.randint(1, 3) for item in basket), Decimal('0'))
        orders.append(service.create({'total_price': total, 'item_ids': [i.id for i in basket]}, shopper.id))

    # Move some of the orders along
    for order in random.sample(orders, k=count // 5):
        service.update_status(order.id, random.choice(['SHIPPED', 'DELIVERED', 'CANCELLED']))

    print(f"Created {len(orders)} orders")
    return orders


def generate_payments(orders, ratio=0.6):
    """Pay for a share of the orders."""
    print("Generating payments...")
    delay = settings.PAYMENT_GATEWAY.get('OPTIONS', {}).get('delay_seconds', 0)
    service = PaymentService(gateway=SimulatedPaymentGateway(delay_seconds=min(delay, 0.01)))
    payments = []

    for order in random.sample(orders, k=int(len(orders) * ratio)):
        payments.append(service.record_payment(order.id, order.user_id))

    print(f"Created {len(payments)} payments")
    return payments


def clear_all_data():
    """Clear all existing data."""
    print("Clearing existing data...")

    Payment.objects.all().delete()
    Order.objects.all().delete()
    CartLine.objects.all().delete()
    Item.objects.all().delete()
    User.objects.all().delete()

    print("All data cleared")


def main():
    """Main function to generate all data."""
    print("\n" + "=" * 60)
    print("Groceteria Synthetic Data Generator")
    print("=" * 60 + "\n")

    # Clear existing data
    clear_all_data()

    # Generate data in order of dependencies
    vendors, shoppers = generate_users()
    items = generate_items(vendors)
    cart_lines = generate_cart_lines(shoppers, items)
    orders = generate_orders(shoppers, items)
    payments = generate_payments(orders)

    print("\n" + "=" * 60)
    print("Data Generation Complete!")
    print("=" * 60)
    print("\nSummary:")
    print(f"  - Vendors: {len(vendors)}")
    print(f"  - Shoppers: {len(shoppers)}")
    print(f"  - Items: {len(items)}")
    print(f"  - Cart lines: {cart_lines}")
    print(f"  - Orders: {len(orders)}")
    print(f"  - Payments: {len(payments)}")
    print(f"\nEvery seeded account uses the password {SEED_PASSWORD}")
    print()


if __name__ == '__main__':
    main()
