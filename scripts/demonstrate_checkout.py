"""
Demonstration Script - Checkout Walkthrough

Lists a Tomato under a fresh vendor, adds it to a fresh shopper's cart twice,
places an order and pays for it, printing the state after every step.

Run: python scripts/demonstrate_checkout.py
"""
import os
import sys
import uuid
from decimal import Decimal

import django

# Setup Django
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')
django.setup()

from apps.cart.services import CartService
from apps.catalog.models import Category
from apps.catalog.services import ItemService
from apps.orders.services import OrderService
from apps.payments.services import PaymentService
from apps.users.models import Role
from apps.users.services import UserService


def print_header(text):
    print("\n" + "=" * 80)
    print(f"  {text}")
    print("=" * 80)


def print_step(step_num, action):
    print(f"\n  Step {step_num}: {action}")


def print_result(data, indent=4):
    prefix = " " * indent
    for key, value in data.items():
        print(f"{prefix}- {key}: {value}")


def register(role, first_name):
    tag = uuid.uuid4().hex[:8]
    return UserService().register({
        'first_name': first_name,
        'last_name': "Demo",
        'email': f"{first_name.lower()}.{tag}@groceteria.example",
        'password': "Demo@12345",
        'phone_number': "9876543210",
        'district': "Pune",
        'state': "Maharashtra",
        'address': "1 Demo Street, Camp",
        'zipcode': "411001",
        'role': role,
    })


def main():
    print_header("GROCETERIA CHECKOUT WALKTHROUGH")

    print_step(1, "Register a vendor and a shopper")
    vendor = register(Role.VENDOR, "Vendor")
    shopper = register(Role.USER, "Shopper")
    print_result({'vendor': f"{vendor.id} ({vendor.email})", 'shopper': f"{shopper.id} ({shopper.email})"})

    print_step(2, "Vendor lists Tomato at 30.00 with 100 in stock")
    item = ItemService().add({
        'name': "Tomato",
        'description': "Farm fresh tomatoes",
        'mrp_price': Decimal('30.00'),
        'quantity': 100,
        'category': Category.VEGETABLES,
    }, vendor.id)
    print_result({'itemId': item.id, 'price': item.mrp_price, 'stock': item.quantity})

    cart = CartService()
    print_step(3, "Shopper adds 2 tomatoes to the cart")
    line = cart.add_to_cart(shopper.id, item.id, 2)
    print_result({'cartId': line.id, 'quantity': line.quantity, 'price': line.mrp_price})

    print_step(4, "Shopper adds 3 more; the existing line is merged")
    line = cart.add_to_cart(shopper.id, item.id, 3)
    print_result({
        'cartId': line.id,
        'quantity': line.quantity,
        'price': line.mrp_price,
        'lines in cart': cart.count_lines(shopper.id),
    })

    print_step(5, "Shopper places an order for the cart total")
    orders = OrderService()
    order = orders.create({'total_price': line.quantity * line.mrp_price, 'item_ids': [item.id]}, shopper.id)
    print_result({'orderId': order.id, 'total': order.total_price, 'status': f"{order.order_status}/{order.payment_status}"})

    print_step(6, "Shopper pays for the order")
    payment = PaymentService().record_payment(order.id, shopper.id)
    order = orders.get_order(order.id)
    print_result({
        'paymentId': payment.id,
        'paid': payment.paid_amount,
        'paidDate': payment.paid_date,
        'order status': f"{order.order_status}/{order.payment_status}",
    })

    print_header("DONE")


if __name__ == '__main__':
    main()
