"""
API URL Configuration

Mounted under /api/v1/. Routes carry no trailing slash.
"""
from django.urls import path
from .views import (
    ActiveUserListView,
    AvailableItemsPagedView,
    AvailableItemsView,
    CartDetailView,
    CartListCreateView,
    CartQuantityView,
    CheckEmailView,
    HealthCheckView,
    ItemDetailView,
    ItemListCreateView,
    ItemPagedView,
    ItemQuantityView,
    ItemsByCategoryAndPriceRangeView,
    ItemsByCategoryPagedView,
    ItemsByCategoryView,
    ItemsByPriceRangeView,
    ItemsByPriceView,
    ItemsByVendorPagedView,
    ItemsByVendorView,
    ItemSearchView,
    OrderDetailView,
    OrderListCreateView,
    OrderPaymentStatusView,
    OrdersByMinPriceView,
    OrdersByPaymentStatusView,
    OrdersByStatusView,
    OrdersByUserAndStatusView,
    OrdersByUserView,
    OrderStatusView,
    PaymentByOrderView,
    PaymentDetailView,
    PaymentListCreateView,
    PaymentsByAmountGreaterThanView,
    PaymentsByAmountRangeView,
    PaymentsByUserView,
    ProcessPaymentView,
    RegularUserListView,
    UserCartCountView,
    UserCartView,
    UserDetailView,
    UserForgotPasswordView,
    UserListView,
    UserLoginView,
    UserRegisterView,
    UsersByDistrictView,
    UserToggleStatusView,
    VendorListView,
)

app_name = 'api'

urlpatterns = [
    # Users
    path('users', UserListView.as_view(), name='user-list'),
    path('users/register', UserRegisterView.as_view(), name='user-register'),
    path('users/login', UserLoginView.as_view(), name='user-login'),
    path('users/forgot-password', UserForgotPasswordView.as_view(), name='user-forgot-password'),
    path('users/vendors', VendorListView.as_view(), name='user-vendors'),
    path('users/regular-users', RegularUserListView.as_view(), name='user-regular'),
    path('users/active', ActiveUserListView.as_view(), name='user-active'),
    path('users/district/<str:district>', UsersByDistrictView.as_view(), name='user-district'),
    path('users/check-email/<str:email>', CheckEmailView.as_view(), name='user-check-email'),
    path('users/<int:user_id>', UserDetailView.as_view(), name='user-detail'),
    path('users/<int:user_id>/toggle-status', UserToggleStatusView.as_view(), name='user-toggle-status'),

    # Items
    path('items', ItemListCreateView.as_view(), name='item-list'),
    path('items/paged', ItemPagedView.as_view(), name='item-paged'),
    path('items/search', ItemSearchView.as_view(), name='item-search'),
    path('items/available', AvailableItemsView.as_view(), name='item-available'),
    path('items/available/paged', AvailableItemsPagedView.as_view(), name='item-available-paged'),
    path('items/price-range', ItemsByPriceRangeView.as_view(), name='item-price-range'),
    path('items/price/<str:mrp_price>', ItemsByPriceView.as_view(), name='item-price'),
    path('items/category/<str:category>', ItemsByCategoryView.as_view(), name='item-category'),
    path('items/category/<str:category>/paged', ItemsByCategoryPagedView.as_view(), name='item-category-paged'),
    path(
        'items/category/<str:category>/price-range',
        ItemsByCategoryAndPriceRangeView.as_view(),
        name='item-category-price-range'
    ),
    path('items/vendor/<int:vendor_id>', ItemsByVendorView.as_view(), name='item-vendor'),
    path('items/vendor/<int:vendor_id>/paged', ItemsByVendorPagedView.as_view(), name='item-vendor-paged'),
    path('items/<int:item_id>', ItemDetailView.as_view(), name='item-detail'),
    path('items/<int:item_id>/quantity', ItemQuantityView.as_view(), name='item-quantity'),

    # Cart
    path('cart', CartListCreateView.as_view(), name='cart-list'),
    path('cart/user/<int:user_id>', UserCartView.as_view(), name='cart-user'),
    path('cart/user/<int:user_id>/count', UserCartCountView.as_view(), name='cart-user-count'),
    path('cart/<int:cart_id>', CartDetailView.as_view(), name='cart-detail'),
    path('cart/<int:cart_id>/quantity', CartQuantityView.as_view(), name='cart-quantity'),

    # Orders
    path('orders', OrderListCreateView.as_view(), name='order-list'),
    path('orders/price-greater-than', OrdersByMinPriceView.as_view(), name='order-price-greater-than'),
    path('orders/status/<str:order_status>', OrdersByStatusView.as_view(), name='order-status-list'),
    path(
        'orders/payment-status/<str:payment_status>',
        OrdersByPaymentStatusView.as_view(),
        name='order-payment-status-list'
    ),
    path('orders/user/<int:user_id>', OrdersByUserView.as_view(), name='order-user'),
    path(
        'orders/user/<int:user_id>/status/<str:order_status>',
        OrdersByUserAndStatusView.as_view(),
        name='order-user-status'
    ),
    path('orders/<int:order_id>', OrderDetailView.as_view(), name='order-detail'),
    path('orders/<int:order_id>/status', OrderStatusView.as_view(), name='order-status'),
    path('orders/<int:order_id>/payment-status', OrderPaymentStatusView.as_view(), name='order-payment-status'),

    # Payments
    path('payments', PaymentListCreateView.as_view(), name='payment-list'),
    path('payments/process', ProcessPaymentView.as_view(), name='payment-process'),
    path('payments/amount-range', PaymentsByAmountRangeView.as_view(), name='payment-amount-range'),
    path(
        'payments/amount-greater-than',
        PaymentsByAmountGreaterThanView.as_view(),
        name='payment-amount-greater-than'
    ),
    path('payments/user/<int:user_id>', PaymentsByUserView.as_view(), name='payment-user'),
    path('payments/order/<int:order_id>', PaymentByOrderView.as_view(), name='payment-order'),
    path('payments/<int:payment_id>', PaymentDetailView.as_view(), name='payment-detail'),

    # Health check
    path('health', HealthCheckView.as_view(), name='health'),
]
