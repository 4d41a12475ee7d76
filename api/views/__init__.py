"""
API Views for the Groceteria backend
"""
from .cart import CartDetailView, CartListCreateView, CartQuantityView, UserCartCountView, UserCartView
from .health import HealthCheckView
from .items import (
    AvailableItemsPagedView,
    AvailableItemsView,
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
)
from .orders import (
    OrderDetailView,
    OrderListCreateView,
    OrderPaymentStatusView,
    OrdersByMinPriceView,
    OrdersByPaymentStatusView,
    OrdersByStatusView,
    OrdersByUserAndStatusView,
    OrdersByUserView,
    OrderStatusView,
)
from .payments import (
    PaymentByOrderView,
    PaymentDetailView,
    PaymentListCreateView,
    PaymentsByAmountGreaterThanView,
    PaymentsByAmountRangeView,
    PaymentsByUserView,
    ProcessPaymentView,
)
from .users import (
    ActiveUserListView,
    CheckEmailView,
    RegularUserListView,
    UserDetailView,
    UserForgotPasswordView,
    UserListView,
    UserLoginView,
    UserRegisterView,
    UsersByDistrictView,
    UserToggleStatusView,
    VendorListView,
)
