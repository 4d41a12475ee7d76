"""
Utility functions shared by the Groceteria domain services
"""
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from django.db import models

from apps.core.exceptions import BadRequestException, ResourceNotFoundException

logger = logging.getLogger(__name__)


@dataclass
class PagedResult:
    """One page of results plus the total match count across all pages."""
    items: List[Any] = field(default_factory=list)
    total_items: int = 0
    page_no: int = 0
    page_size: int = 10


def paginate(queryset: models.QuerySet, page_no: int, page_size: int) -> PagedResult:
    """
    Slice a queryset into a 0-based page.

    A page past the end is empty but still reports the full total.
    """
    if page_no is None or page_no < 0:
        raise BadRequestException(f"Page number must not be negative, got {page_no}")
    if page_size is None or page_size < 1:
        raise BadRequestException(f"Page size must be at least 1, got {page_size}")

    if not queryset.ordered:
        queryset = queryset.order_by('pk')

    total = queryset.count()
    offset = page_no * page_size
    items = list(queryset[offset:offset + page_size]) if offset < total else []

    return PagedResult(items=items, total_items=total, page_no=page_no, page_size=page_size)


def get_or_not_found(
    model_or_queryset,
    resource_name: str,
    field_name: str = "Id",
    field_value: Any = None,
    **lookup
):
    """
    Fetch exactly one row or raise ResourceNotFoundException.

    ``lookup`` defaults to ``pk=field_value`` when not given.
    """
    if isinstance(model_or_queryset, models.QuerySet):
        queryset = model_or_queryset
    else:
        queryset = model_or_queryset._default_manager.all()

    if not lookup:
        lookup = {'pk': field_value}

    obj = queryset.filter(**lookup).first()
    if obj is None:
        logger.debug(f"{resource_name} lookup miss: {field_name}={field_value}")
        raise ResourceNotFoundException(resource_name, field_name, field_value)
    return obj


def truncate_for_display(text: Optional[str], max_length: int = 100) -> str:
    """
    Truncate text for log lines.
    """
    if text is None:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."
