"""
Abstract base models for Groceteria applications
"""
from django.db import models


class BaseModel(models.Model):
    """
    Abstract base model with a database-generated numeric id.
    """
    id = models.BigAutoField(primary_key=True)

    class Meta:
        abstract = True
        ordering = ['id']

    def __str__(self):
        return str(self.id)


class TimestampedModel(BaseModel):
    """
    Abstract model with creation and last-update timestamps.
    """
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta(BaseModel.Meta):
        abstract = True
