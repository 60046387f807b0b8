from typing import Generic, Optional, Type, TypeVar

from django.db import models

T = TypeVar("T", bound=models.Model)


class GenericRepository(Generic[T]):
    """Thin ORM access layer shared by the app repositories."""

    def __init__(self, model: Type[T]):
        self.model = model

    def _base_queryset(self) -> models.QuerySet:
        return self.model.objects.all()

    def get(self, **filters) -> Optional[T]:
        return self._base_queryset().filter(**filters).first()

    def create(self, **data) -> T:
        return self.model.objects.create(**data)

    def delete(self, obj: T) -> None:
        obj.delete()
