# core/models.py
from django.db import models
from django.utils import timezone

from .exceptions import ImmutableSubmission


# Base for records that are written once and never changed afterwards.
# created_at is assigned by the caller at acceptance time; the default only
# covers rows created outside the normal intake path.
class WriteOnceModel(models.Model):
    """
    An abstract base class for append-only tables. Saving an already stored
    row or deleting one raises ImmutableSubmission.
    """
    created_at = models.DateTimeField(default=timezone.now, editable=False, db_index=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ImmutableSubmission(f"{self.__class__.__name__} {self.pk} is write-once")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ImmutableSubmission(f"{self.__class__.__name__} {self.pk} cannot be deleted")
