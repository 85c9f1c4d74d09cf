# contact/store.py
import logging

from django.core.management import CommandError, call_command
from django.db import DatabaseError, connections, transaction
from django.db.migrations.exceptions import InconsistentMigrationHistory

from core.exceptions import StorageFailure
from .models import ContactSubmission

logger = logging.getLogger(__name__)


class ContactStore:
    """
    Append-only storage for validated contact submissions.

    One instance is built per process by ContactConfig.ready() and handed to
    the views. Every insert commits before it returns.
    """

    def __init__(self, using='default'):
        self.using = using

    def ensure_schema(self):
        """Create or migrate the submissions table. Safe to call repeatedly."""
        try:
            call_command('migrate', 'contact', database=self.using, interactive=False, verbosity=0)
        except (DatabaseError, CommandError, InconsistentMigrationHistory) as e:
            logger.error(f"Failed to prepare contact submission schema: {e}", exc_info=True)
            raise StorageFailure(f"Database schema could not be prepared: {e}")
        logger.info(f"Contact submission schema ready on database '{self.using}'")

    def insert(self, submission: ContactSubmission) -> ContactSubmission:
        """Persist a validated submission and return it with its new id."""
        if submission.pk is not None:
            raise StorageFailure("Submission has already been stored.")

        try:
            with transaction.atomic(using=self.using):
                submission.save(using=self.using, force_insert=True)
        except DatabaseError as e:
            submission.pk = None
            logger.error(f"Failed to store contact submission: {e}", exc_info=True)
            raise StorageFailure()

        logger.info(f"Stored contact submission {submission.pk} (subject={submission.subject}, urgency={submission.urgency})")
        return submission

    def count(self) -> int:
        try:
            return ContactSubmission.objects.using(self.using).count()
        except DatabaseError as e:
            logger.error(f"Failed to count contact submissions: {e}")
            raise StorageFailure()

    def close(self):
        connections[self.using].close()
