# contact/models.py
from django.db import models
from core.models import WriteOnceModel

SUBJECT_CHOICES = (
    ('network-security', 'Netwerk & Security'),
    ('website-design', 'Website & Logo Ontwerp'),
    ('iot-ai', 'IoT & AI Oplossingen'),
    ('computer-help', 'All-round Computerhulp'),
    ('quote-request', 'Offerte aanvragen'),
    ('support', 'Ondersteuning'),
    ('other', 'Anders'),
)

URGENCY_CHOICES = (
    ('low', 'Laag'),
    ('normal', 'Normaal'),
    ('high', 'Hoog'),
    ('urgent', 'Spoed'),
)

DEFAULT_URGENCY = 'normal'


class ContactSubmission(WriteOnceModel):
    """Model to store contact form submissions."""
    name = models.CharField(max_length=100)
    company = models.CharField(max_length=200, blank=True, default='')
    email = models.EmailField(max_length=254)
    phone = models.CharField(max_length=50, blank=True, default='')
    subject = models.CharField(max_length=32, choices=SUBJECT_CHOICES)
    urgency = models.CharField(max_length=16, choices=URGENCY_CHOICES, default=DEFAULT_URGENCY)
    message = models.TextField()
    privacy_consent = models.BooleanField()
    newsletter_opt_in = models.BooleanField(default=False)

    class Meta:
        db_table = 'contact_submissions'
        ordering = ['id']
        verbose_name = "Contact Submission"
        verbose_name_plural = "Contact Submissions"

    def __str__(self):
        return f"Contact from {self.name} ({self.email})"
