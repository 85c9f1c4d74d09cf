# contact/validation.py
"""
Parse-then-validate boundary for contact form submissions.

parse_payload() only checks the shape of the request body and produces a
typed ContactPayload. validate_payload() applies the business rules and
returns an unsaved ContactSubmission that is ready for the store.
"""
import json
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.utils import timezone

from core.exceptions import ConsentRequired, InvalidField, MalformedInput, MissingField
from .models import DEFAULT_URGENCY, SUBJECT_CHOICES, URGENCY_CHOICES, ContactSubmission


STRING_KEYS = ('naam', 'bedrijf', 'email', 'telefoon', 'onderwerp', 'urgentie', 'bericht')
BOOL_KEYS = ('privacy', 'nieuwsbrief')
REQUIRED_KEYS = ('naam', 'email', 'onderwerp', 'bericht')

# Wire key -> model field
FIELD_MAP = {
    'naam': 'name',
    'bedrijf': 'company',
    'email': 'email',
    'telefoon': 'phone',
    'onderwerp': 'subject',
    'urgentie': 'urgency',
    'bericht': 'message',
}

# Dutch form values accepted next to the canonical slugs
SUBJECT_ALIASES = {
    'netwerk-security': 'network-security',
    'website-ontwerp': 'website-design',
    'computerhulp': 'computer-help',
    'offerte': 'quote-request',
    'ondersteuning': 'support',
    'anders': 'other',
}

URGENCY_ALIASES = {
    'laag': 'low',
    'normaal': 'normal',
    'hoog': 'high',
    'spoed': 'urgent',
}


@dataclass(frozen=True)
class ContactPayload:
    """A decoded contact form body. Strings are trimmed, absent values empty."""
    naam: str = ''
    bedrijf: str = ''
    email: str = ''
    telefoon: str = ''
    onderwerp: str = ''
    urgentie: str = ''
    bericht: str = ''
    privacy: bool = False
    nieuwsbrief: bool = False


def parse_payload(body) -> ContactPayload:
    """
    Decode a raw request body into a ContactPayload.

    Raises MalformedInput when the body is not a JSON object or a known key
    has the wrong type. Unknown keys, including client-supplied ids and
    timestamps, are ignored.
    """
    if isinstance(body, (bytes, bytearray)):
        try:
            body = body.decode('utf-8')
        except UnicodeDecodeError:
            raise MalformedInput("De aanvraag is geen geldige UTF-8 tekst.")

    try:
        data = json.loads(body)
    except (TypeError, ValueError, RecursionError):
        raise MalformedInput("De aanvraag bevat geen geldige JSON.")

    if not isinstance(data, dict):
        raise MalformedInput("De aanvraag moet een JSON-object zijn.")

    values = {}
    for key in STRING_KEYS:
        value = data.get(key)
        if value is None:
            values[key] = ''
        elif isinstance(value, str):
            values[key] = value.strip()
        else:
            raise MalformedInput(f"Het veld '{key}' moet tekst zijn.")

    for key in BOOL_KEYS:
        value = data.get(key)
        if value is None:
            values[key] = False
        elif isinstance(value, bool):
            values[key] = value
        else:
            raise MalformedInput(f"Het veld '{key}' moet true of false zijn.")

    return ContactPayload(**values)


def _resolve_choice(key, value, choices, aliases):
    slug = value.lower()
    slug = aliases.get(slug, slug)
    if slug not in dict(choices):
        raise InvalidField(key, f"Onbekende waarde voor '{key}': {value}")
    return slug


def _check_length(key, value):
    field = ContactSubmission._meta.get_field(FIELD_MAP[key])
    if field.max_length and len(value) > field.max_length:
        raise InvalidField(key, f"Het veld '{key}' mag maximaal {field.max_length} tekens bevatten.")


def validate_payload(payload: ContactPayload, now: Optional[datetime] = None) -> ContactSubmission:
    """
    Apply the acceptance rules to a parsed payload.

    Returns an unsaved ContactSubmission with created_at set to the acceptance
    time. Raises ConsentRequired, MissingField or InvalidField, in that order
    of precedence.
    """
    if payload.privacy is not True:
        raise ConsentRequired()

    for key in REQUIRED_KEYS:
        if not getattr(payload, key):
            raise MissingField(key)

    try:
        validate_email(payload.email)
    except ValidationError:
        raise InvalidField('email', "Voer een geldig e-mailadres in.")

    subject = _resolve_choice('onderwerp', payload.onderwerp, SUBJECT_CHOICES, SUBJECT_ALIASES)
    if payload.urgentie:
        urgency = _resolve_choice('urgentie', payload.urgentie, URGENCY_CHOICES, URGENCY_ALIASES)
    else:
        urgency = DEFAULT_URGENCY

    for key in ('naam', 'bedrijf', 'email', 'telefoon'):
        _check_length(key, getattr(payload, key))

    return ContactSubmission(
        name=payload.naam,
        company=payload.bedrijf,
        email=payload.email,
        phone=payload.telefoon,
        subject=subject,
        urgency=urgency,
        message=payload.bericht,
        privacy_consent=True,
        newsletter_opt_in=payload.nieuwsbrief,
        created_at=now or timezone.now(),
    )
