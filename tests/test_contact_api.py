"""
End-to-end tests for the contact form endpoint.
"""

import json
import threading
from concurrent.futures import ThreadPoolExecutor
from unittest import mock

import pytest
from django.db import OperationalError, connection
from django.test import Client, RequestFactory
from django.utils import timezone

from contact.models import ContactSubmission
from contact.views import SUCCESS_MESSAGE, ContactView
from core.exceptions import StorageFailure

JAN = {
    "naam": "Jan Jansen",
    "email": "jan@example.com",
    "onderwerp": "offerte",
    "bericht": "Ik heb een vraag",
    "privacy": True,
}


def _post(client, data, raw=None):
    body = raw if raw is not None else json.dumps(data)
    return client.post("/contact", data=body, content_type="application/json")


@pytest.mark.django_db
def test_valid_submission_is_stored_with_defaults(client):
    before = timezone.now()
    response = _post(client, JAN)
    after = timezone.now()

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == SUCCESS_MESSAGE

    assert ContactSubmission.objects.count() == 1
    row = ContactSubmission.objects.get()
    assert body["id"] == row.pk
    assert row.urgency == "normal"
    assert row.company == ""
    assert row.phone == ""
    assert row.subject == "quote-request"
    assert row.newsletter_opt_in is False
    assert before <= row.created_at <= after


@pytest.mark.django_db
def test_client_supplied_timestamp_and_id_are_ignored(client):
    response = _post(client, dict(JAN, id=12345, created_at="2000-01-01T00:00:00Z"))
    assert response.status_code == 200
    row = ContactSubmission.objects.get()
    assert row.pk != 12345
    assert row.created_at.year != 2000


@pytest.mark.django_db
def test_submission_without_consent_is_rejected(client):
    response = _post(client, dict(JAN, privacy=False))
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "consent_required"
    assert body["error"]
    assert ContactSubmission.objects.count() == 0


@pytest.mark.django_db
def test_submission_with_absent_consent_is_rejected_even_when_fields_are_missing(client):
    response = _post(client, {"naam": "Jan"})
    assert response.status_code == 400
    assert response.json()["code"] == "consent_required"
    assert ContactSubmission.objects.count() == 0


@pytest.mark.django_db
def test_submission_missing_message_names_the_field(client):
    data = dict(JAN)
    del data["bericht"]
    response = _post(client, data)
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "missing_field"
    assert body["field"] == "bericht"
    assert "bericht" in body["error"]
    assert ContactSubmission.objects.count() == 0


@pytest.mark.django_db
@pytest.mark.parametrize("key", ["naam", "email", "onderwerp", "bericht"])
def test_blank_required_field_is_rejected(client, key):
    response = _post(client, dict(JAN, **{key: "   "}))
    assert response.status_code == 400
    assert response.json()["field"] == key
    assert ContactSubmission.objects.count() == 0


@pytest.mark.django_db
def test_malformed_body_is_rejected(client):
    response = _post(client, None, raw="{not json")
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "malformed_input"
    assert ContactSubmission.objects.count() == 0


@pytest.mark.django_db
def test_deeply_nested_body_is_rejected_as_malformed(client):
    response = _post(client, None, raw="[" * 200000)
    assert response.status_code == 400
    assert response["Content-Type"] == "application/json"
    assert response.json()["code"] == "malformed_input"
    assert ContactSubmission.objects.count() == 0


@pytest.mark.django_db
def test_oversized_body_is_rejected_as_malformed(client, settings):
    settings.DATA_UPLOAD_MAX_MEMORY_SIZE = 1024
    response = _post(client, dict(JAN, bericht="x" * 4096))
    assert response.status_code == 400
    assert response["Content-Type"] == "application/json"
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "malformed_input"
    assert ContactSubmission.objects.count() == 0


@pytest.mark.django_db
def test_wrongly_typed_field_is_malformed_not_missing(client):
    response = _post(client, dict(JAN, bericht=["Ik heb een vraag"]))
    assert response.status_code == 400
    assert response.json()["code"] == "malformed_input"


@pytest.mark.django_db
def test_unknown_subject_is_rejected(client):
    response = _post(client, dict(JAN, onderwerp="pizza"))
    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "invalid_field"
    assert body["field"] == "onderwerp"
    assert ContactSubmission.objects.count() == 0


@pytest.mark.django_db
def test_optional_fields_are_stored(client):
    response = _post(client, dict(JAN, bedrijf="Jansen BV", telefoon="0313-123456",
                                  urgentie="hoog", nieuwsbrief=True))
    assert response.status_code == 200
    row = ContactSubmission.objects.get()
    assert row.company == "Jansen BV"
    assert row.phone == "0313-123456"
    assert row.urgency == "high"
    assert row.newsletter_opt_in is True


@pytest.mark.django_db
def test_two_submissions_receive_distinct_ids(client):
    first = _post(client, JAN).json()["id"]
    second = _post(client, JAN).json()["id"]
    assert first != second
    assert ContactSubmission.objects.count() == 2


@pytest.mark.django_db(transaction=True)
def test_concurrent_submissions_receive_distinct_ids():
    workers = 8
    barrier = threading.Barrier(workers)

    def submit(_):
        try:
            barrier.wait()
            return _post(Client(), JAN)
        finally:
            connection.close()

    with ThreadPoolExecutor(max_workers=workers) as pool:
        responses = list(pool.map(submit, range(workers)))

    assert [r.status_code for r in responses] == [200] * workers
    ids = {r.json()["id"] for r in responses}
    assert len(ids) == workers
    assert ContactSubmission.objects.count() == workers


@pytest.mark.django_db
def test_storage_outage_returns_server_error(client):
    with mock.patch.object(ContactSubmission, "save", side_effect=OperationalError("database is locked")):
        response = _post(client, JAN)
    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "storage_failure"
    assert body["error"]
    assert ContactSubmission.objects.count() == 0


@pytest.mark.django_db
def test_injected_store_is_used_by_the_view():
    store = mock.Mock()
    store.insert.side_effect = StorageFailure()
    view = ContactView.as_view(store=store)
    request = RequestFactory().post("/contact", data=json.dumps(JAN), content_type="application/json")

    response = view(request)

    assert response.status_code == 500
    store.insert.assert_called_once()
    submission = store.insert.call_args[0][0]
    assert submission.name == "Jan Jansen"
    assert ContactSubmission.objects.count() == 0


def test_rejected_submission_never_reaches_the_store():
    store = mock.Mock()
    view = ContactView.as_view(store=store)
    request = RequestFactory().post("/contact", data=json.dumps(dict(JAN, privacy=False)),
                                    content_type="application/json")
    response = view(request)
    assert response.status_code == 400
    store.insert.assert_not_called()


@pytest.mark.django_db
def test_contact_post_does_not_require_csrf_token():
    client = Client(enforce_csrf_checks=True)
    response = _post(client, JAN)
    assert response.status_code == 200


def test_contact_page_renders_form(client):
    response = client.get("/contact")
    assert response.status_code == 200
    assert b"contact-form" in response.content
    assert response.context["page"] == "contact"


def test_other_methods_are_not_allowed(client):
    assert client.put("/contact", data="{}", content_type="application/json").status_code == 405
