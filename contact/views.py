# contact/views.py
from django.core.exceptions import RequestDataTooBig
from django.http import JsonResponse
from django.shortcuts import render
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
import logging

from core.exceptions import MalformedInput, StorageFailure, SubmissionError
from .validation import parse_payload, validate_payload

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Bericht succesvol verzonden!"


@method_decorator(csrf_exempt, name='dispatch')
class ContactView(View):
    """
    Renders the contact page and accepts JSON form submissions.

    The store is injected through as_view(store=...).
    """
    http_method_names = ['get', 'post']
    store = None

    def get(self, request):
        context = {
            'title': "Contact",
            'description': "Neem contact op met ICT Eerbeek voor al uw vragen over netwerk & security, "
                           "website ontwerp, IoT & AI oplossingen, en computerhulp.",
            'page': 'contact',
        }
        return render(request, 'core/contact.html', context)

    def post(self, request):
        try:
            body = request.body
        except RequestDataTooBig:
            e = MalformedInput("De aanvraag is te groot.")
            logger.info(f"Rejected contact submission: {e.code} (body too large)")
            return JsonResponse(e.to_dict(), status=e.status_code)

        try:
            payload = parse_payload(body)
            submission = validate_payload(payload)
        except SubmissionError as e:
            logger.info(f"Rejected contact submission: {e.code} ({e.message})")
            return JsonResponse(e.to_dict(), status=e.status_code)

        try:
            submission = self.store.insert(submission)
        except StorageFailure as e:
            return JsonResponse(e.to_dict(), status=e.status_code)

        return JsonResponse({'success': True, 'message': SUCCESS_MESSAGE, 'id': submission.pk})
