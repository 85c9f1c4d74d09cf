from django.core.exceptions import RequestDataTooBig
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
import json
import logging

from core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name='dispatch')
class ChatView(View):
    """ Relays a single chat message to the AI client """
    http_method_names = ['post']
    client = None

    def post(self, request):
        try:
            data = json.loads(request.body)
        except RequestDataTooBig:
            return JsonResponse({"error": "Het bericht is te groot."}, status=400)
        except (UnicodeDecodeError, ValueError, RecursionError):
            return JsonResponse({"error": "Ongeldige JSON."}, status=400)

        if not isinstance(data, dict) or not isinstance(data.get('message', ''), str):
            return JsonResponse({"error": "Het veld 'message' moet tekst zijn."}, status=400)

        user_message = data.get('message', '').strip()
        if not user_message:
            return JsonResponse({"error": "Het bericht is leeg."}, status=400)

        try:
            reply = self.client.send(user_message)
        except UpstreamError as e:
            logger.error(f"Chat relay error: {e.code}")
            return JsonResponse(e.to_dict(), status=e.status_code)

        return JsonResponse({"reply": reply})
