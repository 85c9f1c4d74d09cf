# core/exceptions.py
# A base class for all custom service-related exceptions.
# Views translate these into JSON responses with to_dict().
class ServiceError(Exception):
    """Base class for service-related errors."""
    code = "service_error"
    status_code = 500

    def __init__(self, message=None):
        self.message = message or self.default_message()
        super().__init__(self.message)

    def default_message(self):
        return "Er is een onverwachte fout opgetreden."

    def to_dict(self):
        return {"success": False, "error": self.message, "code": self.code}


# Contact submissions
class SubmissionError(ServiceError):
    """A contact submission was rejected before reaching the store."""
    code = "invalid_submission"
    status_code = 400


class MalformedInput(SubmissionError):
    """Raised when the request body cannot be decoded into a contact payload."""
    code = "malformed_input"

    def default_message(self):
        return "Ongeldige aanvraag."


class MissingField(SubmissionError):
    """Raised when a required field is empty."""
    code = "missing_field"

    def __init__(self, field, message=None):
        self.field = field
        super().__init__(message or f"Het veld '{field}' is verplicht.")

    def to_dict(self):
        data = super().to_dict()
        data["field"] = self.field
        return data


class InvalidField(SubmissionError):
    """Raised when a field is present but holds an unacceptable value."""
    code = "invalid_field"

    def __init__(self, field, reason=None):
        self.field = field
        super().__init__(reason or f"Het veld '{field}' heeft een ongeldige waarde.")

    def to_dict(self):
        data = super().to_dict()
        data["field"] = self.field
        return data


class ConsentRequired(SubmissionError):
    """Raised when the privacy policy was not accepted."""
    code = "consent_required"

    def default_message(self):
        return "U moet akkoord gaan met het privacybeleid."


class StorageFailure(ServiceError):
    """Raised when a submission could not be written to the database."""
    code = "storage_failure"

    def default_message(self):
        return "Uw bericht kon niet worden opgeslagen. Probeer het later opnieuw."


class ImmutableSubmission(ServiceError):
    """Raised on an attempt to update or delete a stored submission."""
    code = "immutable_submission"


# API integrations are a common point of failure, so they get their own branch.
class APIIntegrationError(ServiceError):
    """Raised when there is an issue with a third-party API integration."""
    code = "api_integration_error"
    status_code = 502


class UpstreamError(APIIntegrationError):
    """Raised when the generative AI service fails or answers unusably."""
    code = "upstream_error"

    def default_message(self):
        return "De AI-dienst is momenteel niet bereikbaar."

    def to_dict(self):
        return {"error": self.message}


class ChatNotConfigured(UpstreamError):
    """Raised when no API key is configured for the AI service."""
    code = "chat_not_configured"
    status_code = 503

    def default_message(self):
        return "De chatfunctie is niet geconfigureerd."
