"""Testes para normalização de falhas."""

from __future__ import annotations

from app.domain.errors import ApiError, SchemaValidationError, TransportError, WhatsAppSendError
from app.domain.outcome import ErrorDetail
from app.protocols.transport import TransportFailure
from app.services.error_normalizer import classify_failure, format_error, to_response_error

META_ERROR = {"message": "Invalid parameter", "type": "OAuthException", "code": 100}


class TestClassifyFailure:
    """Testes para classify_failure."""

    def test_failure_without_body_is_transport(self) -> None:
        failure = classify_failure(TransportFailure("timed out"))

        assert isinstance(failure, TransportError)
        assert failure.kind == "transport"
        assert failure.details is None

    def test_failure_with_body_is_api(self) -> None:
        exc = TransportFailure(
            "Request failed with status code 400",
            status_code=400,
            response_body={"error": META_ERROR},
        )
        failure = classify_failure(exc)

        assert isinstance(failure, ApiError)
        assert failure.kind == "api"
        assert failure.details == META_ERROR

    def test_body_without_error_field(self) -> None:
        """Body sem `error` ainda é falha de API, sem details."""
        failure = classify_failure(TransportFailure("x", status_code=500, response_body={}))
        assert isinstance(failure, ApiError)
        assert failure.details is None

    def test_non_object_error_field_passed_through(self) -> None:
        """`error` que não é objeto vai para details sem alteração."""
        exc = TransportFailure("Request failed with status code 400", 400, {"error": "bad token"})
        outcome = to_response_error(exc)

        assert outcome.to_dict() == {
            "status": "error",
            "error": [{"message": "Request failed with status code 400", "details": "bad token"}],
        }

    def test_text_error_body_is_api(self) -> None:
        """Resposta 502 em HTML chegou ao cliente: falha de API sem details."""
        exc = TransportFailure("Request failed with status code 502", 502, "<html>Bad Gateway</html>")
        failure = classify_failure(exc)

        assert isinstance(failure, ApiError)
        assert failure.details is None

    def test_status_without_body_is_api(self) -> None:
        """Status recebido com body vazio ainda é falha de API."""
        failure = classify_failure(TransportFailure("Request failed with status code 503", 503))
        assert failure.kind == "api"

    def test_taxonomy_passthrough(self) -> None:
        schema_error = SchemaValidationError("Invalid schema format", details={"a": 1})
        assert classify_failure(schema_error) is schema_error

    def test_other_exceptions(self) -> None:
        failure = classify_failure(ValueError("bad input"))
        assert type(failure) is WhatsAppSendError
        assert failure.message == "bad input"

    def test_exception_without_message(self) -> None:
        assert classify_failure(RuntimeError()).message == "RuntimeError"


class TestFormatError:
    """Testes para format_error e to_response_error."""

    def test_transport_failure_single_item_no_details(self) -> None:
        errors = format_error(classify_failure(TransportFailure("connection reset")))
        assert errors == [ErrorDetail(message="connection reset")]

    def test_plain_exception_with_details(self) -> None:
        errors = format_error(KeyError("k"), details={"field": "to"})
        assert errors[0].details == {"field": "to"}

    def test_to_response_error_api(self) -> None:
        exc = TransportFailure("Request failed with status code 400", 400, {"error": META_ERROR})
        outcome = to_response_error(exc)

        assert outcome.to_dict() == {
            "status": "error",
            "error": [
                {"message": "Request failed with status code 400", "details": META_ERROR}
            ],
        }

    def test_to_response_error_omits_missing_details(self) -> None:
        outcome = to_response_error(TransportFailure("timeout"))
        assert outcome.to_dict() == {"status": "error", "error": [{"message": "timeout"}]}
