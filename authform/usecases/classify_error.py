from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from authform.adapters.api_errors import is_api_response_error, is_wallet_error
from authform.domain.entities import ApiErrorResponse, Classification, ErrorKind
from authform.domain.ports import ErrorPredicate


@dataclass
class ErrorClassifier:
    """Sort a raised value into the closed set of handleable error shapes.

    Wallet errors are checked first; when both predicates could match, the
    provider-bound signal wins.
    """

    is_wallet_error: ErrorPredicate = is_wallet_error
    is_api_response_error: ErrorPredicate = is_api_response_error

    def __call__(self, err: Any) -> Classification:
        if self.is_wallet_error(err):
            message = getattr(err, "message", None)
            if not isinstance(message, str):
                message = str(err)
            return Classification(ErrorKind.WALLET, err, message=message)
        if self.is_api_response_error(err):
            return Classification(ErrorKind.API_RESPONSE, err, response=_response_of(err))
        return Classification(ErrorKind.UNKNOWN, err)


def _response_of(err: Any) -> ApiErrorResponse:
    response = getattr(err, "response", None)
    if isinstance(response, ApiErrorResponse):
        return response
    return ApiErrorResponse.of(getattr(err, "errors", None))


_DEFAULT_CLASSIFIER = ErrorClassifier()


def classify_error(err: Any) -> Classification:
    """Classify ``err`` with the default adapter predicates."""
    return _DEFAULT_CLASSIFIER(err)


__all__ = ["ErrorClassifier", "classify_error"]
