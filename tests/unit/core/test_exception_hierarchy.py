from src.core.exceptions import (
    AuthenticationError,
    DatabaseError,
    InvalidSubscriberError,
    InvalidSubscriptionTokenError,
    MissingSubscriptionTokenError,
    NewsletterError,
    ValidationError,
)


def test_invalid_token_is_an_authentication_error():
    error = InvalidSubscriptionTokenError()

    assert isinstance(error, AuthenticationError)
    assert error.code == "invalid_subscription_token"
    assert str(error) == "The subscription token is not valid."


def test_client_errors_are_validation_errors():
    assert isinstance(MissingSubscriptionTokenError(), ValidationError)
    assert isinstance(InvalidSubscriberError("bad name"), ValidationError)


def test_database_error_keeps_cause():
    cause = RuntimeError("connection reset")
    try:
        try:
            raise cause
        except RuntimeError as e:
            raise DatabaseError("Failed to update subscriber status") from e
    except DatabaseError as error:
        assert error.__cause__ is cause
        assert isinstance(error, NewsletterError)
        assert error.code == "database_error"
