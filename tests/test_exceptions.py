from legalcase.core.exceptions import (
    GENERIC_ERROR_MESSAGE,
    BusinessRuleViolationException,
    EntityNotFoundException,
    InvalidArgumentError,
    StorageError,
    UnauthorizedException,
    describe_error,
)


class TestExceptionHierarchy:
    def test_validation_failures_are_value_errors(self):
        assert issubclass(EntityNotFoundException, InvalidArgumentError)
        assert issubclass(BusinessRuleViolationException, InvalidArgumentError)
        assert issubclass(InvalidArgumentError, ValueError)

    def test_storage_error_is_runtime_error(self):
        assert issubclass(StorageError, RuntimeError)
        assert not issubclass(StorageError, ValueError)

    def test_missing_login_is_runtime_error(self):
        assert issubclass(UnauthorizedException, RuntimeError)
        assert not issubclass(UnauthorizedException, ValueError)

    def test_details_default_to_empty(self):
        assert EntityNotFoundException("Case not found").details == {}


class TestDescribeError:
    def test_validation_message_is_shown(self):
        assert describe_error(BusinessRuleViolationException("Username already exists")) == "Username already exists"

    def test_unauthorized_message_is_shown(self):
        assert describe_error(UnauthorizedException()) == "No user is currently logged in"

    def test_storage_error_adds_generic_hint(self):
        message = describe_error(StorageError("Could not create case"))
        assert message.startswith("Could not create case")
        assert GENERIC_ERROR_MESSAGE in message

    def test_unknown_errors_are_generic(self):
        assert describe_error(KeyError("secret internals")) == GENERIC_ERROR_MESSAGE
