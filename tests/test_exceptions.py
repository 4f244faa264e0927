from fallible.exceptions import ConfigError, ContinuationError, FallibleException


class TestFallibleException:
    def test_is_exception(self) -> None:
        assert issubclass(FallibleException, Exception)

    def test_can_be_raised_and_caught(self) -> None:
        try:
            raise FallibleException("test")
        except FallibleException as e:
            assert str(e) == "test"


class TestExceptionInheritance:
    def test_continuation_error_inherits_fallible_exception(self) -> None:
        assert issubclass(ContinuationError, FallibleException)

    def test_config_error_inherits_fallible_exception(self) -> None:
        assert issubclass(ConfigError, FallibleException)

    def test_continuation_error_carries_count(self) -> None:
        error = ContinuationError(3)
        assert error.calls == 3
        assert "3 times" in str(error)

    def test_config_error_carries_key(self) -> None:
        error = ConfigError("continuations.strict", "maybe")
        assert error.key == "continuations.strict"
        assert error.raw == "maybe"
