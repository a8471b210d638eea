"""Tests for sitepub.core.errors module."""

from sitepub.core.errors import ErrorCode


class TestErrorCodeValues:
    def test_values_are_stable(self) -> None:
        assert ErrorCode.OK == 0
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.CONFIG_ERROR == 2
        assert ErrorCode.BUILD_ERROR == 3
        assert ErrorCode.PUBLISH_ERROR == 4
        assert ErrorCode.IO_ERROR == 5


class TestErrorCodeUsage:
    def test_can_use_as_int(self) -> None:
        code: int = ErrorCode.PUBLISH_ERROR
        assert code == 4

    def test_str(self) -> None:
        assert str(ErrorCode.CONFIG_ERROR) == "config error"
