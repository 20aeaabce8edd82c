"""Unit tests for shift direction."""

from srtclean.core.direction import Direction


class TestDirection:
    """Test cases for Direction."""

    def test_default_is_forward(self):
        """The default direction is forward."""
        assert Direction.default() is Direction.FORWARD

    def test_sign(self):
        """Forward adds, backward subtracts."""
        assert Direction.FORWARD.sign == 1
        assert Direction.BACKWARD.sign == -1

    def test_from_value(self):
        """Directions can be looked up by their string value."""
        assert Direction("backward") is Direction.BACKWARD
        assert str(Direction.FORWARD) == "forward"
