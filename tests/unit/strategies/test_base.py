"""Unit tests for the DeleteStrategy base class and strategy lookup."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from filereaper.core.errors import DeleteFailedError, InvalidArgumentError
from filereaper.strategies import (
    FORCE,
    NOOP,
    NORMAL,
    STRATEGIES,
    DeleteStrategy,
    coerce_path,
    get_strategy,
)


class RecordingStrategy(DeleteStrategy):
    """Concrete implementation for testing the base class."""

    def __init__(self, fail: bool = False) -> None:
        self.calls: list[str] = []
        self._fail = fail

    @property
    def name(self) -> str:
        return "Recording"

    def _do_delete(self, path: str) -> None:
        self.calls.append(path)
        if self._fail:
            raise DeleteFailedError(path, "refused")
        os.unlink(path)


class TestDeleteStrategyBase:
    """Tests for DeleteStrategy."""

    def test_cannot_instantiate_abstract(self) -> None:
        """DeleteStrategy itself is abstract."""
        with pytest.raises(TypeError):
            DeleteStrategy()  # type: ignore[abstract]

    def test_missing_path_skips_do_delete(self, tmp_path: Path) -> None:
        """_do_delete is only called for existing paths."""
        strategy = RecordingStrategy()

        strategy.delete(tmp_path / "gone")

        assert strategy.calls == []

    def test_path_normalised_to_str(self, tmp_path: Path) -> None:
        """Path objects reach _do_delete as strings."""
        target = tmp_path / "a.txt"
        target.write_text("content")
        strategy = RecordingStrategy()

        strategy.delete(target)

        assert strategy.calls == [str(target)]
        assert not target.exists()

    def test_delete_propagates_failure(self, tmp_path: Path) -> None:
        """Failures from _do_delete propagate from delete()."""
        target = tmp_path / "a.txt"
        target.write_text("content")

        with pytest.raises(DeleteFailedError):
            RecordingStrategy(fail=True).delete(target)

    def test_delete_quietly_swallows_failure(self, tmp_path: Path) -> None:
        """delete_quietly returns False instead of raising."""
        target = tmp_path / "a.txt"
        target.write_text("content")

        assert RecordingStrategy(fail=True).delete_quietly(target) is False

    def test_delete_quietly_swallows_unexpected_error(self, tmp_path: Path) -> None:
        """delete_quietly returns False when _do_delete raises a non-OS error."""
        target = tmp_path / "a.txt"
        target.write_text("content")

        with patch.object(RecordingStrategy, "_do_delete", side_effect=ValueError("bad")):
            assert RecordingStrategy().delete_quietly(target) is False
        assert target.exists()

    def test_str(self) -> None:
        """str() uses the strategy name."""
        assert str(RecordingStrategy()) == "DeleteStrategy[Recording]"


class TestCoercePath:
    """Tests for coerce_path."""

    def test_str(self) -> None:
        """Strings pass through."""
        assert coerce_path("/tmp/x") == "/tmp/x"

    def test_pathlike(self, tmp_path: Path) -> None:
        """os.PathLike objects are converted."""
        assert coerce_path(tmp_path) == str(tmp_path)

    def test_bytes(self) -> None:
        """Bytes paths are decoded."""
        assert coerce_path(b"/tmp/x") == "/tmp/x"

    @pytest.mark.parametrize("value", [None, "", 3.5, object()])
    def test_invalid(self, value: object) -> None:
        """None, empty and non-path values are rejected."""
        with pytest.raises(InvalidArgumentError):
            coerce_path(value)


class TestGetStrategy:
    """Tests for get_strategy."""

    def test_known_names(self) -> None:
        """Each name maps to its shared instance."""
        assert get_strategy("normal") is NORMAL
        assert get_strategy("force") is FORCE
        assert get_strategy("noop") is NOOP

    def test_case_insensitive(self) -> None:
        """Lookup ignores case and surrounding whitespace."""
        assert get_strategy(" Force ") is FORCE

    def test_unknown_name(self) -> None:
        """Unknown names raise InvalidArgumentError listing valid names."""
        with pytest.raises(InvalidArgumentError, match="force, noop, normal"):
            get_strategy("shred")

    def test_registry(self) -> None:
        """STRATEGIES lists every shared instance."""
        assert set(STRATEGIES.values()) == {NORMAL, FORCE, NOOP}
