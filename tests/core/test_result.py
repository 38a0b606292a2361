"""
Tests for the Result[P] envelope and Timer.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pyslr.core.result import Result
from pyslr.core.compute.timing import Timer
from pyslr.core.compute.precision import resolve_dtype
from pyslr.core.exceptions import ValidationError


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "test"},
            timing=None,
            backend_name="cpu",
        )
        assert result.params.value == 42.0
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0), info={}, timing=None, backend_name="cpu",
            warnings=("Observations contain NaN or Inf values",),
        )
        assert result.has_warning("NaN")
        assert not result.has_warning("converge")


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('means'):
            pass
        with timer.section('means'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'means'}
        assert result['means'] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()


class TestPrecision:

    def test_resolve_names(self):
        assert resolve_dtype('float32').name == 'float32'
        assert resolve_dtype('float64').name == 'float64'

    def test_rejects_half(self):
        with pytest.raises(ValidationError, match="unsupported precision"):
            resolve_dtype('float16')

    def test_rejects_garbage(self):
        with pytest.raises(ValidationError, match="cannot interpret"):
            resolve_dtype('not-a-dtype')
