"""
Tests for first-index search.

The unbounded search must fault on an absent target; the bounded searches
must return NOT_FOUND (or raise TargetNotFoundError for the strict policy)
and never walk off the end of the sequence.
"""

import numpy as np
import pytest

from lesson_algorithms.search import (
    NOT_FOUND,
    TargetNotFoundError,
    first_index,
    first_index_strict,
    first_index_unbounded,
    first_index_vectorized,
)

FOUND_SEARCHES = [first_index_unbounded, first_index, first_index_strict, first_index_vectorized]
FOUND_IDS = ['unbounded', 'bounded', 'strict', 'vectorized']


class TestTargetPresent:
    """Every search agrees when the target occurs."""

    @pytest.mark.parametrize("search", FOUND_SEARCHES, ids=FOUND_IDS)
    def test_lesson_example(self, search):
        """Value 2 sits at 0-based index 2 of [1, 3, 2, 4, 5]."""
        assert search(2, [1, 3, 2, 4, 5]) == 2

    @pytest.mark.parametrize("search", FOUND_SEARCHES, ids=FOUND_IDS)
    def test_first_and_last(self, search):
        values = [1, 3, 2, 4, 5]
        assert search(1, values) == 0
        assert search(5, values) == 4

    @pytest.mark.parametrize("search", FOUND_SEARCHES, ids=FOUND_IDS)
    def test_returns_smallest_index(self, search):
        assert search(4, [4, 2, 4, 4]) == 0
        assert search(4, [2, 4, 4]) == 1

    @pytest.mark.parametrize("search", FOUND_SEARCHES, ids=FOUND_IDS)
    def test_numpy_input(self, search):
        assert search(7, np.array([5, 6, 7, 7])) == 2

    @pytest.mark.parametrize("search", FOUND_SEARCHES, ids=FOUND_IDS)
    def test_tuple_elements(self, search):
        """Tuple elements are matched whole, not flattened."""
        assert search((3, 4), [(1, 2), (3, 4)]) == 1

    @pytest.mark.parametrize("search", FOUND_SEARCHES, ids=FOUND_IDS)
    def test_mixed_types_not_coerced(self, search):
        """'1' is not 1; the int at index 2 is the match."""
        assert search(1, [0, '1', 1]) == 2

    def test_vectorized_tuple_target_on_numeric_values(self):
        """A tuple target is never broadcast against a numeric array."""
        assert first_index_vectorized((1, 2), [1, 2]) is NOT_FOUND

    def test_vectorized_ragged_elements(self):
        assert first_index_vectorized((3,), [(1, 2), (3,)]) == 1

    def test_vectorized_absent_tuple(self):
        assert first_index_vectorized((5, 6), [(1, 2), (3, 4)]) is NOT_FOUND

    def test_vectorized_returns_plain_int(self):
        assert type(first_index_vectorized(3, [1, 2, 3])) is int


class TestUnboundedFault:
    """The unbounded search scans past the end when the target is absent."""

    def test_absent_target_raises_index_error(self):
        with pytest.raises(IndexError):
            first_index_unbounded(1, [2, 3, 4])

    def test_fault_is_deterministic(self):
        """Same inputs, same fault, every time."""
        messages = set()
        for _ in range(5):
            with pytest.raises(IndexError) as excinfo:
                first_index_unbounded(1, [2, 3, 4])
            messages.add(str(excinfo.value))
        assert len(messages) == 1

    def test_empty_sequence_faults(self):
        with pytest.raises(IndexError):
            first_index_unbounded(1, [])

    def test_numpy_input_faults(self):
        with pytest.raises(IndexError):
            first_index_unbounded(1, np.array([2, 3, 4]))


class TestBoundedNotFound:
    """The corrected searches return NOT_FOUND instead of faulting."""

    @pytest.mark.parametrize("search", [first_index, first_index_vectorized],
                             ids=['bounded', 'vectorized'])
    def test_absent_target(self, search):
        assert search(1, [2, 3, 4]) is NOT_FOUND

    @pytest.mark.parametrize("search", [first_index, first_index_vectorized],
                             ids=['bounded', 'vectorized'])
    def test_empty_sequence(self, search):
        assert search(1, []) is NOT_FOUND

    def test_not_found_is_not_an_index(self):
        """NOT_FOUND can never be used to index a sequence by mistake."""
        assert NOT_FOUND is None
        with pytest.raises(TypeError):
            [2, 3, 4][NOT_FOUND]

    def test_found_at_zero_is_distinguishable(self):
        """Index 0 is falsy but is not NOT_FOUND."""
        result = first_index(2, [2, 3, 4])
        assert result == 0
        assert result is not NOT_FOUND


class TestStrict:
    """first_index_strict raises a descriptive error."""

    def test_absent_target_raises(self):
        with pytest.raises(TargetNotFoundError, match="target 1 does not occur"):
            first_index_strict(1, [2, 3, 4])

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            first_index_strict('x', ['a', 'b'])

    def test_error_carries_target(self):
        with pytest.raises(TargetNotFoundError) as excinfo:
            first_index_strict(9, [1])
        assert excinfo.value.target == 9


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
