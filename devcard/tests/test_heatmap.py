"""Tests for hour distribution, rotation and axis labels."""

import random
import unittest

from devcard.heatmap import (
    build_hour_distribution, coerce_number, rotate_heatmap,
    find_longest_quiet_run, heatmap_axis_labels, RotatedView
)

NIGHT_WORKER = [12, 10, 8, 6, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 5, 10, 18, 22, 20]
DAY_WORKER = [0, 0, 0, 0, 0, 1, 3, 8, 15, 22, 25, 20, 18, 16, 22, 19, 14, 8, 3, 1, 0, 0, 0, 0]


def _sample_distributions():
    """A fixed mix of hand-written and seeded random distributions."""
    rng = random.Random(1234)
    samples = [NIGHT_WORKER, DAY_WORKER, [0] * 24, [10] * 24]
    for _ in range(50):
        samples.append([rng.choice([0, 0, 0, 1, 2, 5, 10, 40]) for _ in range(24)])
    for _ in range(20):
        samples.append([round(rng.uniform(0, 3), 2) for _ in range(24)])
    return samples


class TestBuildHourDistribution(unittest.TestCase):
    """Test distribution extraction."""

    def test_returns_flat_hour_distribution(self):
        """Verify a 24-element flat list is returned as is."""
        record = {'hour_distribution': list(range(24))}
        self.assertEqual(build_hour_distribution(record), list(range(24)))

    def test_flat_takes_precedence_over_heatmap(self):
        """Verify flat data wins when both fields exist."""
        record = {
            'hour_distribution': list(range(24)),
            'heatmap': [[1] * 24],
        }
        self.assertEqual(build_hour_distribution(record), list(range(24)))

    def test_aggregates_matrix_rows(self):
        """Verify rows are summed column-wise."""
        row = [1] + [0] * 22 + [2]
        result = build_hour_distribution({'heatmap': [row, row, row]})
        self.assertEqual(result, [3] + [0] * 22 + [6])

    def test_matrix_rows_as_json_text(self):
        """Verify JSON-encoded rows are decoded."""
        row = '[5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 10]'
        result = build_hour_distribution({'heatmap': [row]})
        self.assertEqual(result[0], 5)
        self.assertEqual(result[23], 10)

    def test_malformed_rows_count_as_zero(self):
        """Verify undecodable rows are skipped without raising."""
        good = [1] * 24
        record = {'heatmap': [good, 'not json', '{"a": 1}', 42, None, '[' * 100000, good]}
        self.assertEqual(build_hour_distribution(record), [2] * 24)

    def test_short_and_long_rows(self):
        """Verify short rows fill a prefix and long rows are truncated."""
        record = {'heatmap': [[1, 1], [0] * 24 + [9, 9]]}
        self.assertEqual(build_hour_distribution(record), [1, 1] + [0] * 22)

    def test_empty_matrix_gives_zeros(self):
        """Verify an empty matrix still produces a distribution."""
        self.assertEqual(build_hour_distribution({'heatmap': []}), [0] * 24)

    def test_wrong_length_flat_falls_back_to_matrix(self):
        """Verify a malformed flat list defers to the matrix."""
        record = {'hour_distribution': [1, 2, 3], 'heatmap': [[4] * 24]}
        self.assertEqual(build_hour_distribution(record), [4] * 24)

    def test_returns_none_without_data(self):
        """Verify None when there is nothing to build from."""
        self.assertIsNone(build_hour_distribution({}))
        self.assertIsNone(build_hour_distribution({'sessions': 100}))
        self.assertIsNone(build_hour_distribution({'hour_distribution': [1, 2, 3]}))
        self.assertIsNone(build_hour_distribution({'heatmap': 'oops'}))
        self.assertIsNone(build_hour_distribution(None))
        self.assertIsNone(build_hour_distribution(['not', 'a', 'mapping']))

    def test_flat_values_are_coerced(self):
        """Verify non-numeric values become 0 and numeric text is read."""
        values = ['3', None, 'x', float('nan'), True, 2.5] + [0] * 18
        result = build_hour_distribution({'hour_distribution': values})
        self.assertEqual(result[:6], [3, 0, 0, 0, 1, 2.5])
        self.assertEqual(len(result), 24)


class TestCoerceNumber(unittest.TestCase):
    """Test numeric coercion."""

    def test_integral_floats_become_ints(self):
        """Verify 4.0 is returned as int 4."""
        self.assertEqual(coerce_number(4.0), 4)
        self.assertIsInstance(coerce_number(4.0), int)

    def test_infinite_becomes_zero(self):
        """Verify infinities are rejected."""
        self.assertEqual(coerce_number(float('inf')), 0)
        self.assertEqual(coerce_number('-inf'), 0)

    def test_containers_become_zero(self):
        """Verify lists and dicts are rejected."""
        self.assertEqual(coerce_number([1]), 0)
        self.assertEqual(coerce_number({'a': 1}), 0)

    def test_int_beyond_float_range_becomes_zero(self):
        """Verify ints too large for a float are rejected."""
        self.assertEqual(coerce_number(10 ** 400), 0)
        self.assertEqual(coerce_number(-(10 ** 400)), 0)
        self.assertEqual(coerce_number(10 ** 20), 10 ** 20)

    def test_matrix_sum_beyond_float_range(self):
        """Verify column sums that overflow a float become 0."""
        big = int(1e308)
        result = build_hour_distribution({'heatmap': [[big] + [1] * 23, [big] + [1] * 23]})
        self.assertEqual(result, [0] + [2] * 23)


class TestQuietRun(unittest.TestCase):
    """Test quiet-run detection."""

    def test_run_wraps_midnight(self):
        """Verify a quiet stretch across 23 -> 0 is found whole."""
        dist = [0, 0, 0] + [10] * 18 + [0, 0, 0]
        start, length = find_longest_quiet_run(dist, 1.0)
        self.assertEqual(length, 6)
        self.assertEqual(start, 21)

    def test_no_quiet_hours(self):
        """Verify length 0 when every hour is active."""
        self.assertEqual(find_longest_quiet_run([5] * 24, 0.5), (0, 0))

    def test_run_length_capped(self):
        """Verify a fully quiet day counts as 24, not 48."""
        _, length = find_longest_quiet_run([0] * 24, 0)
        self.assertEqual(length, 24)

    def test_threshold_is_inclusive(self):
        """Verify values equal to the threshold are quiet."""
        dist = [1] * 4 + [10] * 20
        self.assertEqual(find_longest_quiet_run(dist, 1.0), (0, 4))


class TestRotateHeatmap(unittest.TestCase):
    """Test heatmap rotation."""

    def test_day_worker_is_not_rotated(self):
        """Verify the quiet midpoint at midnight leaves the axis alone."""
        result = rotate_heatmap(DAY_WORKER)
        self.assertEqual(result.start_hour, 0)
        self.assertEqual(result.data, DAY_WORKER)

    def test_night_worker_is_rotated_contiguously(self):
        """Verify a night worker's activity ends up in one block."""
        result = rotate_heatmap(NIGHT_WORKER)
        self.assertNotEqual(result.start_hour, 0)
        self.assertEqual(result.start_hour, 12)

        nonzero = [i for i, v in enumerate(result.data) if v > 0]
        span = nonzero[-1] - nonzero[0] + 1
        self.assertLessEqual(span - len(nonzero), 2)

    def test_all_zero_passthrough(self):
        """Verify an empty distribution is returned unchanged."""
        self.assertEqual(rotate_heatmap([0] * 24), RotatedView(data=[0] * 24, start_hour=0))

    def test_uniform_passthrough(self):
        """Verify a flat non-zero distribution is returned unchanged."""
        self.assertEqual(rotate_heatmap([10] * 24), RotatedView(data=[10] * 24, start_hour=0))

    def test_none_input(self):
        """Verify None produces an empty 24-hour view."""
        result = rotate_heatmap(None)
        self.assertEqual(result.data, [0] * 24)
        self.assertEqual(result.start_hour, 0)

    def test_invalid_input_passthrough(self):
        """Verify wrong-length and negative inputs pass through."""
        self.assertEqual(rotate_heatmap([1, 2, 3]), RotatedView(data=[1, 2, 3], start_hour=0))
        negative = [-1] + [1] * 23
        self.assertEqual(rotate_heatmap(negative), RotatedView(data=negative, start_hour=0))
        with_text = ['1'] * 24
        self.assertEqual(rotate_heatmap(with_text).start_hour, 0)

    def test_huge_int_passthrough(self):
        """Verify ints too large for a float pass through unrotated."""
        huge = [10 ** 400] + [0] * 23
        self.assertEqual(rotate_heatmap(huge), RotatedView(data=huge, start_hour=0))

    def test_short_quiet_run_not_rotated(self):
        """Verify a two-hour lull does not move the axis."""
        dist = [10] * 24
        dist[5] = dist[6] = 0
        result = rotate_heatmap(dist)
        self.assertEqual(result.start_hour, 0)
        self.assertEqual(result.data, dist)

    def test_earliest_equal_run_wins(self):
        """Verify ties go to the run seen first."""
        dist = [10] * 24
        for hour in (2, 3, 4, 5, 14, 15, 16, 17):
            dist[hour] = 0
        self.assertEqual(rotate_heatmap(dist).start_hour, 4)

    def test_single_peak(self):
        """Verify a single spike survives rotation once."""
        dist = [0] * 24
        dist[3] = 100
        result = rotate_heatmap(dist)
        self.assertEqual(result.data.count(100), 1)
        self.assertEqual(sum(result.data), 100)

    def test_tuple_input(self):
        """Verify tuples are accepted and returned as lists."""
        result = rotate_heatmap(tuple(NIGHT_WORKER))
        self.assertIsInstance(result.data, list)
        self.assertEqual(result.start_hour, 12)

    def test_input_not_mutated(self):
        """Verify the caller's list is left untouched."""
        dist = list(NIGHT_WORKER)
        rotate_heatmap(dist)
        self.assertEqual(dist, NIGHT_WORKER)

    def test_sum_preserved(self):
        """Verify total activity is preserved for every sample."""
        for dist in _sample_distributions():
            with self.subTest(dist=dist):
                self.assertAlmostEqual(sum(rotate_heatmap(dist).data), sum(dist))

    def test_output_is_cyclic_rotation(self):
        """Verify data[i] == dist[(i + start_hour) % 24] for every sample."""
        for dist in _sample_distributions():
            result = rotate_heatmap(dist)
            with self.subTest(dist=dist):
                self.assertTrue(0 <= result.start_hour <= 23)
                self.assertEqual(len(result.data), 24)
                for i in range(24):
                    self.assertEqual(result.data[i], dist[(i + result.start_hour) % 24])

    def test_hour_at(self):
        """Verify display positions map back to absolute hours."""
        result = rotate_heatmap(NIGHT_WORKER)
        self.assertEqual(result.hour_at(0), 12)
        self.assertEqual(result.hour_at(12), 0)


class TestAxisLabels(unittest.TestCase):
    """Test axis label generation."""

    def test_default_labels(self):
        """Verify labels for an unrotated axis."""
        self.assertEqual(heatmap_axis_labels(0), ['0', '6', '12', '18', '23'])

    def test_shifted_labels(self):
        """Verify labels for start hour 6."""
        self.assertEqual(heatmap_axis_labels(6), ['6', '12', '18', '0', '5'])

    def test_labels_wrap_midnight(self):
        """Verify labels for start hour 18."""
        self.assertEqual(heatmap_axis_labels(18), ['18', '0', '6', '12', '17'])

    def test_always_five_labels_in_range(self):
        """Verify every start hour gives 5 valid hour labels."""
        for hour in range(24):
            labels = heatmap_axis_labels(hour)
            self.assertEqual(len(labels), 5)
            for label in labels:
                self.assertTrue(0 <= int(label) <= 23)


if __name__ == '__main__':
    unittest.main()
