"""Unit tests for the seeded Mulberry32 generator."""

import unittest

from shape_lib.utils.prng import SeededRandom, next_random, random_range


class TestNextRandom(unittest.TestCase):
    """Tests for the pure step function."""

    def test_same_state_same_output(self):
        self.assertEqual(next_random(42), next_random(42))

    def test_state_advances_by_increment(self):
        _, state = next_random(0)
        self.assertEqual(state, 0x6D2B79F5)

    def test_state_wraps_at_32_bits(self):
        _, state = next_random(0xFFFFFFFF)
        self.assertEqual(state, (0xFFFFFFFF + 0x6D2B79F5) & 0xFFFFFFFF)

    def test_values_in_unit_interval(self):
        state = 1234
        for _ in range(2000):
            value, state = next_random(state)
            self.assertGreaterEqual(value, 0.0)
            self.assertLess(value, 1.0)

    def test_different_seeds_differ(self):
        self.assertNotEqual(next_random(1)[0], next_random(2)[0])

    def test_negative_seed_reduced_mod_2_32(self):
        self.assertEqual(next_random(-1), next_random(0xFFFFFFFF))

    def test_random_range_bounds(self):
        state = 7
        for _ in range(500):
            value, state = random_range(state, -5.0, 5.0)
            self.assertGreaterEqual(value, -5.0)
            self.assertLess(value, 5.0)


class TestSeededRandom:
    """Tests for the stateful wrapper."""

    def test_matches_pure_sequence(self):
        rng = SeededRandom(99)
        state = 99
        for _ in range(50):
            expected, state = next_random(state)
            assert rng.next() == expected
        assert rng.state == state

    def test_randint_inclusive(self):
        rng = SeededRandom(5)
        seen = {rng.randint(1, 3) for _ in range(500)}
        assert seen == {1, 2, 3}

    def test_choice_returns_member(self):
        rng = SeededRandom(3)
        items = ['a', 'b', 'c', 'd']
        for _ in range(100):
            assert rng.choice(items) in items

    def test_next_seed_is_uint32(self):
        rng = SeededRandom(11)
        for _ in range(100):
            seed = rng.next_seed()
            assert 0 <= seed <= 0xFFFFFFFF

    def test_reseeding_reproduces_stream(self):
        a = SeededRandom(2024)
        b = SeededRandom(2024)
        assert [a.range(0, 10) for _ in range(20)] == [b.range(0, 10) for _ in range(20)]
