# pylint: disable=missing-module-docstring,missing-class-docstring

import math
import unittest

import pandas as pd

from solver import PostfixParser, parse
from utils.sampling import sample, find_roots


class TestSample(unittest.TestCase):

    def test_sample_grid(self):
        result = sample(parse("x^2"), -2.0, 2.0, 5)
        self.assertIsInstance(result, pd.Series)
        self.assertEqual(result.index.tolist(), [-2.0, -1.0, 0.0, 1.0, 2.0])
        self.assertEqual(result.tolist(), [4.0, 1.0, 0.0, 1.0, 4.0])
        self.assertEqual(result.name, "x 2 ^")
        self.assertEqual(result.index.name, "x")

    def test_index_named_after_variable(self):
        solver = PostfixParser("t^2", variable_symbol="t").parse()
        self.assertEqual(solver.variable_symbol, "t")
        result = sample(solver, 0.0, 1.0, 3)
        self.assertEqual(result.index.name, "t")
        self.assertEqual(result.tolist(), [0.0, 0.25, 1.0])
        self.assertEqual(sample(parse("2"), 0.0, 1.0, 2, variable_symbol="u").index.name, "u")

    def test_sample_keeps_nan(self):
        result = sample(parse("sqrt(x)"), -1.0, 1.0, 3)
        self.assertTrue(math.isnan(result.iloc[0]))
        self.assertEqual(result.iloc[2], 1.0)

    def test_invalid_num(self):
        with self.assertRaises(ValueError):
            sample(parse("x"), 0.0, 1.0, 0)


class TestFindRoots(unittest.TestCase):

    def test_refined_root(self):
        roots = find_roots(parse("x^2-2"), 0.0, 3.0, 31)
        self.assertEqual(len(roots), 1)
        self.assertAlmostEqual(roots[0], math.sqrt(2.0), places=9)

    def test_two_roots(self):
        roots = find_roots(parse("x^2-4"), -10.0, 10.0, 201)
        self.assertEqual(len(roots), 2)
        self.assertAlmostEqual(roots[0], -2.0, places=9)
        self.assertAlmostEqual(roots[1], 2.0, places=9)

    def test_root_on_grid_and_nan_region(self):
        self.assertEqual(find_roots(parse("sqrt(x)-1"), -2.0, 2.0, 5), [1.0])

    def test_pole_is_not_a_root(self):
        self.assertEqual(find_roots(parse("1/(x-0.05)"), -1.0, 1.0, 21), [])

    def test_no_roots(self):
        self.assertEqual(find_roots(parse("x^2+1"), -5.0, 5.0, 11), [])
