# pylint: disable=missing-module-docstring,missing-class-docstring

import math
import unittest

import numpy as np
from parameterized import parameterized

from core.exceptions import EmptyResult, StackUnderflow
from core.rpn_evaluator import RPNEvaluator, RPNValidator
from core.token_system import (
    Number, Variable, CONSTANT_DEFINITIONS, OPERATOR_DEFINITIONS, UNARY_MINUS, OPEN_PAREN,
)

OPS = OPERATOR_DEFINITIONS


class TestOperandOrder(unittest.TestCase):
    """'a b OP' must evaluate as OP(a, b)"""

    @parameterized.expand(
        [
            ("-", 2.0, 8.0, -6.0),
            ("/", 2.0, 8.0, 0.25),
            ("^", 2.0, 8.0, 256.0),
            ("max", 2.0, 8.0, 8.0),
            ("min", 2.0, 8.0, 2.0),
        ]
    )
    def test_binary(self, symbol, left, right, expected):
        postfix = [Number(left), Number(right), OPS[symbol]]
        self.assertEqual(RPNEvaluator.evaluate(postfix), expected)

    def test_log_with_base(self):
        postfix = [Number(2.0), Number(8.0), OPS["log"]]
        self.assertAlmostEqual(RPNEvaluator.evaluate(postfix), 3.0)

    def test_variable_on_the_right(self):
        postfix = [Number(10.0), Variable("x"), OPS["-"]]
        self.assertEqual(RPNEvaluator.evaluate(postfix, 4.0), 6.0)


class TestEvaluate(unittest.TestCase):

    def test_operands(self):
        self.assertEqual(RPNEvaluator.evaluate([Number(1.5)]), 1.5)
        self.assertEqual(RPNEvaluator.evaluate([CONSTANT_DEFINITIONS["pi"]]), math.pi)
        self.assertEqual(RPNEvaluator.evaluate([Variable("x")], 7.0), 7.0)

    def test_returns_python_float(self):
        result = RPNEvaluator.evaluate([Number(2.0), Number(3.0), OPS["*"]])
        self.assertIsInstance(result, float)

    def test_unary_minus(self):
        self.assertEqual(RPNEvaluator.evaluate([Variable("x"), UNARY_MINUS], 3.0), -3.0)

    @parameterized.expand(
        [
            ("sqrt", -1.0),
            ("ln", -1.0),
            ("asin", 2.0),
            ("acosh", 0.5),
        ]
    )
    def test_domain_errors_give_nan(self, symbol, value):
        self.assertTrue(math.isnan(RPNEvaluator.evaluate([Number(value), OPS[symbol]])))

    def test_division_by_zero_gives_infinity(self):
        self.assertEqual(RPNEvaluator.evaluate([Number(1.0), Number(0.0), OPS["/"]]), math.inf)
        self.assertEqual(RPNEvaluator.evaluate([Number(-1.0), Number(0.0), OPS["/"]]), -math.inf)
        self.assertEqual(RPNEvaluator.evaluate([Number(0.0), OPS["ln"]]), -math.inf)
        self.assertTrue(math.isnan(RPNEvaluator.evaluate([Number(0.0), Number(0.0), OPS["/"]])))

    def test_nan_propagates(self):
        postfix = [Number(-1.0), OPS["sqrt"], Number(1.0), OPS["max"]]
        self.assertTrue(math.isnan(RPNEvaluator.evaluate(postfix)))

    def test_array_input(self):
        postfix = [Variable("x"), Number(1.0), OPS["+"]]
        result = RPNEvaluator.evaluate(postfix, np.array([1.0, 2.0, 3.0]))
        np.testing.assert_array_equal(result, [2.0, 3.0, 4.0])

    def test_constant_result_broadcast_to_input_shape(self):
        result = RPNEvaluator.evaluate([Number(5.0)], np.array([1.0, 2.0, 3.0]))
        np.testing.assert_array_equal(result, [5.0, 5.0, 5.0])

    def test_stack_underflow(self):
        with self.assertRaises(StackUnderflow) as ctx:
            RPNEvaluator.evaluate([Number(1.0), OPS["+"]])
        self.assertEqual(ctx.exception.required, 2)
        self.assertEqual(ctx.exception.available, 1)

        with self.assertRaises(StackUnderflow):
            RPNEvaluator.evaluate([OPS["sqrt"]])

    def test_empty_result(self):
        with self.assertRaises(EmptyResult) as ctx:
            RPNEvaluator.evaluate([])
        self.assertEqual(ctx.exception.stack_size, 0)

        with self.assertRaises(EmptyResult) as ctx:
            RPNEvaluator.evaluate([Number(1.0), Number(2.0)])
        self.assertEqual(ctx.exception.stack_size, 2)

    def test_delimiter_rejected(self):
        with self.assertRaises(TypeError):
            RPNEvaluator.evaluate([Number(1.0), OPEN_PAREN])


class TestRPNValidator(unittest.TestCase):

    def test_stack_size(self):
        self.assertEqual(RPNValidator.calculate_stack_size([]), 0)
        self.assertEqual(RPNValidator.calculate_stack_size([Number(1.0), Number(2.0)]), 2)
        self.assertEqual(RPNValidator.calculate_stack_size([Number(1.0), Number(2.0), OPS["+"]]), 1)
        self.assertIsNone(RPNValidator.calculate_stack_size([Number(1.0), OPS["+"]]))
        self.assertIsNone(RPNValidator.calculate_stack_size([OPEN_PAREN]))

    def test_is_complete(self):
        self.assertTrue(RPNValidator.is_complete([Variable("x"), OPS["sin"]]))
        self.assertFalse(RPNValidator.is_complete([Variable("x"), Number(1.0)]))
