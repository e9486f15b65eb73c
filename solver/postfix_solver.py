"""基于后缀表达式（RPN）的求解器"""
import logging
from abc import ABC, abstractmethod
from functools import cached_property

import numpy as np
import pandas as pd

from config.config import PARSER_CONFIG
from core.rpn_evaluator import RPNEvaluator
from core.token_system import TokenType

logger = logging.getLogger(__name__)


class EquationSolver(ABC):
    """单变量方程求解器接口"""

    @abstractmethod
    def calculate(self):
        """数值表达式求值，或符号表达式在自变量为0处的值"""

    @abstractmethod
    def calculate_for(self, value):
        """计算自变量取 value 时的值"""


class PostfixSolver(EquationSolver):
    """
    后缀表达式求解器

    持有一个不可变的RPN Token序列，可以对不同的自变量取值反复求值，
    无需重新分词和转换。
    """

    def __init__(self, polish, variable_symbol=None):
        self._polish = tuple(polish)
        if variable_symbol is None:
            # 未指定时取序列中的自变量，纯数值表达式退回默认符号
            variable_symbol = next(
                (t.symbol for t in self._polish if t.type is TokenType.VARIABLE),
                PARSER_CONFIG['variable_symbol'])
        self.variable_symbol = variable_symbol

    @property
    def polish(self):
        return self._polish

    @cached_property
    def eq_string(self):
        return ' '.join(token.render() for token in self._polish)

    def __str__(self):
        return self.eq_string

    def __repr__(self):
        return f"PostfixSolver('{self.eq_string}')"

    def __len__(self):
        return len(self._polish)

    def __iter__(self):
        return iter(self._polish)

    def __eq__(self, other):
        if not isinstance(other, PostfixSolver):
            return NotImplemented
        return self._polish == other._polish

    def __hash__(self):
        return hash(self._polish)

    def calculate(self):
        return self.calculate_for(0.0)

    def calculate_for(self, value):
        return RPNEvaluator.evaluate(self._polish, float(value))

    def calculate_over(self, values):
        """
        对一组自变量取值做向量化求值

        Args:
            values: array-like 或 pd.Series
        Returns:
            输入为 Series 时返回同索引的 Series，否则返回 ndarray
        """
        if isinstance(values, pd.Series):
            result = RPNEvaluator.evaluate(self._polish, values.to_numpy(dtype=np.float64))
            return pd.Series(result, index=values.index, name=self.eq_string)

        values = np.asarray(values, dtype=np.float64)
        if values.ndim == 0:
            return np.asarray(self.calculate_for(values.item()))
        return RPNEvaluator.evaluate(self._polish, values)
