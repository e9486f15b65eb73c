"""core/token_system.py"""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

import numpy as np


class TokenType(Enum):
    NUMBER = "number"        # 数字字面量
    VARIABLE = "variable"    # 自变量
    CONSTANT = "constant"    # pi, e
    OPERATOR = "operator"    # 操作符 / 函数
    DELIMITER = "delimiter"  # 括号、参数分隔符


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Number:
    value: float
    type: TokenType = field(default=TokenType.NUMBER, init=False, repr=False)

    def render(self):
        value = float(self.value)
        # 整数值去掉多余的 '.0'
        if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)


@dataclass(frozen=True)
class Variable:
    symbol: str
    type: TokenType = field(default=TokenType.VARIABLE, init=False, repr=False)

    def render(self):
        return self.symbol


@dataclass(frozen=True)
class Constant:
    name: str
    value: float
    moniker: str
    type: TokenType = field(default=TokenType.CONSTANT, init=False, repr=False)

    def render(self):
        return self.moniker


@dataclass(frozen=True)
class Operator:
    name: str
    symbol: str
    precedence: int
    arity: int
    associativity: Associativity = Associativity.LEFT
    is_function: bool = False  # 前缀函数形式: sin(x), max(a, b)
    type: TokenType = field(default=TokenType.OPERATOR, init=False, repr=False)

    def render(self):
        return self.symbol


@dataclass(frozen=True)
class Delimiter:
    name: str
    symbol: str
    type: TokenType = field(default=TokenType.DELIMITER, init=False, repr=False)

    def render(self):
        return self.symbol


_LEFT = Associativity.LEFT
_RIGHT = Associativity.RIGHT
FUNCTION_PRECEDENCE = 5


def _function(name, arity=1):
    return Operator(name, name, FUNCTION_PRECEDENCE, arity, _RIGHT, is_function=True)


_OPERATORS = [
    # 中缀操作符
    Operator('add', '+', 2, 2, _LEFT),
    Operator('sub', '-', 2, 2, _LEFT),
    Operator('mul', '*', 3, 2, _LEFT),
    Operator('div', '/', 3, 2, _LEFT),
    Operator('power', '^', 4, 2, _RIGHT),

    # 幂 / 对数
    _function('sqrt'),
    _function('exp'),
    _function('log', arity=2),  # log(base, value)
    _function('ln'),
    _function('log10'),
    _function('log2'),

    # 三角 / 反三角 / 反双曲
    _function('sin'),
    _function('cos'),
    _function('tan'),
    _function('cot'),
    _function('sec'),
    _function('csc'),
    _function('asin'),
    _function('asinh'),
    _function('acos'),
    _function('acosh'),
    _function('atan'),
    _function('atanh'),

    # 其他
    _function('abs'),
    _function('max', arity=2),
    _function('min', arity=2),
]

# 一元负号只由转换器根据上下文产生，不参与切分
UNARY_MINUS = Operator('neg', 'neg', 4, 1, _RIGHT)

OPERATOR_DEFINITIONS = MappingProxyType({op.symbol: op for op in _OPERATORS})

CONSTANT_DEFINITIONS = MappingProxyType({
    'pi': Constant('PI', float(np.pi), 'pi'),
    'e': Constant('E', float(np.e), 'e'),
})

OPEN_PAREN = Delimiter('open', '(')
CLOSE_PAREN = Delimiter('close', ')')
ARG_SEPARATOR = Delimiter('separator', ',')

DELIMITER_DEFINITIONS = MappingProxyType({
    d.symbol: d for d in (OPEN_PAREN, CLOSE_PAREN, ARG_SEPARATOR)
})

# 切分顺序: 先分隔符，再操作符（长的在前，避免 'sin' 把 'asinh' 切碎）
SPLITTER_SYMBOLS = tuple(DELIMITER_DEFINITIONS) + tuple(
    sorted(OPERATOR_DEFINITIONS, key=len, reverse=True)
)
KNOWN_SYMBOLS = frozenset(SPLITTER_SYMBOLS)
