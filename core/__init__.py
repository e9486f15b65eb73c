"""核心模块 - Token系统、分词器、中缀转后缀和RPN评估器"""
from .token_system import (
    TokenType, Associativity, Number, Variable, Constant, Operator, Delimiter,
    OPERATOR_DEFINITIONS, CONSTANT_DEFINITIONS, DELIMITER_DEFINITIONS,
    SPLITTER_SYMBOLS, UNARY_MINUS
)
from .exceptions import EquationError, MalformedExpression, StackUnderflow, EmptyResult
from .operators import Operators
from .tokenizer import tokenize, tokenize_async
from .shunting_yard import classify, to_postfix
from .rpn_evaluator import RPNEvaluator, RPNValidator

__all__ = [
    'TokenType', 'Associativity', 'Number', 'Variable', 'Constant', 'Operator', 'Delimiter',
    'OPERATOR_DEFINITIONS', 'CONSTANT_DEFINITIONS', 'DELIMITER_DEFINITIONS',
    'SPLITTER_SYMBOLS', 'UNARY_MINUS',
    'EquationError', 'MalformedExpression', 'StackUnderflow', 'EmptyResult',
    'Operators', 'tokenize', 'tokenize_async', 'classify', 'to_postfix',
    'RPNEvaluator', 'RPNValidator'
]
