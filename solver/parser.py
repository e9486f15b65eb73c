"""后缀表达式（RPN）解析器 - 用 Shunting-yard 算法解析数学表达式"""
import logging

from config.config import PARSER_CONFIG
from core.token_system import CONSTANT_DEFINITIONS
from core.tokenizer import tokenize, tokenize_async
from core.shunting_yard import to_postfix
from solver.postfix_solver import PostfixSolver

logger = logging.getLogger(__name__)

DEFAULT_VARIABLE_SYMBOL = PARSER_CONFIG['variable_symbol']


class PostfixParser:

    def __init__(self, eq_string, variable_symbol=DEFAULT_VARIABLE_SYMBOL):
        """
        Args:
            eq_string: 表达式字符串
            variable_symbol: 自变量符号（单个字母）
        """
        symbol = (variable_symbol or '').lower()
        if len(symbol) != 1 or not symbol.isalpha():
            raise ValueError(f"Variable symbol must be a single letter, got '{variable_symbol}'")
        if symbol in CONSTANT_DEFINITIONS:
            raise ValueError(f"Variable symbol '{variable_symbol}' clashes with a constant")

        self.eq_string = eq_string
        self.variable_symbol = symbol

    def parse(self):
        """
        阻塞式解析，在普通线程中调用

        Returns:
            PostfixSolver
        """
        logger.debug(f"Parsing expression: {self.eq_string}")
        splits = tokenize(self.eq_string)
        return PostfixSolver(to_postfix(splits, self.variable_symbol), self.variable_symbol)

    async def parse_async(self):
        """协程版本，在事件循环中 await 调用"""
        logger.debug(f"Parsing expression: {self.eq_string}")
        splits = await tokenize_async(self.eq_string)
        return PostfixSolver(to_postfix(splits, self.variable_symbol), self.variable_symbol)


def parse(expression, variable_symbol=DEFAULT_VARIABLE_SYMBOL):
    """PostfixParser(expression, variable_symbol).parse() 的简写"""
    return PostfixParser(expression, variable_symbol).parse()
