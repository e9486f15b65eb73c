"""求解器模块 - 解析入口和后缀表达式求解器"""
from .postfix_solver import EquationSolver, PostfixSolver
from .parser import PostfixParser, parse, DEFAULT_VARIABLE_SYMBOL

__all__ = ['EquationSolver', 'PostfixSolver', 'PostfixParser', 'parse', 'DEFAULT_VARIABLE_SYMBOL']
