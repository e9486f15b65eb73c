"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

import numpy as np

from core.exceptions import EmptyResult, StackUnderflow
from core.operators import Operators
from core.token_system import TokenType

logger = logging.getLogger(__name__)

OPERAND_TYPES = (TokenType.NUMBER, TokenType.VARIABLE, TokenType.CONSTANT)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(postfix, value=0.0):
        """
        用栈机评估RPN序列
        Args:
            postfix: 后缀顺序的Token序列
            value: 自变量的取值，标量或数组
        Returns:
            标量输入返回 float，数组输入返回同形状的 ndarray
        Raises:
            StackUnderflow: 操作符执行时操作数不足
            EmptyResult: 结束时栈中不是恰好一个值
        """
        is_array = np.ndim(value) > 0
        variable = np.asarray(value, dtype=np.float64) if is_array else np.float64(value)
        stack = []

        # 定义域错误按 IEEE-754 传播为 NaN / inf
        with np.errstate(all='ignore'):
            for token in postfix:
                if token.type is TokenType.NUMBER:
                    stack.append(np.float64(token.value))
                elif token.type is TokenType.CONSTANT:
                    stack.append(np.float64(token.value))
                elif token.type is TokenType.VARIABLE:
                    stack.append(variable)
                elif token.type is TokenType.OPERATOR:
                    if len(stack) < token.arity:
                        logger.debug(f"Insufficient operands for {token.symbol}")
                        raise StackUnderflow(token.symbol, token.arity, len(stack))

                    op_method = getattr(Operators, token.name)
                    if token.arity == 1:
                        operand = stack.pop()
                        stack.append(op_method(operand))
                    else:
                        # 先弹出右操作数，再弹出左操作数
                        right = stack.pop()
                        left = stack.pop()
                        stack.append(op_method(left, right))
                else:
                    raise TypeError(f"Unexpected token in postfix sequence: {token!r}")

        if len(stack) != 1:
            logger.debug(f"Stack content: {stack}")
            raise EmptyResult(len(stack))

        result = stack[0]
        if is_array:
            # 不含自变量的表达式结果是标量，扩展为与输入同形状
            return np.broadcast_to(result, variable.shape).astype(np.float64)
        return float(result)


class RPNValidator:
    @staticmethod
    def calculate_stack_size(postfix):
        """模拟栈深度（不计算数值）；出现下溢时返回 None"""
        stack_size = 0
        for token in postfix:
            if token.type in OPERAND_TYPES:
                stack_size += 1
            elif token.type is TokenType.OPERATOR:
                if stack_size < token.arity:
                    return None
                stack_size = stack_size - token.arity + 1
            else:
                return None
        return stack_size

    @staticmethod
    def is_complete(postfix):
        """完整表达式应该正好留下1个结果"""
        return RPNValidator.calculate_stack_size(postfix) == 1
