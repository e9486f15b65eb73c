"""解析 / 求值过程中的异常类型"""


class EquationError(Exception):
    """所有结构性错误的基类"""


class MalformedExpression(EquationError, ValueError):
    """括号不匹配、未知Token或操作数位置缺失"""


class StackUnderflow(EquationError):
    """操作符执行时栈中操作数不足"""

    def __init__(self, operator, required, available):
        self.operator = operator
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient operands for {operator}: "
            f"required {required}, available {available}"
        )


class EmptyResult(EquationError):
    """求值结束后栈中不是恰好一个值"""

    def __init__(self, stack_size):
        self.stack_size = stack_size
        super().__init__(f"Stack has {stack_size} elements after evaluation, expected 1")
