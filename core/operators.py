"""core/operators.py"""
import numpy as np


class Operators:
    """所有操作符的静态方法集合

    操作数可以是标量 (np.float64) 也可以是 ndarray。定义域错误按 IEEE-754
    传播为 NaN / inf，不抛异常；调用方负责用 np.errstate 屏蔽警告。
    """

    # 二元操作符========================================
    @staticmethod
    def add(left, right):
        return np.add(left, right)

    @staticmethod
    def sub(left, right):
        return np.subtract(left, right)

    @staticmethod
    def mul(left, right):
        return np.multiply(left, right)

    @staticmethod
    def div(left, right):
        return np.true_divide(left, right)

    @staticmethod
    def power(left, right):
        return np.power(left, right)

    @staticmethod
    def log(base, value):
        """以 base 为底的对数"""
        return np.log(value) / np.log(base)

    @staticmethod
    def max(left, right):
        return np.maximum(left, right)

    @staticmethod
    def min(left, right):
        return np.minimum(left, right)

    # 一元操作符====================
    @staticmethod
    def neg(operand):
        return np.negative(operand)

    @staticmethod
    def sqrt(operand):
        return np.sqrt(operand)

    @staticmethod
    def exp(operand):
        return np.exp(operand)

    @staticmethod
    def ln(operand):
        return np.log(operand)

    @staticmethod
    def log10(operand):
        return np.log10(operand)

    @staticmethod
    def log2(operand):
        return np.log2(operand)

    @staticmethod
    def abs(operand):
        return np.abs(operand)

    # 三角函数========================================
    @staticmethod
    def sin(operand):
        return np.sin(operand)

    @staticmethod
    def cos(operand):
        return np.cos(operand)

    @staticmethod
    def tan(operand):
        return np.tan(operand)

    @staticmethod
    def cot(operand):
        return 1.0 / np.tan(operand)

    @staticmethod
    def sec(operand):
        return 1.0 / np.cos(operand)

    @staticmethod
    def csc(operand):
        return 1.0 / np.sin(operand)

    @staticmethod
    def asin(operand):
        return np.arcsin(operand)

    @staticmethod
    def asinh(operand):
        return np.arcsinh(operand)

    @staticmethod
    def acos(operand):
        return np.arccos(operand)

    @staticmethod
    def acosh(operand):
        return np.arccosh(operand)

    @staticmethod
    def atan(operand):
        return np.arctan(operand)

    @staticmethod
    def atanh(operand):
        return np.arctanh(operand)
