"""中缀转后缀 - Shunting-yard 算法"""
import logging
import re

from config.config import PARSER_CONFIG
from core.exceptions import MalformedExpression
from core.rpn_evaluator import RPNValidator
from core.token_system import (
    TokenType, Associativity, Number, Variable,
    OPERATOR_DEFINITIONS, CONSTANT_DEFINITIONS, DELIMITER_DEFINITIONS,
    OPEN_PAREN, CLOSE_PAREN, UNARY_MINUS,
)

logger = logging.getLogger(__name__)

# 只接受普通十进制字面量: 12, 1.5, .5, 5.
NUMBER_PATTERN = re.compile(r'^(\d+\.?\d*|\.\d+)$')


def _malformed(message):
    logger.debug(f"Malformed expression: {message}")
    return MalformedExpression(message)


def classify(text, variable_symbol=PARSER_CONFIG['variable_symbol']):
    """把字符串Token转为类型化Token"""
    if text in DELIMITER_DEFINITIONS:
        return DELIMITER_DEFINITIONS[text]
    if text in OPERATOR_DEFINITIONS:
        return OPERATOR_DEFINITIONS[text]
    if text == variable_symbol:
        return Variable(variable_symbol)
    if text in CONSTANT_DEFINITIONS:
        return CONSTANT_DEFINITIONS[text]
    if NUMBER_PATTERN.match(text):
        return Number(float(text))
    raise _malformed(f"Unknown token: '{text}'")


def _pop_higher(stack, output, op):
    """弹出优先级更高（或同级且 op 左结合）的操作符"""
    while stack:
        top = stack[-1]
        if top.type is not TokenType.OPERATOR:
            break
        if top.precedence > op.precedence or (
                top.precedence == op.precedence and op.associativity is Associativity.LEFT):
            output.append(stack.pop())
        else:
            break


def _pop_until_open(stack, output):
    """弹出操作符直到遇到左括号（左括号保留在栈顶）"""
    while stack and stack[-1] != OPEN_PAREN:
        output.append(stack.pop())
    if not stack:
        raise _malformed("Unbalanced ')': no matching '('")


def to_postfix(tokens, variable_symbol=PARSER_CONFIG['variable_symbol']):
    """
    把分词结果转换为后缀顺序的Token列表（不含分隔符）

    Args:
        tokens: tokenize 产生的字符串Token序列
        variable_symbol: 自变量符号
    Returns:
        list of Token
    Raises:
        MalformedExpression: 括号不匹配、未知Token或操作数缺失
    """
    if not tokens:
        raise _malformed("Empty expression")

    output = []
    stack = []             # 操作符和左括号
    frames = []            # 每个未闭合的左括号: [所属函数或None, 参数个数]
    expect_operand = True  # 下一个位置需要操作数
    pending_function = None

    for text in tokens:
        token = classify(text, variable_symbol)

        if pending_function is not None and token != OPEN_PAREN:
            raise _malformed(f"Function '{pending_function.symbol}' must be followed by '('")

        if token.type in (TokenType.NUMBER, TokenType.VARIABLE, TokenType.CONSTANT):
            if not expect_operand:
                raise _malformed(f"Missing operator before '{text}'")
            output.append(token)
            expect_operand = False

        elif token.type is TokenType.OPERATOR:
            if token.is_function:
                if not expect_operand:
                    raise _malformed(f"Missing operator before '{text}'")
                stack.append(token)
                pending_function = token
            elif expect_operand:
                # 前缀位置的 '-' 是一元负号，'+' 直接忽略
                if token.symbol == '-':
                    stack.append(UNARY_MINUS)
                elif token.symbol != '+':
                    raise _malformed(f"Operator '{text}' is missing its left operand")
            else:
                _pop_higher(stack, output, token)
                stack.append(token)
                expect_operand = True

        elif token == OPEN_PAREN:
            if not expect_operand:
                raise _malformed("Missing operator before '('")
            frames.append([pending_function, 1])
            pending_function = None
            stack.append(token)

        elif token == CLOSE_PAREN:
            if not frames:
                raise _malformed("Unbalanced ')': no matching '('")
            if expect_operand:
                raise _malformed("Missing operand before ')'")
            _pop_until_open(stack, output)
            stack.pop()
            function, arg_count = frames.pop()
            if function is not None:
                if arg_count != function.arity:
                    raise _malformed(
                        f"Function '{function.symbol}' expects {function.arity} "
                        f"argument(s), got {arg_count}")
                output.append(stack.pop())
            expect_operand = False

        else:  # 参数分隔符 ','
            if not frames or frames[-1][0] is None:
                raise _malformed("Argument separator ',' outside of a function call")
            if expect_operand:
                raise _malformed("Missing argument before ','")
            _pop_until_open(stack, output)
            frames[-1][1] += 1
            expect_operand = True

    if pending_function is not None:
        raise _malformed(f"Function '{pending_function.symbol}' must be followed by '('")
    if expect_operand:
        raise _malformed("Expression ends without an operand")

    while stack:
        top = stack.pop()
        if top == OPEN_PAREN:
            raise _malformed("Unbalanced '(': missing ')'")
        output.append(top)

    if not RPNValidator.is_complete(output):
        raise _malformed("Operator is missing required operands")

    logger.debug(f"Postfix: {' '.join(t.render() for t in output)}")
    return output
