"""分词器 - 逐级按分隔符/操作符切分表达式字符串"""
import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor

from config.config import TOKENIZER_CONFIG
from core.token_system import SPLITTER_SYMBOLS, KNOWN_SYMBOLS

logger = logging.getLogger(__name__)


def normalize(raw):
    """去掉所有空白并转为小写"""
    return ''.join((raw or '').split()).lower()


def split_fragment(fragment, splitter):
    """
    按 splitter 字面切分片段，并把 splitter 本身保留在各段之间

    长度 <= 1 的片段和已识别的符号原样返回；切分产生的空串被丢弃。
    """
    if len(fragment) <= 1 or fragment in KNOWN_SYMBOLS:
        return [fragment]

    pieces = []
    for part in fragment.split(splitter):
        if part:
            pieces.append(part)
        pieces.append(splitter)
    pieces.pop()  # 最后一段后面没有 splitter
    return pieces


def _split_level(fragments, splitter, mapper=map):
    """对一级中的所有片段做切分，并按原顺序拼接"""
    result = []
    for pieces in mapper(lambda f: split_fragment(f, splitter), fragments):
        result.extend(pieces)
    return result


def _use_fan_out(eq):
    return len(eq) >= TOKENIZER_CONFIG['parallel_threshold']


def tokenize(raw, executor=None):
    """
    把原始表达式切分为有序的字符串Token列表，不会失败。

    Args:
        raw: 表达式字符串
        executor: 可选的 concurrent.futures 执行器；为 None 时仅在输入足够长时
            临时创建线程池
    Returns:
        字符串Token列表（保持从左到右的顺序）
    """
    eq = normalize(raw)
    if not eq:
        return []

    if executor is None and _use_fan_out(eq):
        with ThreadPoolExecutor(max_workers=TOKENIZER_CONFIG['max_workers']) as pool:
            return tokenize(eq, executor=pool)

    mapper = executor.map if executor is not None else map
    breaks = [eq]
    # 各级严格按顺序执行；同一级内的片段互不依赖
    for splitter in SPLITTER_SYMBOLS:
        breaks = _split_level(breaks, splitter, mapper)

    logger.debug(f"Tokenized '{eq}' into {len(breaks)} tokens")
    return breaks


async def tokenize_async(raw):
    """tokenize 的协程版本，供已在事件循环中的调用方使用"""
    eq = normalize(raw)
    if not eq:
        return []

    fan_out = _use_fan_out(eq)
    breaks = [eq]
    for splitter in SPLITTER_SYMBOLS:
        if fan_out:
            parts = await asyncio.gather(
                *[asyncio.to_thread(split_fragment, f, splitter) for f in breaks]
            )
        else:
            parts = [split_fragment(f, splitter) for f in breaks]
        breaks = [piece for pieces in parts for piece in pieces]

    logger.debug(f"Tokenized '{eq}' into {len(breaks)} tokens")
    return breaks
