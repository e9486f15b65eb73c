"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 解析器参数
PARSER_CONFIG = {
    "variable_symbol": "x",  # 默认自变量符号
}

# 分词器参数
TOKENIZER_CONFIG = {
    "parallel_threshold": 256,  # 规范化后长度达到该值才启用并行切分
    "max_workers": 4,
}

# 采样 / 求根参数
SAMPLING_CONFIG = {
    "start": -10.0,
    "stop": 10.0,
    "num": 201,
    "root_xtol": 1e-12,
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    symbol = PARSER_CONFIG["variable_symbol"]
    assert len(symbol) == 1 and symbol.isalpha(), "自变量必须是单个字母"
    assert TOKENIZER_CONFIG["parallel_threshold"] > 0, "并行阈值必须为正"
    assert TOKENIZER_CONFIG["max_workers"] >= 1, "至少需要一个工作线程"
    assert SAMPLING_CONFIG["start"] < SAMPLING_CONFIG["stop"], "采样区间无效"
    assert SAMPLING_CONFIG["num"] >= 2, "采样点数至少为2"
    assert SAMPLING_CONFIG["root_xtol"] > 0, "求根精度必须为正"
    logger.info("Configuration validated successfully!")
    return True
