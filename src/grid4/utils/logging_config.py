# ──────────────────────────────────────────────────────────────────────────────
# File: src/grid4/utils/logging_config.py  （全局日志配置，入口脚本调用一次）
# ──────────────────────────────────────────────────────────────────────────────
import logging
import sys

# simple：日常运行；detailed：带时间与文件行号，调试用
_FORMATS = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
}


def setup_logging(level: str = "INFO", format_style: str = "simple") -> None:
    # 未知级别退回 INFO，未知格式退回 simple
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    log_format = _FORMATS.get(format_style, _FORMATS["simple"])

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
