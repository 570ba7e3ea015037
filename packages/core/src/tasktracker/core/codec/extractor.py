"""字段值提取 -- 在单个扁平 JSON 对象体内按 key 查找值

不做通用词法分析：定位第一个 "<key>": 模式后，
按字符串或裸整数两种形态扫描值文本。
所有失败路径返回空字符串并记录警告，从不抛异常。
"""

import structlog

from .escape import unescape_string

log = structlog.get_logger()

ASCII_WHITESPACE = " \t\n\r\f\v"
_DIGITS = frozenset("0123456789")


def is_integer_text(text: str) -> bool:
    """可选负号 + 至少一位 ASCII 数字，不接受空白、下划线或其他数字字符"""
    digits = text[1:] if text.startswith("-") else text
    return bool(digits) and all(ch in _DIGITS for ch in digits)


def find_value(body: str, key: str) -> str:
    """查找 key 对应的值文本

    Args:
        body: 单个对象的内容（花括号之间的文本）
        key: 字段名

    Returns:
        字符串值（已反转义）或整数文本；key 不存在或值畸形时返回 ""
    """
    pattern = f'"{key}":'
    key_pos = body.find(pattern)
    if key_pos == -1:
        return ""

    pos = key_pos + len(pattern)
    end = len(body)
    while pos < end and body[pos] in ASCII_WHITESPACE:
        pos += 1
    if pos >= end:
        return ""

    if body[pos] == '"':
        return _scan_string(body, pos, key)
    return _scan_integer(body, pos, key)


def _scan_string(body: str, quote_pos: int, key: str) -> str:
    """从开引号起扫描到未转义的闭引号"""
    pos = quote_pos + 1
    in_escape = False
    while pos < len(body):
        ch = body[pos]
        if in_escape:
            in_escape = False
        elif ch == "\\":
            in_escape = True
        elif ch == '"':
            return unescape_string(body[quote_pos + 1 : pos])
        pos += 1

    log.warning("malformed_string_value", key=key)
    return ""


def _scan_integer(body: str, start: int, key: str) -> str:
    """读取到下一个 , 或 } 为止的裸整数文本"""
    candidates = [p for p in (body.find(",", start), body.find("}", start)) if p != -1]
    end = min(candidates) if candidates else len(body)

    token = body[start:end].rstrip(ASCII_WHITESPACE)
    if not token:
        log.warning("empty_numeric_value", key=key)
        return ""

    if not is_integer_text(token):
        log.warning("non_numeric_value", key=key, value=token)
        return ""
    return token
