"""手写 JSON 子集编解码

仅支持扁平对象组成的顶层数组，值类型限于字符串与整数。
"""

from .escape import escape_string, unescape_string
from .extractor import find_value, is_integer_text
from .parser import iter_object_bodies, parse_document, parse_record
from .writer import render_document, render_task

__all__ = [
    "escape_string",
    "unescape_string",
    "find_value",
    "is_integer_text",
    "iter_object_bodies",
    "parse_record",
    "parse_document",
    "render_task",
    "render_document",
]
