"""JSON 字符串转义 / 反转义

仅处理双引号与反斜杠，不转义控制字符。
"""


def escape_string(text: str) -> str:
    """将原始文本转为 JSON 字符串字面量内容（不含外层引号）"""
    # 先处理反斜杠，避免对新插入的反斜杠二次转义
    return text.replace("\\", "\\\\").replace('"', '\\"')


def unescape_string(text: str) -> str:
    """escape_string 的逆变换

    \\" 与 \\\\ 还原为字面字符；其他转义序列原样保留（反斜杠 + 字符），
    容忍畸形转义而不报错。末尾孤立的反斜杠同样原样保留。
    """
    out: list[str] = []
    escaped = False
    for ch in text:
        if escaped:
            if ch in ('"', "\\"):
                out.append(ch)
            else:
                out.append("\\")
                out.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        else:
            out.append(ch)
    if escaped:
        out.append("\\")
    return "".join(out)
