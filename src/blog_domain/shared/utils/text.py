"""文本处理工具"""


def normalize_text(value: str | None) -> str:
    """缺失值视为空字符串，并去除首尾空白"""
    if value is None:
        return ""
    return value.strip()
