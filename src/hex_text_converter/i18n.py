# hex_text_converter/i18n.py

from __future__ import annotations

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "title": "Text ⇆ Hex Converter",
        "subtitle": "Convert text to hexadecimal bytes and back",
        "menu_view": "View",
        "menu_edit": "Edit",
        "menu_help": "Help",
        "text_to_hex": "Text → Hex",
        "hex_to_text": "Hex → Text",
        "swap": "Swap",
        "input_text": "Input text",
        "input_hex": "Input hex",
        "output_text": "Text output",
        "output_hex": "Hex output",
        "paste": "Paste",
        "clear": "Clear",
        "copy": "Copy",
        "copied": "Copied!",
        "convert_now": "Convert now",
        "settings": "Settings",
        "delimiter": "Delimiter:",
        "prefix": "Prefix:",
        "uppercase": "Uppercase",
        "encoding": "Encoding:",
        "live_mode": "Live conversion",
        "recent": "Recent",
        "clear_history": "Clear history",
        "no_history": "No history yet",
        "toggle_theme": "Toggle Theme",
        "toggle_language": "中文",
        "toggle_live": "Toggle Live Conversion",
        "about": "About",
        "shortcuts": "Shortcuts…",
        "chars": "chars",
    },
    "zh": {
        "title": "文本 ⇆ 十六进制转换器",
        "subtitle": "在文本与十六进制字节之间相互转换",
        "menu_view": "视图",
        "menu_edit": "编辑",
        "menu_help": "帮助",
        "text_to_hex": "文本 → 十六进制",
        "hex_to_text": "十六进制 → 文本",
        "swap": "交换",
        "input_text": "输入文本",
        "input_hex": "输入十六进制",
        "output_text": "文本结果",
        "output_hex": "十六进制结果",
        "paste": "粘贴",
        "clear": "清空",
        "copy": "复制",
        "copied": "已复制！",
        "convert_now": "立即转换",
        "settings": "设置",
        "delimiter": "分隔符：",
        "prefix": "前缀：",
        "uppercase": "大写",
        "encoding": "编码：",
        "live_mode": "实时转换",
        "recent": "最近",
        "clear_history": "清除历史",
        "no_history": "暂无历史记录",
        "toggle_theme": "切换主题",
        "toggle_language": "English",
        "toggle_live": "切换实时转换",
        "about": "关于",
        "shortcuts": "快捷键…",
        "chars": "字符",
    },
}


def tr(language: str, key: str) -> str:
    """Look up ``key`` for ``language``, falling back to English, then the key itself."""
    table = TRANSLATIONS.get(language, TRANSLATIONS["en"])
    return table.get(key) or TRANSLATIONS["en"].get(key, key)
