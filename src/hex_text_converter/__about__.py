# hex_text_converter/__about__.py

APP_NAME        = "Hex Text Converter"
APP_TITLE       = "Text ⇆ Hex Converter"   # window title / long name
DIST_NAME       = "hex-text-converter"
BUNDLE_ID       = "com.wiredsquare.hextextconverter"
AUTHOR          = "Wired Square"
COPYRIGHT_YEAR  = "2025"
COPYRIGHT       = f"© {COPYRIGHT_YEAR} {AUTHOR}"


__version__ = "0.1.0"

__all__ = [
    "__version__",
    "APP_NAME", "APP_TITLE", "DIST_NAME", "BUNDLE_ID",
    "AUTHOR", "COPYRIGHT_YEAR", "COPYRIGHT",
    "about_text",
]

def about_text() -> str:
    return (
        f"{APP_TITLE}\n"
        f"Version {__version__}\n"
        f"{COPYRIGHT}"
    )
