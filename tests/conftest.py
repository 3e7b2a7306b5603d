import importlib
import pytest

@pytest.fixture(scope="session")
def logic():
    return importlib.import_module("hex_text_converter.logic")

@pytest.fixture
def settings():
    from hex_text_converter.settings import ConverterSettings
    return ConverterSettings

@pytest.fixture
def tk_root():
    tkinter = pytest.importorskip("tkinter")
    try:
        root = tkinter.Tk()
    except tkinter.TclError as exc:
        pytest.skip(f"no display available: {exc}")
    root.withdraw()
    yield root
    root.destroy()
