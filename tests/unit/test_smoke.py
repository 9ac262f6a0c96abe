"""Basic smoke tests for the package layout."""
import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def test_imports():
    import api_server  # noqa: F401
    import ui.views  # noqa: F401
    from config.settings import settings

    assert settings.APP_CONFIG_PATH.endswith(".json")


def test_streamlit_entry_point_header():
    tree = ast.parse((ROOT / "ui" / "streamlit_app.py").read_text(encoding="utf-8"))
    assert ast.get_docstring(tree)
    future = tree.body[1]
    assert isinstance(future, ast.ImportFrom) and future.module == "__future__"
