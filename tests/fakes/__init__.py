from .fake_editor import FailingEditor, FakeEditor, UnspawnableEditor

__all__ = ["FakeEditor", "FailingEditor", "UnspawnableEditor"]
