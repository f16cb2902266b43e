import pytest


@pytest.fixture
def four_labels():
    return ["A", "B", "C", "D"]


@pytest.fixture(autouse=True)
def _isolate_frame_config(monkeypatch):
    # Every test starts from the default frame regardless of the caller's environment
    import team_wheel.frame as fr

    monkeypatch.delenv("WHEEL_POINTER_ANGLE", raising=False)
    monkeypatch.delenv("WHEEL_SWEEP", raising=False)
    fr.get_frame.cache_clear()
    yield
    fr.get_frame.cache_clear()
