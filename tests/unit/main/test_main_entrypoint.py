from __future__ import annotations

import runpy


def test_main_module_runs_uvicorn(monkeypatch):
    calls = {}

    def fake_run(app: str, **kwargs) -> None:
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setenv("GE_PORT", "8123")
    monkeypatch.setattr("uvicorn.run", fake_run)

    runpy.run_module("appliance_identifier.main.__main__", run_name="__main__")

    assert calls["app"] == "appliance_identifier.main.app:app"
    assert calls["port"] == 8123
